import io
import json

import pytest

from gapirest.mapsengine import v1
from gapirest.mapsengine.v1 import (Feature, FeaturesBatchInsertRequest, GeoJsonGeometry,
                                    GeoJsonGeometryCollection, GeoJsonLineString, GeoJsonPoint,
                                    GeoJsonPolygon, MapsengineService, Table)


@pytest.fixture
def maps(session):
    return MapsengineService(session)


def test_geometry_variants():
    assert(GeoJsonGeometry.discriminant == "type")
    assert(sorted(GeoJsonGeometry.variants()) == [
        "GeometryCollection", "LineString", "MultiLineString", "MultiPoint", "MultiPolygon", "Point", "Polygon"
    ])


def test_decode_geometries():
    pt = GeoJsonGeometry.from_base({'type': "Point", 'coordinates': [-122.08, 37.42]})
    assert(isinstance(pt, GeoJsonPoint))
    assert(pt.coordinates == [-122.08, 37.42])

    poly = GeoJsonGeometry.from_base({'type': "Polygon", 'coordinates': [[[0, 0], [1, 0], [1, 1], [0, 0]]]})
    assert(isinstance(poly, GeoJsonPolygon))
    assert(poly.coordinates[0][2] == [1.0, 1.0])

    coll = GeoJsonGeometry.from_base({'type': "GeometryCollection", 'geometries': [
        {'type': "Point", 'coordinates': [1, 2]},
        {'type': "LineString", 'coordinates': [[1, 2], [3, 4]]}
    ]})
    assert(isinstance(coll, GeoJsonGeometryCollection))
    assert(isinstance(coll.geometries[1], GeoJsonLineString))


def test_encode_geometry():
    pt = GeoJsonPoint(coordinates=[1.5, 2.5])
    assert(pt.to_base() == {'type': "Point", 'coordinates': [1.5, 2.5]})


def test_feature_round_trip():
    f = Feature(
        type="Feature",
        geometry=GeoJsonGeometryCollection(geometries=[GeoJsonPoint(coordinates=[0.0, 1.0])]),
        properties={'gx_id': "1", 'name': "Shoreline Park", 'visitors': 12}
    )
    assert(Feature.from_base(json.loads(json.dumps(f.to_base()))) == f)


def test_list_assets(maps, session):
    session.reply(200, {'assets': [{'id': "a1", 'type': "table", 'bbox': [-1, -1, 1, 1]}], 'nextPageToken': ""})
    resp = maps.assets.list().type("table,layer").maxResults(5).search("parks").execute()
    assert(resp.assets[0].type == "table")
    assert(resp.assets[0].bbox == [-1.0, -1.0, 1.0, 1.0])
    assert(session.calls[0]['url'] == (
        "https://www.googleapis.com/mapsengine/v1/assets?alt=json&maxResults=5&search=parks&type=table%2Clayer"
    ))


def test_list_features(maps, session):
    session.reply(200, {
        'type': "FeatureCollection",
        'features': [{
            'type': "Feature",
            'geometry': {'type': "Point", 'coordinates': [-122.08, 37.42]},
            'properties': {'gx_id': "1"}
        }],
        'schema': {'columns': [{'name': "gx_id", 'type': "string"}], 'primaryKey': "gx_id"}
    })
    resp = maps.tables.features.list("12345-67890").where("visitors > 10").include("schema").limit(100).execute()
    assert(isinstance(resp.features[0].geometry, GeoJsonPoint))
    assert(resp.features[0].properties == {'gx_id': "1"})
    assert(resp.schema.columns[0].name == "gx_id")
    assert(session.calls[0]['url'].startswith(
        "https://www.googleapis.com/mapsengine/v1/tables/12345-67890/features?alt=json&include=schema&limit=100&where="
    ))


def test_batch_insert(maps, session):
    session.reply(204)
    req = FeaturesBatchInsertRequest(features=[
        Feature(type="Feature", geometry=GeoJsonPoint(coordinates=[1.0, 2.0]), properties={'gx_id': "9"})
    ])
    assert(maps.tables.features.batchInsert("t1", req).execute() is None)
    call = session.calls[0]
    assert(call['method'] == "POST")
    assert(call['url'].startswith(v1.BASE_URL + "tables/t1/features/batchInsert?"))
    assert(json.loads(call['data']) == {'features': [
        {'type': "Feature", 'geometry': {'type': "Point", 'coordinates': [1.0, 2.0]}, 'properties': {'gx_id': "9"}}
    ]})


def test_upload_table_then_file(maps, session):
    session.reply(200, {'id': "t1", 'files': [{'filename': "parks.csv", 'uploadStatus': "inProgress"}]})
    session.reply(204)
    table = maps.tables.upload(Table(name="Parks", projectId="p1", files=[v1.File(filename="parks.csv")])).execute()
    assert(table.id == "t1")
    assert(table.files[0].uploadStatus == "inProgress")

    data = io.BytesIO(b"name,lat,lng\nShoreline,37.42,-122.08\n")
    assert(maps.tables.files.insert(table.id, "parks.csv").media(data, "text/csv").execute() is None)
    call = session.calls[1]
    assert(call['url'] == (
        "https://www.googleapis.com/upload/mapsengine/v1/tables/t1/files"
        "?alt=json&filename=parks.csv&uploadType=multipart"
    ))
    assert(call['headers']['Content-Type'].startswith("multipart/related"))
    assert(b"Shoreline,37.42,-122.08" in call['data'])


def test_file_size_int64():
    f = v1.File(filename="big.csv", size=5000000000)
    assert(f.to_base() == {'filename': "big.csv", 'size': "5000000000"})


def test_get_table_is_not_an_upload(maps):
    with pytest.raises(TypeError):
        maps.tables.get("t1").media(b"x")
    req = maps.tables.get("t1").version("published").request()
    assert(req.url == "https://www.googleapis.com/mapsengine/v1/tables/t1?alt=json&version=published")
