"""
Google Maps Engine API v1

The Google Maps Engine API allows developers to store and query geospatial
vector and raster data.
See https://developers.google.com/maps-engine/

Generated by gapirest.generator from the mapsengine:v1 discovery document.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List

from gapirest.resources import ApiResource, INT64
from gapirest.service import ApiCall, ApiService, ResourceService
from gapirest.unions import TaggedUnion

API_ID = "mapsengine:v1"
API_NAME = "mapsengine"
API_VERSION = "v1"
BASE_URL = "https://www.googleapis.com/mapsengine/v1/"

# View and manage your Google Maps Engine data
MAPSENGINE_SCOPE = "https://www.googleapis.com/auth/mapsengine"
# View your Google Maps Engine data
MAPSENGINE_READONLY_SCOPE = "https://www.googleapis.com/auth/mapsengine.readonly"


class GeoJsonGeometry(TaggedUnion, discriminant="type"):
    pass


@dataclass
class Asset(ApiResource):
    """
    An asset is any Google Maps Engine resource that has a globally unique
    ID. Assets include maps, layers, vector tables, raster collections, and
    rasters. Projects and features are not considered assets.
    """
    bbox: List[float]|None = field(default=None)
    creationTime: str|None = field(default=None)
    creatorEmail: str|None = field(default=None)
    description: str|None = field(default=None)
    etag: str|None = field(default=None)
    id: str|None = field(default=None)
    lastModifiedTime: str|None = field(default=None)
    lastModifierEmail: str|None = field(default=None)
    name: str|None = field(default=None)
    projectId: str|None = field(default=None)
    resource: str|None = field(default=None)
    tags: List[str]|None = field(default=None)
    type: str|None = field(default=None)
    writersCanEditPermissions: bool|None = field(default=None)


@dataclass
class AssetsListResponse(ApiResource):
    """The response returned by a call to resources.List."""
    assets: List[Asset]|None = field(default=None)
    nextPageToken: str|None = field(default=None)


@dataclass
class Feature(ApiResource):
    """A feature within a table."""
    geometry: GeoJsonGeometry|None = field(default=None)
    properties: GeoJsonProperties|None = field(default=None)
    type: str|None = field(default=None)


@dataclass
class FeaturesBatchInsertRequest(ApiResource):
    """The request sent to features.BatchInsert."""
    features: List[Feature]|None = field(default=None)
    normalizeGeometries: bool|None = field(default=None)


@dataclass
class FeaturesListResponse(ApiResource):
    """The response returned by a call to features.List."""
    allowedQueriesPerSecond: float|None = field(default=None)
    features: List[Feature]|None = field(default=None)
    nextPageToken: str|None = field(default=None)
    schema: Schema|None = field(default=None)
    type: str|None = field(default=None)


@dataclass
class File(ApiResource):
    """A single File, which is a component of a Table or Raster."""
    filename: str|None = field(default=None)
    size: int|None = field(default=None, metadata=INT64)
    uploadStatus: str|None = field(default=None)


@dataclass
class GeoJsonGeometryCollection(GeoJsonGeometry, tag="GeometryCollection"):
    """A heterogenous collection of GeoJsonGeometry objects."""
    geometries: List[GeoJsonGeometry]|None = field(default=None)


@dataclass
class GeoJsonLineString(GeoJsonGeometry, tag="LineString"):
    coordinates: List[GeoJsonPosition]|None = field(default=None)


@dataclass
class GeoJsonMultiLineString(GeoJsonGeometry, tag="MultiLineString"):
    coordinates: List[List[GeoJsonPosition]]|None = field(default=None)


@dataclass
class GeoJsonMultiPoint(GeoJsonGeometry, tag="MultiPoint"):
    coordinates: List[GeoJsonPosition]|None = field(default=None)


@dataclass
class GeoJsonMultiPolygon(GeoJsonGeometry, tag="MultiPolygon"):
    coordinates: List[List[List[GeoJsonPosition]]]|None = field(default=None)


@dataclass
class GeoJsonPoint(GeoJsonGeometry, tag="Point"):
    coordinates: GeoJsonPosition|None = field(default=None)


@dataclass
class GeoJsonPolygon(GeoJsonGeometry, tag="Polygon"):
    coordinates: List[List[GeoJsonPosition]]|None = field(default=None)


@dataclass
class Schema(ApiResource):
    """
    A schema indicating the properties which may be associated with features
    within a Table, and the types of those properties.
    """
    columns: List[TableColumn]|None = field(default=None)
    primaryGeometry: str|None = field(default=None)
    primaryKey: str|None = field(default=None)


@dataclass
class Table(ApiResource):
    """A collection of geographic features, and associated metadata."""
    bbox: List[float]|None = field(default=None)
    creationTime: str|None = field(default=None)
    creatorEmail: str|None = field(default=None)
    description: str|None = field(default=None)
    draftAccessList: str|None = field(default=None)
    etag: str|None = field(default=None)
    files: List[File]|None = field(default=None)
    id: str|None = field(default=None)
    lastModifiedTime: str|None = field(default=None)
    lastModifierEmail: str|None = field(default=None)
    name: str|None = field(default=None)
    processingStatus: str|None = field(default=None)
    projectId: str|None = field(default=None)
    publishedAccessList: str|None = field(default=None)
    schema: Schema|None = field(default=None)
    sourceEncoding: str|None = field(default=None)
    tags: List[str]|None = field(default=None)
    writersCanEditPermissions: bool|None = field(default=None)


@dataclass
class TableColumn(ApiResource):
    name: str|None = field(default=None)
    type: str|None = field(default=None)


@dataclass
class TablesListResponse(ApiResource):
    """The response returned by a call to tables.List."""
    nextPageToken: str|None = field(default=None)
    tables: List[Table]|None = field(default=None)


GeoJsonPosition = List[float]


GeoJsonProperties = dict[str, Any]


class AssetsGetCall(ApiCall):
    method = "GET"
    path = "assets/{id}"
    response = Asset


class AssetsListCall(ApiCall):
    method = "GET"
    path = "assets"
    response = AssetsListResponse

    def bbox(self, bbox: str) -> AssetsListCall:
        """
        A bounding box, expressed as "west,south,east,north". If set, only
        assets which intersect this bounding box will be returned.
        """
        return self._query("bbox", bbox)

    def creatorEmail(self, creatorEmail: str) -> AssetsListCall:
        """
        An email address representing a user. Returned assets that have been
        created by the user associated with the provided email address.
        """
        return self._query("creatorEmail", creatorEmail)

    def maxResults(self, maxResults: int) -> AssetsListCall:
        """
        The maximum number of items to include in a single response page. The
        maximum supported value is 100.
        """
        return self._query("maxResults", maxResults)

    def pageToken(self, pageToken: str) -> AssetsListCall:
        """
        The continuation token, used to page through large result sets. To get
        the next page of results, set this parameter to the value of
        nextPageToken from the previous response.
        """
        return self._query("pageToken", pageToken)

    def projectId(self, projectId: str) -> AssetsListCall:
        """
        The ID of a Maps Engine project, used to filter the response. To list
        all available projects with their IDs, send a Projects: list request.
        You can also find your project ID as the value of the DashboardPlace:cid
        URL parameter when signed in to mapsengine.google.com.
        """
        return self._query("projectId", projectId)

    def search(self, search: str) -> AssetsListCall:
        """
        An unstructured search string used to filter the set of results based on
        asset metadata.
        """
        return self._query("search", search)

    def tags(self, tags: str) -> AssetsListCall:
        """
        A comma separated list of tags. Returned assets will contain all the
        tags from the list.
        """
        return self._query("tags", tags)

    def type(self, type: str) -> AssetsListCall:
        """
        A comma separated list of asset types. Returned assets will have one of
        the types from the provided list. Supported values are 'map', 'layer',
        'rasterCollection' and 'table'.
        """
        return self._query("type", type)


class AssetsService(ResourceService):
    def get(self, id: str) -> AssetsGetCall:
        """Return metadata for a particular asset."""
        return AssetsGetCall(self.service, path_params={"id": id})

    def list(self) -> AssetsListCall:
        """Return all assets readable by the current user."""
        return AssetsListCall(self.service)


class TablesCreateCall(ApiCall):
    method = "POST"
    path = "tables"
    response = Table


class TablesGetCall(ApiCall):
    method = "GET"
    path = "tables/{id}"
    response = Table

    def version(self, version: str) -> TablesGetCall:
        """
        Deprecated: The version parameter indicates which version of the table
        should be returned. When version is set to published, the published
        version of the table will be returned. Please use the
        tables.getpublished endpoint instead.
        """
        return self._query("version", version)


class TablesListCall(ApiCall):
    method = "GET"
    path = "tables"
    response = TablesListResponse

    def maxResults(self, maxResults: int) -> TablesListCall:
        """
        The maximum number of items to include in a single response page. The
        maximum supported value is 100.
        """
        return self._query("maxResults", maxResults)

    def pageToken(self, pageToken: str) -> TablesListCall:
        """
        The continuation token, used to page through large result sets. To get
        the next page of results, set this parameter to the value of
        nextPageToken from the previous response.
        """
        return self._query("pageToken", pageToken)

    def projectId(self, projectId: str) -> TablesListCall:
        """The ID of a Maps Engine project, used to filter the response."""
        return self._query("projectId", projectId)

    def search(self, search: str) -> TablesListCall:
        """
        An unstructured search string used to filter the set of results based on
        asset metadata.
        """
        return self._query("search", search)


class TablesUploadCall(ApiCall):
    method = "POST"
    path = "tables/upload"
    response = Table


class TablesFeaturesBatchInsertCall(ApiCall):
    method = "POST"
    path = "tables/{id}/features/batchInsert"


class TablesFeaturesListCall(ApiCall):
    method = "GET"
    path = "tables/{id}/features"
    response = FeaturesListResponse

    def include(self, include: str) -> TablesFeaturesListCall:
        """
        A comma separated list of optional data to include. Optional data
        available: schema.
        """
        return self._query("include", include)

    def intersects(self, intersects: str) -> TablesFeaturesListCall:
        """A geometry literal that specifies the spatial restriction of the query."""
        return self._query("intersects", intersects)

    def limit(self, limit: int) -> TablesFeaturesListCall:
        """
        The total number of features to return from the query, irrespective of
        the number of pages.
        """
        return self._query("limit", limit)

    def maxResults(self, maxResults: int) -> TablesFeaturesListCall:
        """
        The maximum number of items to include in the response, used for paging.
        The maximum supported value is 1000.
        """
        return self._query("maxResults", maxResults)

    def orderBy(self, orderBy: str) -> TablesFeaturesListCall:
        """
        An SQL-like order by clause used to sort results. If this parameter is
        not included, the order of features is undefined.
        """
        return self._query("orderBy", orderBy)

    def pageToken(self, pageToken: str) -> TablesFeaturesListCall:
        """
        The continuation token, used to page through large result sets. To get
        the next page of results, set this parameter to the value of
        nextPageToken from the previous response.
        """
        return self._query("pageToken", pageToken)

    def select(self, select: str) -> TablesFeaturesListCall:
        """
        A SQL-like projection clause used to specify returned properties. If
        this parameter is not included, all properties are returned.
        """
        return self._query("select", select)

    def version(self, version: str) -> TablesFeaturesListCall:
        """The table version to access. See Accessing Public Data for information."""
        return self._query("version", version)

    def where(self, where: str) -> TablesFeaturesListCall:
        """An SQL-like predicate used to filter results."""
        return self._query("where", where)


class TablesFeaturesService(ResourceService):
    def batchInsert(self, id: str, featuresBatchInsertRequest: FeaturesBatchInsertRequest|dict) -> TablesFeaturesBatchInsertCall:
        """
        Append features to an existing table. A single batchInsert request can
        create up to 50 features and a combined total of 10 000 vertices.
        """
        return TablesFeaturesBatchInsertCall(self.service, path_params={"id": id}, body=featuresBatchInsertRequest)

    def list(self, id: str) -> TablesFeaturesListCall:
        """Return all features readable by the current user."""
        return TablesFeaturesListCall(self.service, path_params={"id": id})


class TablesFilesInsertCall(ApiCall):
    method = "POST"
    path = "tables/{id}/files"
    upload = True


class TablesFilesService(ResourceService):
    def insert(self, id: str, filename: str) -> TablesFilesInsertCall:
        """
        Upload a file to a placeholder table asset. See Table Upload in the
        Developer's Guide for more information.
        """
        return TablesFilesInsertCall(self.service, path_params={"id": id}, query={"filename": filename})


class TablesService(ResourceService):
    def __init__(self, service: ApiService) -> None:
        super().__init__(service)
        self.features = TablesFeaturesService(service)
        self.files = TablesFilesService(service)

    def create(self, table: Table|dict) -> TablesCreateCall:
        """Create a table asset."""
        return TablesCreateCall(self.service, body=table)

    def get(self, id: str) -> TablesGetCall:
        """Return metadata for a particular table, including the schema."""
        return TablesGetCall(self.service, path_params={"id": id})

    def list(self) -> TablesListCall:
        """Return all tables readable by the current user."""
        return TablesListCall(self.service)

    def upload(self, table: Table|dict) -> TablesUploadCall:
        """
        Create a placeholder table asset to which table files can be uploaded.
        Once the placeholder has been created, files are uploaded to the
        https://www.googleapis.com/upload/mapsengine/v1/tables/table_id/files
        endpoint.
        """
        return TablesUploadCall(self.service, body=table)


class MapsengineService(ApiService):
    """Google Maps Engine API v1"""
    BASE_URL = BASE_URL

    def __init__(self, http, **kwargs) -> None:
        super().__init__(http, **kwargs)
        self.assets = AssetsService(self)
        self.tables = TablesService(self)
