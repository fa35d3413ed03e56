"""
Bindings for the Google Maps Engine API.

Features carry GeoJSON geometries, decoded into the GeoJsonGeometry tagged
union (GeoJsonPoint, GeoJsonPolygon, ...) by their 'type' key.
"""
