from geomodel.typing.geojson import (
    GeoJSONFeature,
    GeoJSONFeatureCollection,
    GeoJSONGeometry,
    GeoJSONObject,
    GeoJSONType,
    LineStringCoordinates,
    PolygonCoordinates,
    Position,
)

__all__ = [
    "GeoJSONType",
    "GeoJSONObject",
    "GeoJSONGeometry",
    "GeoJSONFeature",
    "GeoJSONFeatureCollection",
    "Position",
    "LineStringCoordinates",
    "PolygonCoordinates",
]
