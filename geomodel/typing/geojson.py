from enum import Enum
from typing import Any, TypeAlias, TypedDict


Position: TypeAlias = list[float]
LineStringCoordinates: TypeAlias = list[Position]
PolygonCoordinates: TypeAlias = list[LineStringCoordinates]


class GeoJSONType(Enum):
    FEATURE = "Feature"
    FEATURE_COLLECTION = "FeatureCollection"
    POINT = "Point"
    MULTIPOINT = "MultiPoint"
    LINESTRING = "LineString"
    MULTILINESTRING = "MultiLineString"
    POLYGON = "Polygon"
    MULTIPOLYGON = "MultiPolygon"


class GeoJSONObject(TypedDict):
    type: str


class GeoJSONGeometry(GeoJSONObject):
    coordinates: list[Any]
    properties: None


class GeoJSONFeature(GeoJSONObject):
    geometry: GeoJSONGeometry
    properties: None


class GeoJSONFeatureCollection(GeoJSONObject):
    features: list[GeoJSONFeature]
    properties: None
