"""
GeoModel: typed GeoJSON geometries.

This package converts between the generic dictionaries and lists produced by a
JSON parser and typed Point, LineString and Polygon geometries, their Multi
variants, Feature envelopes and FeatureCollections.
"""

from geomodel.config import configure_logging
from geomodel.coordinate import Coordinate
from geomodel.errors import (
    GeoJSONDecodeError,
    MalformedCoordinateError,
    MissingFieldError,
    ShapelyConversionError,
    UnclosedRingError,
    UnknownGeometryTypeError,
)
from geomodel.feature import decode_feature, encode_feature, parse_feature
from geomodel.feature_collection import FeatureCollection, concat
from geomodel.geometries import (
    Geometry,
    LineString,
    Multi,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

__version__ = "0.1.0"
__all__ = [
    "Coordinate",
    "FeatureCollection",
    "GeoJSONDecodeError",
    "Geometry",
    "LineString",
    "MalformedCoordinateError",
    "MissingFieldError",
    "Multi",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
    "ShapelyConversionError",
    "UnclosedRingError",
    "UnknownGeometryTypeError",
    "concat",
    "configure_logging",
    "decode_feature",
    "encode_feature",
    "parse_feature",
]
