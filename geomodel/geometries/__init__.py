from geomodel.geometries.geometry import Geometry
from geomodel.geometries.line_string import LineString
from geomodel.geometries.multi import (
    Multi,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
)
from geomodel.geometries.point import Point
from geomodel.geometries.polygon import Polygon

__all__ = [
    "Geometry",
    "LineString",
    "Multi",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
]
