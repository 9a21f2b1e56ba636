from geomodel.parsers.abstract_parser import AbstractParser
from geomodel.parsers.geojson_parser import GeoJSONParser, dump

__all__ = [
    "AbstractParser",
    "GeoJSONParser",
    "dump",
]
