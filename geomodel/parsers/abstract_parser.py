"""Abstract base class for GeoJSON file parsers."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path

from geomodel.feature_collection import FeatureCollection
from geomodel.geometries import LineString, Point, Polygon


class AbstractParser(ABC):
    """Abstract base class defining a common interface for file parsers.

    Concrete parsers read a file into a :class:`FeatureCollection`; the typed
    accessors filter that collection by geometry variant.
    """

    def __init__(self, file_path: str | Path) -> None:
        """Initialize the parser with a file path.

        Args:
            file_path: Path to the file to be parsed.
        """
        self.file_path = Path(file_path)

    @abstractmethod
    def get_feature_collection(self) -> FeatureCollection:
        """Returns every decodable feature of the file."""
        ...

    def get_points(self) -> Iterable[Point]:
        for geometry in self.get_feature_collection():
            if isinstance(geometry, Point):
                yield geometry

    def get_line_strings(self) -> Iterable[LineString]:
        for geometry in self.get_feature_collection():
            if isinstance(geometry, LineString):
                yield geometry

    def get_polygons(self) -> Iterable[Polygon]:
        for geometry in self.get_feature_collection():
            if isinstance(geometry, Polygon):
                yield geometry
