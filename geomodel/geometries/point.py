from dataclasses import dataclass
from typing import Any, ClassVar

import shapely

from geomodel.coordinate import Coordinate
from geomodel.geometries.geometry import Geometry
from geomodel.typing import GeoJSONType, Position


@dataclass(frozen=True)
class Point(Geometry[Position]):
    """A single position."""

    type_name: ClassVar[str] = GeoJSONType.POINT.value

    coordinate: Coordinate

    @classmethod
    def parse(cls, coordinates: Any) -> "Point":
        return cls(Coordinate.parse(coordinates))

    def to_coordinates(self) -> Position:
        return self.coordinate.to_numeric_pair()

    def to_shapely(self) -> shapely.Point:
        return shapely.Point(self.coordinate.longitude, self.coordinate.latitude)
