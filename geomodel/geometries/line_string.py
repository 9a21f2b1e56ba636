from dataclasses import dataclass
from typing import Any, ClassVar

import shapely

from geomodel.coordinate import Coordinate
from geomodel.errors import ShapelyConversionError
from geomodel.geometries.geometry import Geometry, ensure_sequence
from geomodel.typing import GeoJSONType, LineStringCoordinates


@dataclass(frozen=True)
class LineString(Geometry[LineStringCoordinates]):
    """An ordered sequence of positions.

    No minimum number of positions is enforced. A single malformed position
    fails the whole line.
    """

    type_name: ClassVar[str] = GeoJSONType.LINESTRING.value

    coordinates: tuple[Coordinate, ...]

    @classmethod
    def parse(cls, coordinates: Any) -> "LineString":
        positions = ensure_sequence(coordinates, "LineString coordinates")
        return cls(tuple(Coordinate.parse(position) for position in positions))

    def to_coordinates(self) -> LineStringCoordinates:
        return [coordinate.to_numeric_pair() for coordinate in self.coordinates]

    def to_shapely(self) -> shapely.LineString:
        if len(self.coordinates) == 1:
            raise ShapelyConversionError(
                "A LineString with a single position has no shapely equivalent"
            )
        return shapely.LineString(self.to_coordinates())
