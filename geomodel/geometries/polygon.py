from dataclasses import dataclass
from typing import Any, ClassVar

import shapely

from geomodel.coordinate import Coordinate
from geomodel.errors import ShapelyConversionError, UnclosedRingError
from geomodel.geometries.geometry import Geometry, ensure_sequence
from geomodel.typing import GeoJSONType, PolygonCoordinates


LinearRing = tuple[Coordinate, ...]


@dataclass(frozen=True)
class Polygon(Geometry[PolygonCoordinates]):
    """A sequence of linear rings, the first one being the exterior boundary.

    Every ring must be closed, i.e. its first and last positions are equal.
    An empty ring is considered closed.
    """

    type_name: ClassVar[str] = GeoJSONType.POLYGON.value

    rings: tuple[LinearRing, ...]

    @classmethod
    def parse(cls, coordinates: Any) -> "Polygon":
        rings = []
        rings_coordinates = ensure_sequence(coordinates, "Polygon coordinates")
        for index, ring in enumerate(rings_coordinates):
            linear_ring = tuple(
                Coordinate.parse(position)
                for position in ensure_sequence(ring, "Polygon ring")
            )
            if linear_ring and linear_ring[0] != linear_ring[-1]:
                raise UnclosedRingError(
                    f"Ring {index} is not closed: "
                    f"starts at {linear_ring[0]} and ends at {linear_ring[-1]}"
                )
            rings.append(linear_ring)

        return cls(tuple(rings))

    @property
    def exterior(self) -> LinearRing | None:
        return self.rings[0] if self.rings else None

    @property
    def interiors(self) -> tuple[LinearRing, ...]:
        return self.rings[1:]

    def to_coordinates(self) -> PolygonCoordinates:
        return [
            [coordinate.to_numeric_pair() for coordinate in ring] for ring in self.rings
        ]

    def to_shapely(self) -> shapely.Polygon:
        coordinates = self.to_coordinates()
        if not coordinates:
            return shapely.Polygon()
        for index, ring in enumerate(coordinates):
            if len(ring) < 4:
                raise ShapelyConversionError(
                    f"Ring {index} has {len(ring)} positions, shapely needs at least 4"
                )
        return shapely.Polygon(coordinates[0], coordinates[1:])
