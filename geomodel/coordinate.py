"""Longitude/latitude pairs."""

import logging
from dataclasses import dataclass
from numbers import Real
from typing import Any

from geomodel.errors import MalformedCoordinateError
from geomodel.typing import Position


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Coordinate:
    """A position expressed in floating-point degrees.

    Attributes:
        longitude: Expected in [-180, 180], not enforced.
        latitude: Expected in [-90, 90], not enforced.

    Example:
        >>> Coordinate.from_numeric_pair([1.0, 2.0])
        Coordinate(longitude=1.0, latitude=2.0)
        >>> Coordinate.from_numeric_pair([1.0]) is None
        True
    """

    longitude: float
    latitude: float

    @classmethod
    def parse(cls, pair: Any) -> "Coordinate":
        """Build a coordinate from a GeoJSON position.

        Args:
            pair: A list or tuple holding exactly two numbers, longitude first.

        Returns:
            The parsed coordinate.

        Raises:
            MalformedCoordinateError: If ``pair`` is not a sequence of two numbers.
        """
        if not isinstance(pair, (list, tuple)):
            raise MalformedCoordinateError(
                f"Coordinate must be a sequence, got {type(pair).__name__}"
            )
        if len(pair) != 2:
            raise MalformedCoordinateError(
                f"Coordinate must have exactly 2 elements, got {len(pair)}"
            )
        if not all(isinstance(v, Real) and not isinstance(v, bool) for v in pair):
            raise MalformedCoordinateError(f"Coordinate must be numeric, got {pair!r}")

        return cls(longitude=float(pair[0]), latitude=float(pair[1]))

    @classmethod
    def from_numeric_pair(cls, pair: Any) -> "Coordinate | None":
        """Same as :meth:`parse`, returning None instead of raising."""
        try:
            return cls.parse(pair)
        except MalformedCoordinateError as e:
            logger.debug(f"Rejected coordinate {pair!r}: {e}")
            return None

    def to_numeric_pair(self) -> Position:
        return [self.longitude, self.latitude]
