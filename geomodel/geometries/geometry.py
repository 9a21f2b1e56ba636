"""Abstract base class for typed GeoJSON geometries."""

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

from shapely.geometry.base import BaseGeometry

from geomodel.errors import GeoJSONDecodeError, MalformedCoordinateError
from geomodel.typing import GeoJSONFeature, GeoJSONGeometry


logger = logging.getLogger(__name__)

CoordinatesT = TypeVar("CoordinatesT")
GeometryT = TypeVar("GeometryT", bound="Geometry[Any]")


class Geometry(ABC, Generic[CoordinatesT]):
    """Abstract base class defining the capabilities every geometry variant has.

    A variant knows its GeoJSON type name, how to build itself from the nested
    coordinate array of that type, and how to render itself back into it.
    Concrete variants are immutable value objects compared field by field.
    """

    type_name: ClassVar[str]

    @classmethod
    @abstractmethod
    def parse(cls: type[GeometryT], coordinates: Any) -> GeometryT:
        """Build the geometry from its GeoJSON coordinate array.

        Args:
            coordinates: Nested sequences of numbers in the shape of this variant.

        Returns:
            A valid geometry.

        Raises:
            GeoJSONDecodeError: If the coordinates do not form a valid geometry.
        """
        ...

    @classmethod
    def from_coordinates(cls: type[GeometryT], coordinates: Any) -> GeometryT | None:
        """Same as :meth:`parse`, returning None instead of raising."""
        try:
            return cls.parse(coordinates)
        except GeoJSONDecodeError as e:
            logger.debug(f"Could not build {cls.type_name}: {e}")
            return None

    @abstractmethod
    def to_coordinates(self) -> CoordinatesT:
        """Returns the GeoJSON coordinate array of the geometry."""
        ...

    @abstractmethod
    def to_shapely(self) -> BaseGeometry:
        """Returns the equivalent shapely geometry.

        Only defined for geometries shapely can represent: a line needs zero
        or at least two positions, a polygon ring at least four.

        Raises:
            ShapelyConversionError: If the geometry has no shapely equivalent.
        """
        ...

    def to_geojson(self) -> GeoJSONGeometry:
        return {
            "type": self.type_name,
            "coordinates": self.to_coordinates(),
            "properties": None,
        }

    def to_feature(self) -> GeoJSONFeature:
        from geomodel.feature import encode_feature

        return encode_feature(self)


def ensure_sequence(value: Any, what: str) -> list[Any] | tuple[Any, ...]:
    """Check that ``value`` is a list or tuple.

    Raises:
        MalformedCoordinateError: If it is not.
    """
    if not isinstance(value, (list, tuple)):
        raise MalformedCoordinateError(
            f"{what} must be a sequence, got {type(value).__name__}"
        )
    return value
