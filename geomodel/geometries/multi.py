from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar

import shapely
from shapely.geometry.base import BaseMultipartGeometry

from geomodel.geometries.geometry import Geometry, ensure_sequence
from geomodel.geometries.line_string import LineString
from geomodel.geometries.point import Point
from geomodel.geometries.polygon import Polygon
from geomodel.typing import GeoJSONType


G = TypeVar("G", Point, LineString, Polygon)


@dataclass(frozen=True)
class Multi(Geometry[list[Any]], Generic[G]):
    """Homogeneous collection of one base geometry variant.

    The coordinate array is one nesting level deeper than that of the member
    variant. Use one of the concrete instantiations, :class:`MultiPoint`,
    :class:`MultiLineString` or :class:`MultiPolygon`, which bind the member
    class and the GeoJSON type name.
    """

    member_class: ClassVar[type[Geometry[Any]]]
    shapely_class: ClassVar[type[BaseMultipartGeometry]]

    members: tuple[G, ...] = ()

    @classmethod
    def parse(cls, coordinates: Any) -> "Multi[G]":
        if cls is Multi:
            raise TypeError(
                "Multi is generic, use MultiPoint, MultiLineString or MultiPolygon"
            )
        members = ensure_sequence(coordinates, f"{cls.type_name} coordinates")
        return cls(tuple(cls.member_class.parse(member) for member in members))

    def to_coordinates(self) -> list[Any]:
        return [member.to_coordinates() for member in self.members]

    def to_shapely(self) -> BaseMultipartGeometry:
        return self.shapely_class([member.to_shapely() for member in self.members])

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[G]:
        return iter(self.members)


@dataclass(frozen=True)
class MultiPoint(Multi[Point]):
    type_name: ClassVar[str] = GeoJSONType.MULTIPOINT.value
    member_class: ClassVar[type[Geometry[Any]]] = Point
    shapely_class: ClassVar[type[BaseMultipartGeometry]] = shapely.MultiPoint


@dataclass(frozen=True)
class MultiLineString(Multi[LineString]):
    type_name: ClassVar[str] = GeoJSONType.MULTILINESTRING.value
    member_class: ClassVar[type[Geometry[Any]]] = LineString
    shapely_class: ClassVar[type[BaseMultipartGeometry]] = shapely.MultiLineString


@dataclass(frozen=True)
class MultiPolygon(Multi[Polygon]):
    type_name: ClassVar[str] = GeoJSONType.MULTIPOLYGON.value
    member_class: ClassVar[type[Geometry[Any]]] = Polygon
    shapely_class: ClassVar[type[BaseMultipartGeometry]] = shapely.MultiPolygon
