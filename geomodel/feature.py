"""Encoding and decoding of GeoJSON Feature envelopes."""

import logging
from collections.abc import Mapping
from typing import Any

from geomodel.errors import (
    GeoJSONDecodeError,
    MissingFieldError,
    UnknownGeometryTypeError,
)
from geomodel.geometries import Geometry, LineString, Point, Polygon
from geomodel.typing import GeoJSONFeature, GeoJSONType


logger = logging.getLogger(__name__)


# Geometry types a Feature may carry when decoded without an explicit class.
FEATURE_GEOMETRY_TYPES: dict[str, type[Geometry[Any]]] = {
    GeoJSONType.POINT.value: Point,
    GeoJSONType.LINESTRING.value: LineString,
    GeoJSONType.POLYGON.value: Polygon,
}


def _get_geometry(feature: Any) -> Mapping[str, Any]:
    if not isinstance(feature, Mapping):
        raise MissingFieldError(
            f"Feature must be a mapping, got {type(feature).__name__}"
        )
    geometry = feature.get("geometry")
    if not isinstance(geometry, Mapping):
        raise MissingFieldError("Feature must contain a 'geometry' mapping")
    return geometry


def geometry_class_for(type_name: Any) -> type[Geometry[Any]]:
    """Resolve the geometry class registered for a GeoJSON type string.

    Raises:
        MissingFieldError: If ``type_name`` is not a string.
        UnknownGeometryTypeError: If no class is registered for it.
    """
    if not isinstance(type_name, str):
        raise MissingFieldError("Geometry must contain a string 'type' key")
    try:
        return FEATURE_GEOMETRY_TYPES[type_name]
    except KeyError:
        raise UnknownGeometryTypeError(
            f"Unsupported geometry type: {type_name}"
        ) from None


def parse_feature(
    feature: Any, geometry_class: type[Geometry[Any]] | None = None
) -> Geometry[Any]:
    """Parse a GeoJSON Feature into its typed geometry.

    Args:
        feature: A mapping shaped like ``{"type": "Feature", "geometry": {...}}``.
        geometry_class: The variant to build. When omitted, the variant is
            chosen by ``feature["geometry"]["type"]``.

    Returns:
        The decoded geometry.

    Raises:
        GeoJSONDecodeError: If a field is missing, the type is unsupported or
            the coordinates are invalid.
    """
    geometry = _get_geometry(feature)
    if geometry_class is None:
        geometry_class = geometry_class_for(geometry.get("type"))
    if "coordinates" not in geometry:
        raise MissingFieldError("Geometry must contain 'coordinates' key")

    return geometry_class.parse(geometry["coordinates"])


def decode_feature(
    feature: Any, geometry_class: type[Geometry[Any]] | None = None
) -> Geometry[Any] | None:
    """Same as :func:`parse_feature`, returning None instead of raising."""
    try:
        return parse_feature(feature, geometry_class)
    except GeoJSONDecodeError as e:
        logger.debug(f"Could not decode feature: {e}")
        return None


def encode_feature(geometry: Geometry[Any]) -> GeoJSONFeature:
    """Wrap a geometry into a GeoJSON Feature with null properties."""
    return {
        "type": GeoJSONType.FEATURE.value,
        "geometry": geometry.to_geojson(),
        "properties": None,
    }
