"""GeoJSON FeatureCollection model."""

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from geomodel.errors import GeoJSONDecodeError, UnknownGeometryTypeError
from geomodel.feature import encode_feature, parse_feature
from geomodel.geometries import Geometry
from geomodel.typing import GeoJSONFeatureCollection, GeoJSONType


logger = logging.getLogger(__name__)


class FeatureCollection:
    """An ordered sequence of geometries, each one stemming from a Feature.

    Geometries of different variants may be mixed. Order is preserved and no
    deduplication takes place.
    """

    def __init__(self, features: Iterable[Geometry[Any]] = ()) -> None:
        self.features: tuple[Geometry[Any], ...] = tuple(features)

    @classmethod
    def decode(cls, feature_collection: Any) -> "FeatureCollection":
        """Decode a GeoJSON FeatureCollection mapping.

        Features that cannot be decoded are skipped with a warning, so a single
        bad feature never fails the whole collection. A missing or malformed
        ``features`` member yields an empty collection.

        Args:
            feature_collection: A mapping shaped like
                ``{"type": "FeatureCollection", "features": [...]}``.

        Returns:
            The decoded collection.
        """
        features = (
            feature_collection.get("features")
            if isinstance(feature_collection, Mapping)
            else None
        )
        if not isinstance(features, list):
            logger.debug("FeatureCollection has no 'features' list")
            return cls()

        geometries = []
        for index, feature in enumerate(features):
            try:
                geometries.append(parse_feature(feature))
            except UnknownGeometryTypeError as e:
                logger.warning(f"Skipping feature {index}: {e}")
            except GeoJSONDecodeError as e:
                logger.warning(f"Skipping malformed feature {index}: {e}")

        return cls(geometries)

    def encode(self) -> GeoJSONFeatureCollection:
        return {
            "type": GeoJSONType.FEATURE_COLLECTION.value,
            "features": [encode_feature(geometry) for geometry in self.features],
            "properties": None,
        }

    def concat(self, other: "FeatureCollection") -> "FeatureCollection":
        """Returns a new collection holding this one's features followed by ``other``'s."""
        return FeatureCollection(self.features + other.features)

    def __len__(self) -> int:
        return len(self.features)

    def __iter__(self) -> Iterator[Geometry[Any]]:
        return iter(self.features)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FeatureCollection):
            return NotImplemented
        return self.features == other.features

    def __repr__(self) -> str:
        return f"FeatureCollection(features={list(self.features)!r})"


def concat(a: FeatureCollection, b: FeatureCollection) -> FeatureCollection:
    return a.concat(b)
