"""GeoJSON file parser."""

import logging
from pathlib import Path

import geojson

from geomodel.feature_collection import FeatureCollection
from geomodel.parsers.abstract_parser import AbstractParser


logger = logging.getLogger(__name__)


class GeoJSONParser(AbstractParser):
    """Parser for GeoJSON FeatureCollection files.

    The text is decoded with the ``geojson`` library, which rejects non-finite
    numbers, and the resulting tree is handed to
    :meth:`FeatureCollection.decode` as plain dictionaries and lists.
    """

    def get_feature_collection(self) -> FeatureCollection:
        with open(self.file_path, "r") as f:
            data = geojson.load(f, object_hook=dict)

        collection = FeatureCollection.decode(data)
        logger.debug(f"Decoded {len(collection)} features from {self.file_path}")
        return collection


def dump(collection: FeatureCollection, file_path: str | Path) -> None:
    """Write a collection to a GeoJSON file.

    Args:
        collection: The collection to encode.
        file_path: Destination path, overwritten if it exists.
    """
    with open(file_path, "w") as f:
        geojson.dump(collection.encode(), f)
