"""Tests for the FeatureCollection model."""

import logging

import pytest

from geomodel import FeatureCollection, LineString, Point, Polygon, concat


class TestFeatureCollectionDecode:
    """Test decoding of FeatureCollection mappings."""

    def test_decode(self, feature_collection_content):
        collection = FeatureCollection.decode(feature_collection_content)

        assert len(collection) == 3
        assert [type(g) for g in collection] == [Polygon, Point, LineString]

    def test_unknown_type_is_skipped(self, caplog):
        content = {
            "type": "FeatureCollection",
            "features": [
                {"type": "Feature", "geometry": {"type": "Point", "coordinates": [1.0, 2.0]}},
                {
                    "type": "Feature",
                    "geometry": {"type": "GeometryCollection", "coordinates": []},
                },
            ],
        }

        with caplog.at_level(logging.WARNING, logger="geomodel"):
            collection = FeatureCollection.decode(content)

        assert collection.features == (Point.parse([1.0, 2.0]),)
        assert "GeometryCollection" in caplog.text

    def test_malformed_features_are_skipped(self):
        content = {
            "features": [
                {"type": "Feature"},
                {"type": "Feature", "geometry": {"coordinates": [1.0, 2.0]}},
                {"type": "Feature", "geometry": {"type": "Point", "coordinates": [1.0]}},
                {
                    "type": "Feature",
                    "geometry": {"type": "Polygon", "coordinates": [[[0, 0], [1, 0], [1, 1]]]},
                },
                "not a feature",
                {"type": "Feature", "geometry": {"type": "Point", "coordinates": [3.0, 4.0]}},
            ]
        }

        collection = FeatureCollection.decode(content)

        assert collection.features == (Point.parse([3.0, 4.0]),)

    @pytest.mark.parametrize(
        "content",
        [
            {},
            {"type": "FeatureCollection"},
            {"type": "FeatureCollection", "features": None},
            {"type": "FeatureCollection", "features": {"type": "Feature"}},
            None,
        ],
    )
    def test_missing_features_yields_empty_collection(self, content):
        collection = FeatureCollection.decode(content)

        assert len(collection) == 0


class TestFeatureCollectionEncode:
    """Test encoding of FeatureCollections."""

    def test_encode_empty(self):
        assert FeatureCollection().encode() == {
            "type": "FeatureCollection",
            "features": [],
            "properties": None,
        }

    def test_round_trip(self, feature_collection_content):
        collection = FeatureCollection.decode(feature_collection_content)

        assert collection.encode() == feature_collection_content
        assert FeatureCollection.decode(collection.encode()) == collection


class TestConcat:
    """Test concatenation of FeatureCollections."""

    def test_concat_preserves_order(self):
        a = FeatureCollection([Point.parse([0.0, 0.0]), Point.parse([1.0, 1.0])])
        b = FeatureCollection([LineString.parse([[2.0, 2.0], [3.0, 3.0]])])

        result = concat(a, b)

        assert len(result) == len(a) + len(b)
        assert result.features == a.features + b.features
        assert a.concat(b) == result

    def test_concat_keeps_duplicates(self):
        a = FeatureCollection([Point.parse([0.0, 0.0])])

        assert len(a.concat(a)) == 2

    def test_concat_does_not_modify_operands(self):
        a = FeatureCollection([Point.parse([0.0, 0.0])])
        b = FeatureCollection([Point.parse([1.0, 1.0])])

        concat(a, b)

        assert len(a) == 1
        assert len(b) == 1
