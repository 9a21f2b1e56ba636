"""Tests for coordinate pairs."""

import pytest

from geomodel import Coordinate, MalformedCoordinateError


class TestCoordinate:
    """Test parsing and rendering of coordinate pairs."""

    def test_from_numeric_pair(self):
        coordinate = Coordinate.from_numeric_pair([1.0, 2.0])

        assert coordinate is not None
        assert coordinate.longitude == 1.0
        assert coordinate.latitude == 2.0

    @pytest.mark.parametrize("pair", [[], [1.0], [1.0, 2.0, 3.0]])
    def test_wrong_arity_fails(self, pair):
        assert Coordinate.from_numeric_pair(pair) is None

    @pytest.mark.parametrize("pair", [None, "12", 1.0, ["1", 2.0], [True, 2.0], {"x": 1}])
    def test_wrong_shape_fails(self, pair):
        assert Coordinate.from_numeric_pair(pair) is None

    def test_parse_raises(self):
        with pytest.raises(MalformedCoordinateError):
            Coordinate.parse([1.0])

    def test_integers_are_promoted(self):
        coordinate = Coordinate.parse([1, 2])

        assert coordinate == Coordinate(1.0, 2.0)
        assert isinstance(coordinate.longitude, float)

    def test_out_of_range_values_pass_through(self):
        coordinate = Coordinate.parse([500.0, -100.0])

        assert coordinate.to_numeric_pair() == [500.0, -100.0]

    def test_to_numeric_pair(self):
        assert Coordinate(longitude=3.5, latitude=-1.25).to_numeric_pair() == [3.5, -1.25]

    def test_equality_is_exact(self):
        assert Coordinate.parse([1.0, 2.0]) == Coordinate.parse([1.0, 2.0])
        assert Coordinate.parse([1.0, 2.0]) != Coordinate.parse([1.0, 2.0001])

    def test_is_immutable_and_hashable(self):
        coordinate = Coordinate(1.0, 2.0)

        with pytest.raises(AttributeError):
            coordinate.longitude = 3.0  # type: ignore[misc]
        assert len({coordinate, Coordinate(1.0, 2.0)}) == 1
