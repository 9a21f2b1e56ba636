import pytest


@pytest.fixture
def feature_collection_content():
    """Sample FeatureCollection holding one feature of every supported variant."""
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "geometry": {
                    "type": "Polygon",
                    "coordinates": [[[0.0, 0.0], [10.0, 0.0], [10.0, 10.0], [0.0, 10.0], [0.0, 0.0]]],
                    "properties": None,
                },
                "properties": None,
            },
            {
                "type": "Feature",
                "geometry": {
                    "type": "Point",
                    "coordinates": [5.0, 5.0],
                    "properties": None,
                },
                "properties": None,
            },
            {
                "type": "Feature",
                "geometry": {
                    "type": "LineString",
                    "coordinates": [[0.0, 0.0], [1.0, 1.0], [2.0, 0.0]],
                    "properties": None,
                },
                "properties": None,
            },
        ],
        "properties": None,
    }
