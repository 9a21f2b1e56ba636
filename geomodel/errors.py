"""Errors raised while decoding GeoJSON trees."""


class GeoJSONDecodeError(ValueError):
    """Base class for every GeoJSON decode failure."""


class MalformedCoordinateError(GeoJSONDecodeError):
    """A coordinate pair is not a sequence of exactly two numbers."""


class UnclosedRingError(GeoJSONDecodeError):
    """The first and last coordinates of a polygon ring differ."""


class UnknownGeometryTypeError(GeoJSONDecodeError):
    """The geometry type string is not one of the supported variants."""


class MissingFieldError(GeoJSONDecodeError):
    """A required field is absent or has the wrong kind."""


class ShapelyConversionError(ValueError):
    """A valid geometry has no shapely equivalent, e.g. a one-position line."""
