"""
Custom exception hierarchy for GMLSurface.

This module defines a hierarchy of exceptions that provide clear, specific
error types for the failure modes of the geometry model and its
configuration. Errors of the GML reading layer live in
``gmlsurface.gml.exceptions`` and share the same base class.
"""


class GMLSurfaceError(Exception):
    """
    Base exception for all GMLSurface-specific errors.

    All custom exceptions in GMLSurface should inherit from this class.
    This allows catching all GMLSurface errors with a single except clause.
    """
    pass


class ConfigurationError(GMLSurfaceError):
    """
    Configuration-related errors.

    Raised when:
    - The configuration file cannot be found or read
    - The configuration file is not valid YAML or not a mapping
    - Configuration values fail validation
    """
    pass


class GeometryError(GMLSurfaceError):
    """
    Geometry model rejections.

    Base class for every invariant the geometry model enforces when a
    ring, polygon or multi-surface is constructed.
    """
    pass


class NonFiniteCoordinateError(GeometryError):
    """
    Raised when a position has a NaN or infinite ordinate.
    """
    pass


class InvalidCoordinatesError(GeometryError):
    """
    Coordinate list failures.

    Raised when:
    - The number of ordinates is not a multiple of three
    - A coordinate list declares a dimension other than three
    """
    pass


class TooFewPointsError(GeometryError):
    """
    Raised when a ring has fewer than three distinct points after
    consecutive duplicates and the closing point are removed.
    """
    pass


class DegenerateRingError(GeometryError):
    """
    Raised when all points of a ring lie on a single line.
    """
    pass


class EmptyGeometryError(GeometryError):
    """
    Raised when an aggregate geometry is constructed without members.
    """
    pass


# =============================================================================
# Validation Helpers
# =============================================================================


def require(condition: bool, message: str, error_type: type = None) -> None:
    """
    Validate a condition, raising an exception if it fails.

    Args:
        condition: The condition that must be True
        message: Error message if condition is False
        error_type: Exception type to raise (default: GeometryError)

    Raises:
        GeometryError (or specified error_type) if condition is False

    Example:
        >>> require(len(points) >= 3, "ring needs three points", TooFewPointsError)
    """
    if error_type is None:
        error_type = GeometryError
    if not condition:
        raise error_type(message)


# =============================================================================
# Public API
# =============================================================================

__all__ = [
    # Base
    'GMLSurfaceError',
    # Domain exceptions
    'ConfigurationError',
    'GeometryError',
    'NonFiniteCoordinateError',
    'InvalidCoordinatesError',
    'TooFewPointsError',
    'DegenerateRingError',
    'EmptyGeometryError',
    # Helpers
    'require',
]
