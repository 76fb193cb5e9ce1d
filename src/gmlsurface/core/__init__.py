"""Core configuration and exception types shared across GMLSurface."""

from .config import DEFAULT_CONFIG, ParserConfig
from .exceptions import (
    ConfigurationError,
    DegenerateRingError,
    EmptyGeometryError,
    GeometryError,
    GMLSurfaceError,
    InvalidCoordinatesError,
    NonFiniteCoordinateError,
    TooFewPointsError,
)

__all__ = [
    "DEFAULT_CONFIG",
    "ParserConfig",
    "GMLSurfaceError",
    "ConfigurationError",
    "GeometryError",
    "NonFiniteCoordinateError",
    "InvalidCoordinatesError",
    "TooFewPointsError",
    "DegenerateRingError",
    "EmptyGeometryError",
]
