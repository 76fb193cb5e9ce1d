# src/gmlsurface/__init__.py
try:
    from .gmlsurface_version import __version__
except ImportError:
    try:
        from importlib.metadata import version, PackageNotFoundError
        __version__ = version("gmlsurface")
    except (ImportError, PackageNotFoundError):
        __version__ = "0.0.0"

from .core.config import DEFAULT_CONFIG, ParserConfig
from .core.exceptions import GeometryError, GMLSurfaceError
from .gml import (
    DeserializationError,
    PolygonConversionError,
    parse_linear_ring,
    parse_multi_surface,
    parse_polygon,
)
from .model import Id, LinearRing, MultiSurface, Polygon

__all__ = [
    "__version__",
    "DEFAULT_CONFIG",
    "ParserConfig",
    "GMLSurfaceError",
    "GeometryError",
    "DeserializationError",
    "PolygonConversionError",
    "parse_multi_surface",
    "parse_polygon",
    "parse_linear_ring",
    "Id",
    "LinearRing",
    "Polygon",
    "MultiSurface",
]
