"""
GML reading for surface geometry.

Maps GML ``MultiSurface``, ``Polygon`` and ``LinearRing`` text onto the
immutable geometry model, resolving missing identifiers from content.
"""

from .exceptions import DeserializationError, GMLReadError, PolygonConversionError
from .multi_surface import parse_multi_surface, resolve_multi_surface
from .polygon import parse_linear_ring, parse_polygon
from .schema import GmlMultiSurface, GmlSurfaceMember, MemberKind

__all__ = [
    "parse_multi_surface",
    "resolve_multi_surface",
    "parse_polygon",
    "parse_linear_ring",
    "GmlMultiSurface",
    "GmlSurfaceMember",
    "MemberKind",
    "GMLReadError",
    "DeserializationError",
    "PolygonConversionError",
]
