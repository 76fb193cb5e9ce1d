"""
GML reading exceptions.

Provides specific exception types for turning GML text into geometry.
All exceptions inherit from GMLSurfaceError for consistent error handling.
"""

from typing import Optional

from gmlsurface.core.exceptions import GeometryError, GMLSurfaceError


class GMLReadError(GMLSurfaceError):
    """Base exception for all GML reading errors."""
    pass


class DeserializationError(GMLReadError):
    """Raised when GML text is malformed or does not match the expected element shape."""
    pass


class PolygonConversionError(GMLReadError):
    """Raised when the geometry model rejects a converted polygon or the assembled feature.

    Attributes:
        reason: The geometry model's rejection
        member_index: Position of the offending surface member in the source,
            or None when the assembled feature itself was rejected
    """

    def __init__(self, reason: GeometryError, member_index: Optional[int] = None) -> None:
        self.reason = reason
        self.member_index = member_index
        if member_index is None:
            message = f"Geometry rejected: {reason}"
        else:
            message = f"Surface member {member_index} rejected: {reason}"
        super().__init__(message)
