"""Geometry model: identifiers and immutable surface geometry types."""

from .base import Gml, Id
from .geometry import (
    DirectPosition,
    Envelope,
    LinearRing,
    MultiSurface,
    Polygon,
)

__all__ = [
    "Id",
    "Gml",
    "DirectPosition",
    "Envelope",
    "LinearRing",
    "Polygon",
    "MultiSurface",
]
