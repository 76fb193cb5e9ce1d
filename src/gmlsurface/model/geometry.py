# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2024-2026 GMLSurface Team

"""
Geometry model for surface features.

Immutable value types for 3-D positions, linear rings, polygons and
multi-surfaces. All topological rules live here: constructors either
return a valid object or raise a ``GeometryError`` subclass, so callers
never have to repeat these checks.

Ring normalisation
------------------
``LinearRing`` accepts points the way GML writes them: consecutive
duplicates are collapsed and an explicit closing point (equal to the first
point) is dropped. What remains must be at least three distinct points that
do not all lie on one line.
"""

import math
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Sequence, Tuple

import numpy as np

from gmlsurface.core.exceptions import (
    DegenerateRingError,
    EmptyGeometryError,
    GeometryError,
    InvalidCoordinatesError,
    NonFiniteCoordinateError,
    TooFewPointsError,
    require,
)

from .base import Gml, Id

# Minimum ring size after normalisation
MIN_RING_POINTS = 3

# Relative singular-value threshold below which a ring counts as collinear
_COLLINEAR_TOLERANCE = 1e-10


@dataclass(frozen=True)
class DirectPosition:
    """A point with exactly three finite ordinates."""

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        for name in ("x", "y", "z"):
            raw = getattr(self, name)
            try:
                value = float(raw)
            except (TypeError, ValueError) as exc:
                raise InvalidCoordinatesError(f"Ordinate {name}={raw!r} is not a number") from exc
            if not math.isfinite(value):
                raise NonFiniteCoordinateError(f"Ordinate {name}={value} is not finite")
            object.__setattr__(self, name, value)

    @classmethod
    def from_ordinates(cls, values: Sequence[float]) -> List['DirectPosition']:
        """Group a flat ordinate sequence into positions of three.

        Raises:
            InvalidCoordinatesError: If the count is not a multiple of three
        """
        if len(values) % 3 != 0:
            raise InvalidCoordinatesError(
                f"Expected a multiple of 3 ordinates, got {len(values)}"
            )
        return [cls(values[i], values[i + 1], values[i + 2]) for i in range(0, len(values), 3)]

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class Envelope:
    """Axis-aligned 3-D bounding box."""

    lower_corner: DirectPosition
    upper_corner: DirectPosition

    @classmethod
    def from_coordinates(cls, coords: np.ndarray) -> 'Envelope':
        lower = coords.min(axis=0)
        upper = coords.max(axis=0)
        return cls(DirectPosition(*lower), DirectPosition(*upper))

    def union(self, other: 'Envelope') -> 'Envelope':
        coords = np.array([
            self.lower_corner.as_tuple(),
            self.upper_corner.as_tuple(),
            other.lower_corner.as_tuple(),
            other.upper_corner.as_tuple(),
        ])
        return Envelope.from_coordinates(coords)

    def contains(self, position: DirectPosition) -> bool:
        lo, hi = self.lower_corner, self.upper_corner
        return (
            lo.x <= position.x <= hi.x
            and lo.y <= position.y <= hi.y
            and lo.z <= position.z <= hi.z
        )


def _normalise_ring_points(points: Iterable) -> Tuple[DirectPosition, ...]:
    result: List[DirectPosition] = []
    for point in points:
        if not isinstance(point, DirectPosition):
            point = DirectPosition(*point)
        if result and result[-1] == point:
            continue
        result.append(point)
    if len(result) > 1 and result[0] == result[-1]:
        result.pop()
    return tuple(result)


def _vector_area(coords: np.ndarray) -> np.ndarray:
    """Newell's method: half the sum of edge cross products of a closed ring."""
    centered = coords - coords[0]
    shifted = np.roll(centered, -1, axis=0)
    return 0.5 * np.cross(centered, shifted).sum(axis=0)


@dataclass(frozen=True)
class LinearRing:
    """Closed ring of 3-D points, stored without the repeated closing point."""

    points: Tuple[DirectPosition, ...]

    def __post_init__(self) -> None:
        points = _normalise_ring_points(self.points)
        require(
            len(points) >= MIN_RING_POINTS,
            f"Ring needs at least {MIN_RING_POINTS} distinct points, got {len(points)}",
            TooFewPointsError,
        )
        object.__setattr__(self, "points", points)

        coords = self.coordinates()
        singular = np.linalg.svd(coords - coords.mean(axis=0), compute_uv=False)
        require(
            singular[1] > singular[0] * _COLLINEAR_TOLERANCE,
            "Ring points are collinear",
            DegenerateRingError,
        )

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[DirectPosition]:
        return iter(self.points)

    def closed_points(self) -> Tuple[DirectPosition, ...]:
        """Points with the first point repeated at the end, as GML writes them."""
        return self.points + (self.points[0],)

    def coordinates(self, closed: bool = False) -> np.ndarray:
        """Return the ring as an ``(N, 3)`` float array."""
        points = self.closed_points() if closed else self.points
        return np.array([p.as_tuple() for p in points], dtype=np.float64)

    def envelope(self) -> Envelope:
        return Envelope.from_coordinates(self.coordinates())

    def vector_area(self) -> np.ndarray:
        return _vector_area(self.coordinates())

    def area(self) -> float:
        """Area enclosed by the ring, assuming it is planar."""
        return float(np.linalg.norm(self.vector_area()))


@dataclass(frozen=True)
class Polygon:
    """Planar surface patch: one exterior ring and zero or more holes."""

    gml: Gml
    exterior: LinearRing
    interiors: Tuple[LinearRing, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        require(isinstance(self.exterior, LinearRing), "Polygon exterior must be a LinearRing")
        interiors = tuple(self.interiors)
        for ring in interiors:
            require(isinstance(ring, LinearRing), "Polygon interiors must be LinearRings")
        object.__setattr__(self, "interiors", interiors)

    @property
    def id(self) -> Id:
        return self.gml.id

    def rings(self) -> Tuple[LinearRing, ...]:
        return (self.exterior,) + self.interiors

    def envelope(self) -> Envelope:
        # holes lie inside the exterior
        return self.exterior.envelope()

    def area(self) -> float:
        """Exterior area minus the area of the holes."""
        return self.exterior.area() - sum(ring.area() for ring in self.interiors)

    def to_shapely(self):
        """Convert to a shapely ``Polygon`` with Z coordinates."""
        from shapely.geometry import Polygon as ShapelyPolygon

        return ShapelyPolygon(
            shell=[p.as_tuple() for p in self.exterior.closed_points()],
            holes=[[p.as_tuple() for p in ring.closed_points()] for ring in self.interiors],
        )


@dataclass(frozen=True)
class MultiSurface:
    """Named, ordered collection of polygons forming one composite surface."""

    gml: Gml
    polygons: Tuple[Polygon, ...]

    def __post_init__(self) -> None:
        polygons = tuple(self.polygons)
        if not polygons:
            raise EmptyGeometryError("MultiSurface must contain at least one polygon")
        for polygon in polygons:
            if not isinstance(polygon, Polygon):
                raise GeometryError(
                    f"MultiSurface members must be Polygons, got {type(polygon).__name__}"
                )
        object.__setattr__(self, "polygons", polygons)

    @property
    def id(self) -> Id:
        return self.gml.id

    def surface_member(self) -> Tuple[Polygon, ...]:
        return self.polygons

    def __len__(self) -> int:
        return len(self.polygons)

    def __iter__(self) -> Iterator[Polygon]:
        return iter(self.polygons)

    def __getitem__(self, index: int) -> Polygon:
        return self.polygons[index]

    def envelope(self) -> Envelope:
        envelope = self.polygons[0].envelope()
        for polygon in self.polygons[1:]:
            envelope = envelope.union(polygon.envelope())
        return envelope

    def area(self) -> float:
        return sum(polygon.area() for polygon in self.polygons)

    def to_shapely(self):
        """Convert to a shapely ``MultiPolygon`` with Z coordinates."""
        from shapely.geometry import MultiPolygon

        return MultiPolygon([polygon.to_shapely() for polygon in self.polygons])
