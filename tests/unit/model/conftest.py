"""Shared geometry fixtures for model unit tests."""

import pytest

from gmlsurface.model import DirectPosition, Gml, Id, LinearRing, Polygon


def square(size: float, z: float = 0.0, origin: float = 0.0):
    """Closed square ring, written the GML way with the first point repeated."""
    o, s = origin, origin + size
    return [(o, o, z), (s, o, z), (s, s, z), (o, s, z), (o, o, z)]


@pytest.fixture
def make_square():
    """Factory for closed square point lists, see ``square``."""
    return square


@pytest.fixture
def square_ring():
    return LinearRing(square(10.0))


@pytest.fixture
def hole_ring():
    return LinearRing(square(2.0, origin=4.0))


@pytest.fixture
def square_polygon(square_ring, hole_ring):
    return Polygon(Gml(Id("PG_1")), square_ring, [hole_ring])


@pytest.fixture
def raised_polygon():
    return Polygon(Gml(Id("PG_2")), LinearRing(square(5.0, z=3.0, origin=20.0)))


@pytest.fixture
def origin():
    return DirectPosition(0.0, 0.0, 0.0)
