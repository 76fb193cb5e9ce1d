# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2024-2026 GMLSurface Team

"""
Polygon and LinearRing conversion.

Turns mapped ``GmlPolygon``/``GmlLinearRing`` elements into geometry model
objects. Coordinates are handed to the model exactly as they appear in the
document; collapsing repeated points and rejecting degenerate rings is the
model's job.
"""

from typing import List, Optional

from gmlsurface.core.config import DEFAULT_CONFIG, ParserConfig
from gmlsurface.core.exceptions import GeometryError, InvalidCoordinatesError
from gmlsurface.model import DirectPosition, Gml, LinearRing, Polygon

from .exceptions import PolygonConversionError
from .identity import resolve_id
from .schema import GmlCoordinates, GmlLinearRing, GmlPolygon
from .xml_reader import from_xml

SUPPORTED_SRS_DIMENSION = 3


def _checked_values(coords: GmlCoordinates, config: ParserConfig) -> List[float]:
    if (
        config.check_srs_dimension
        and coords.srs_dimension is not None
        and coords.srs_dimension != SUPPORTED_SRS_DIMENSION
    ):
        raise InvalidCoordinatesError(
            f"<{coords.xml_tag}> declares srsDimension={coords.srs_dimension}, "
            f"only {SUPPORTED_SRS_DIMENSION} is supported"
        )
    return coords.values


def ring_ordinates(ring: GmlLinearRing, config: ParserConfig = DEFAULT_CONFIG) -> List[float]:
    """Flat ordinate list of a ring, from its ``posList`` or its ``pos`` children."""
    if ring.pos_list is not None:
        return list(_checked_values(ring.pos_list, config))

    ordinates: List[float] = []
    for pos in ring.pos:
        values = _checked_values(pos, config)
        if len(values) != SUPPORTED_SRS_DIMENSION:
            raise InvalidCoordinatesError(f"<pos> must have 3 ordinates, got {len(values)}")
        ordinates.extend(values)
    return ordinates


def convert_linear_ring(ring: GmlLinearRing, config: ParserConfig = DEFAULT_CONFIG) -> LinearRing:
    """
    Build a LinearRing from its mapped element.

    Raises:
        GeometryError: If the geometry model rejects the ring
    """
    return LinearRing(DirectPosition.from_ordinates(ring_ordinates(ring, config)))


def convert_polygon(polygon: GmlPolygon, config: ParserConfig = DEFAULT_CONFIG) -> Polygon:
    """
    Build a Polygon from its mapped element.

    The polygon keeps its ``gml:id`` when usable, otherwise its identifier is
    derived from its content.

    Raises:
        GeometryError: If the geometry model rejects a ring or the polygon
    """
    exterior = convert_linear_ring(polygon.exterior.ring, config)
    interiors = [convert_linear_ring(boundary.ring, config) for boundary in polygon.interiors]
    return Polygon(Gml(resolve_id(polygon.id, polygon, config)), exterior, interiors)


def parse_polygon(source_text: str, config: Optional[ParserConfig] = None) -> Polygon:
    """Parse a standalone ``<gml:Polygon>`` fragment.

    Raises:
        DeserializationError: If the text is not a well-formed Polygon element
        PolygonConversionError: If the geometry model rejects the polygon
    """
    config = config or DEFAULT_CONFIG
    mapped = from_xml(source_text, GmlPolygon)
    try:
        return convert_polygon(mapped, config)
    except GeometryError as exc:
        raise PolygonConversionError(exc) from exc


def parse_linear_ring(source_text: str, config: Optional[ParserConfig] = None) -> LinearRing:
    """Parse a standalone ``<gml:LinearRing>`` fragment.

    Raises:
        DeserializationError: If the text is not a well-formed LinearRing element
        PolygonConversionError: If the geometry model rejects the ring
    """
    config = config or DEFAULT_CONFIG
    mapped = from_xml(source_text, GmlLinearRing)
    try:
        return convert_linear_ring(mapped, config)
    except GeometryError as exc:
        raise PolygonConversionError(exc) from exc
