# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2024-2026 GMLSurface Team

"""
MultiSurface resolution.

Converts GML ``MultiSurface`` text into a validated ``model.MultiSurface``:

1. Deserialize the text into ``GmlMultiSurface`` (``DeserializationError``
   on any markup or shape problem, before anything else happens)
2. Resolve the identifier, falling back to a content hash
3. Convert inline polygons in document order; by-reference (``xlink:href``)
   and empty members are skipped, not resolved
4. Let the geometry model assemble the feature

The first geometry rejection aborts the whole parse with
``PolygonConversionError``; no partial feature is ever returned.
"""

import logging
from typing import List, Optional

from gmlsurface.core.config import DEFAULT_CONFIG, ParserConfig
from gmlsurface.core.exceptions import GeometryError
from gmlsurface.model import Gml, MultiSurface, Polygon

from .exceptions import PolygonConversionError
from .identity import resolve_id
from .polygon import convert_polygon
from .schema import GmlMultiSurface, MemberKind
from .xml_reader import from_xml

logger = logging.getLogger(__name__)


def resolve_multi_surface(
    mapped: GmlMultiSurface,
    config: Optional[ParserConfig] = None,
) -> MultiSurface:
    """Convert a mapped MultiSurface into geometry.

    Args:
        mapped: Deserialized MultiSurface element
        config: Parser settings (default: DEFAULT_CONFIG)

    Returns:
        MultiSurface with the resolved identifier and one polygon per
        inline surface member, in source order

    Raises:
        PolygonConversionError: If the geometry model rejects a member's
            polygon or the assembled feature
    """
    config = config or DEFAULT_CONFIG
    gml = Gml(resolve_id(mapped.id, mapped, config))

    polygons: List[Polygon] = []
    for index, member in enumerate(mapped.members):
        if member.kind is not MemberKind.INLINE:
            # by-reference members are not dereferenced
            logger.debug("Skipping %s surface member %d of %s (href=%r)",
                         member.kind.value, index, gml.id, member.href)
            continue
        try:
            polygons.append(convert_polygon(member.polygon, config))
        except GeometryError as exc:
            raise PolygonConversionError(exc, member_index=index) from exc

    try:
        multi_surface = MultiSurface(gml, polygons)
    except GeometryError as exc:
        raise PolygonConversionError(exc) from exc

    logger.debug("Resolved MultiSurface %s with %d polygon(s) from %d member(s)",
                 gml.id, len(polygons), len(mapped.members))
    return multi_surface


def parse_multi_surface(source_text: str, config: Optional[ParserConfig] = None) -> MultiSurface:
    """Parse GML ``MultiSurface`` text into a validated MultiSurface.

    Args:
        source_text: GML text with a single top-level MultiSurface element
        config: Parser settings (default: DEFAULT_CONFIG)

    Returns:
        The resolved MultiSurface

    Raises:
        DeserializationError: If the text is malformed or not a MultiSurface
        PolygonConversionError: If the geometry model rejects the content
    """
    mapped = from_xml(source_text, GmlMultiSurface)
    return resolve_multi_surface(mapped, config)
