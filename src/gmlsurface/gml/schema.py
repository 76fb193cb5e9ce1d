# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2024-2026 GMLSurface Team

"""
Structural mapping of GML surface elements.

These Pydantic models describe the shape that ``xml_reader.from_xml``
populates, and nothing more: they carry no geometric rules. Field aliases
are the keys produced by ``element_to_mapping`` (``@`` for attributes,
``$text`` for element text, local names for children).

Mapped elements:

- MultiSurface: optional ``gml:id`` and ordered ``surfaceMember`` children
- surfaceMember: optional ``xlink:href`` and an optional inline ``Polygon``
- Polygon: optional ``gml:id``, one ``exterior`` and any number of ``interior``
- LinearRing: optional ``gml:id`` and either a ``posList`` or ``pos`` children
"""

from enum import Enum
from typing import Annotated, Any, ClassVar, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator, model_validator

# Immutable, populated by alias only; undeclared content is ignored
ELEMENT_CONFIG = ConfigDict(extra='ignore', frozen=True)


def _single(value: Any) -> Any:
    """Unwrap the one-element child list produced by the element mapping."""
    if isinstance(value, list):
        if not value:
            return None
        if len(value) > 1:
            raise ValueError(f"expected a single element, found {len(value)}")
        return value[0]
    return value


SingleElement = BeforeValidator(_single)


class GmlElement(BaseModel):
    """Base class for mapped GML elements."""
    model_config = ELEMENT_CONFIG

    xml_tag: ClassVar[str] = ""


class GmlCoordinates(GmlElement):
    """Whitespace-separated ordinate list with an optional declared dimension."""

    srs_dimension: Optional[int] = Field(default=None, alias='@srsDimension')
    values: List[float] = Field(default_factory=list, alias='$text')

    @field_validator('values', mode='before')
    @classmethod
    def _split_text(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.split()
        return value


class GmlPosList(GmlCoordinates):
    xml_tag: ClassVar[str] = "posList"


class GmlPos(GmlCoordinates):
    xml_tag: ClassVar[str] = "pos"


class GmlLinearRing(GmlElement):
    xml_tag: ClassVar[str] = "LinearRing"

    id: str = Field(default="", alias='@id')
    pos_list: Annotated[Optional[GmlPosList], SingleElement] = Field(default=None, alias='posList')
    pos: List[GmlPos] = Field(default_factory=list, alias='pos')

    @model_validator(mode='after')
    def _one_coordinate_encoding(self) -> 'GmlLinearRing':
        if self.pos_list is not None and self.pos:
            raise ValueError("LinearRing must use either posList or pos elements, not both")
        return self


class GmlRingBoundary(GmlElement):
    """``exterior`` or ``interior`` property wrapping a single LinearRing."""

    ring: Annotated[GmlLinearRing, SingleElement] = Field(alias='LinearRing')


class GmlPolygon(GmlElement):
    xml_tag: ClassVar[str] = "Polygon"

    id: str = Field(default="", alias='@id')
    exterior: Annotated[GmlRingBoundary, SingleElement] = Field(alias='exterior')
    interiors: List[GmlRingBoundary] = Field(default_factory=list, alias='interior')


class MemberKind(str, Enum):
    """Variant of a surface member."""
    INLINE = "inline"
    REFERENCE = "reference"
    EMPTY = "empty"


class GmlSurfaceMember(GmlElement):
    """Surface member, either embedding a polygon or pointing to one by ``xlink:href``.

    Only the inline variant is resolved into geometry. Referenced members
    are kept in the mapping (they take part in the fallback identity hash)
    but never dereferenced.
    """
    xml_tag: ClassVar[str] = "surfaceMember"

    href: str = Field(default="", alias='@href')
    polygon: Annotated[Optional[GmlPolygon], SingleElement] = Field(default=None, alias='Polygon')

    @property
    def kind(self) -> MemberKind:
        if self.polygon is not None:
            return MemberKind.INLINE
        if self.href:
            return MemberKind.REFERENCE
        return MemberKind.EMPTY


class GmlMultiSurface(GmlElement):
    xml_tag: ClassVar[str] = "MultiSurface"

    id: str = Field(default="", alias='@id')
    members: List[GmlSurfaceMember] = Field(default_factory=list, alias='surfaceMember')
