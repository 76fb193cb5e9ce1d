# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2024-2026 GMLSurface Team

"""
Declarative GML deserializer.

Reads GML text into an ``xml.etree.ElementTree`` tree and maps it onto the
Pydantic models of ``gmlsurface.gml.schema``. Elements and attributes are
matched by local name, so ``gml:id``, ``id`` and ``{http://www.opengis.net/gml}id``
are the same field; an element that carries two of them is rejected.

Expat is driven without namespace processing: GML fragments cut out of a
CityGML document routinely use the ``gml:`` and ``xlink:`` prefixes without
declaring them, which a namespace-aware parser rejects as unbound.
"""

import xml.etree.ElementTree as ET  # nosec B405 - tree building only, parsing goes through expat below
from typing import Any, Dict, Type, TypeVar
from xml.parsers import expat  # nosec B407 - no external entities or DTD loading is enabled

from pydantic import BaseModel, ValidationError

from .exceptions import DeserializationError

M = TypeVar("M", bound=BaseModel)

ATTRIBUTE_PREFIX = "@"
TEXT_KEY = "$text"


def local_name(name: str) -> str:
    """Remove namespace prefix (``gml:``) or Clark notation (``{uri}``) from a name."""
    if "}" in name:
        name = name.split("}", 1)[1]
    if ":" in name:
        name = name.split(":", 1)[1]
    return name


def read_element(text: str) -> ET.Element:
    """Parse GML text into an element tree and return its root.

    Raises:
        DeserializationError: If the text is not well-formed XML
    """
    if not isinstance(text, (str, bytes)):
        raise DeserializationError(f"Expected GML text, got {type(text).__name__}")

    builder = ET.TreeBuilder()
    parser = expat.ParserCreate()
    parser.buffer_text = True
    parser.StartElementHandler = builder.start
    parser.EndElementHandler = builder.end
    parser.CharacterDataHandler = builder.data

    try:
        parser.Parse(text, True)
    except expat.ExpatError as exc:
        raise DeserializationError(f"Malformed GML: {exc}") from exc

    return builder.close()


def element_to_mapping(element: ET.Element) -> Dict[str, Any]:
    """Convert an element into the plain mapping the schema models validate.

    Attributes become ``@<local name>`` keys, trimmed text becomes ``$text``
    and child elements are grouped into lists keyed by local name, in
    document order.

    Raises:
        DeserializationError: If two attributes share a local name
    """
    mapping: Dict[str, Any] = {}
    for key, value in element.attrib.items():
        name = ATTRIBUTE_PREFIX + local_name(key)
        if name in mapping:
            raise DeserializationError(
                f"Ambiguous attribute {local_name(key)!r} on <{element.tag}>: declared more than once"
            )
        mapping[name] = value
    text = (element.text or "").strip()
    if text:
        mapping[TEXT_KEY] = text
    for child in element:
        mapping.setdefault(local_name(child.tag), []).append(element_to_mapping(child))
    return mapping


def from_xml(text: str, model: Type[M]) -> M:
    """Deserialize GML text into ``model``.

    ``model`` must declare the local name of its root element as the
    ``xml_tag`` class variable.

    Raises:
        DeserializationError: If the text is malformed, the root element is
            not ``model.xml_tag``, or the content does not fit the model
    """
    root = read_element(text)

    expected = model.xml_tag
    found = local_name(root.tag)
    if found != expected:
        raise DeserializationError(f"Expected root element <{expected}>, found <{root.tag}>")

    try:
        return model.model_validate(element_to_mapping(root))
    except ValidationError as exc:
        raise DeserializationError(f"Invalid <{expected}> element: {exc}") from exc
