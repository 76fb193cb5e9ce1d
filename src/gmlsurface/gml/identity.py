# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2024-2026 GMLSurface Team

"""
Identity resolution for mapped GML elements.

An element keeps its ``gml:id`` when that parses as an ``Id``. Otherwise
the identifier is derived from the element's full mapped content: every
field (including the empty identifier itself and by-reference members) is
serialised to canonical JSON and hashed with a pinned algorithm, so the same
input produces the same identifier in every process and on every run.
Python's built-in ``hash()`` is salted per process and is never used here.
"""

import hashlib
import json
import logging

from gmlsurface.core.config import DEFAULT_CONFIG, ParserConfig
from gmlsurface.core.exceptions import ConfigurationError
from gmlsurface.model import Id

from .schema import GmlElement

logger = logging.getLogger(__name__)

# Fallback identifiers are 64-bit values
DIGEST_SIZE = 8


def content_digest(element: GmlElement, algorithm: str = "blake2b") -> int:
    """
    Compute a deterministic 64-bit digest over all fields of a mapped element.

    Dictionary keys are sorted before serialisation; list order (surface
    members, interior rings, ordinates) is kept, so reordering members
    changes the digest.

    Raises:
        ConfigurationError: If ``algorithm`` is not supported
    """
    payload = json.dumps(
        {"element": element.xml_tag, "content": element.model_dump(by_alias=False)},
        sort_keys=True,
        default=str,
    ).encode("utf-8")

    if algorithm == "blake2b":
        digest = hashlib.blake2b(payload, digest_size=DIGEST_SIZE).digest()
    elif algorithm == "sha256":
        digest = hashlib.sha256(payload).digest()[:DIGEST_SIZE]
    else:
        raise ConfigurationError(f"Unsupported hash algorithm: {algorithm}")
    return int.from_bytes(digest, "big")


def fallback_id(element: GmlElement, algorithm: str = "blake2b") -> Id:
    """Derive an identifier from the content of ``element``."""
    return Id.from_hashed_u64(content_digest(element, algorithm))


def resolve_id(declared: str, element: GmlElement, config: ParserConfig = DEFAULT_CONFIG) -> Id:
    """Return the declared identifier if usable, else the content-derived one.

    Never fails: a missing or malformed ``gml:id`` is not an error.
    """
    parsed = Id.parse(declared)
    if parsed is not None:
        return parsed

    derived = fallback_id(element, config.hash_algorithm)
    logger.debug(
        "No usable gml:id on <%s> (%r), derived %s with %s",
        element.xml_tag, declared, derived, config.hash_algorithm,
    )
    return derived
