# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2024-2026 GMLSurface Team

"""
Parser configuration model.

Defines the frozen Pydantic model that tunes how GML text is resolved into
geometry:

- ParserConfig: hash algorithm used for fallback identifiers and whether the
  declared ``srsDimension`` of coordinate lists is enforced.

Configuration can be built directly, loaded from a YAML file, and overridden
through environment variables that use the same upper-case aliases
(e.g. ``GML_HASH_ALGORITHM=sha256``).
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Immutable; unknown keys are rejected so a misspelled setting is an error
FROZEN_CONFIG = ConfigDict(extra='forbid', populate_by_name=True, frozen=True)

_TRUE_STRINGS = {'1', 'true', 'yes', 'on'}
_FALSE_STRINGS = {'0', 'false', 'no', 'off'}


class ParserConfig(BaseModel):
    """Settings for GML geometry resolution."""
    model_config = FROZEN_CONFIG

    hash_algorithm: Literal['blake2b', 'sha256'] = Field(
        default='blake2b',
        alias='GML_HASH_ALGORITHM',
        description='Hash used to derive identifiers for features without a usable gml:id'
    )
    check_srs_dimension: bool = Field(
        default=True,
        alias='GML_CHECK_SRS_DIMENSION',
        description='Reject coordinate lists that declare an srsDimension other than 3'
    )

    @classmethod
    def from_file(
        cls,
        path: Path,
        overrides: Optional[Dict[str, Any]] = None,
        *,
        use_env: bool = True,
    ) -> 'ParserConfig':
        """
        Load configuration from a YAML file.

        Loading precedence (highest to lowest):
        1. Programmatic overrides
        2. Environment variables (field aliases, e.g. GML_HASH_ALGORITHM)
        3. Config file (YAML)
        4. Field defaults

        Args:
            path: Path to configuration YAML file
            overrides: Dictionary of programmatic overrides
            use_env: Whether to read environment variables (default: True)

        Returns:
            Validated ParserConfig instance

        Raises:
            ConfigurationError: If the file is missing, unreadable or invalid
        """
        path = Path(path)
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                file_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigurationError(f"Failed to load configuration {path}: {exc}") from exc

        if not isinstance(file_config, dict):
            raise ConfigurationError(
                f"Configuration {path} must be a mapping, got {type(file_config).__name__}"
            )

        values = _normalize_keys(file_config)
        if use_env:
            values.update(_load_env_overrides())
        if overrides:
            values.update(_normalize_keys(overrides))

        return cls.from_mapping(values)

    @classmethod
    def from_mapping(cls, values: Dict[str, Any]) -> 'ParserConfig':
        """Validate a plain mapping, converting validation failures to ConfigurationError."""
        try:
            return cls(**_normalize_keys(values))
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid parser configuration: {exc}") from exc


def _normalize_key(key: str) -> str:
    """Map a ParserConfig field name to its alias; other keys pass through unchanged."""
    field = ParserConfig.model_fields.get(key)
    if field is not None and field.alias:
        return field.alias
    return key


def _normalize_keys(values: Dict[str, Any]) -> Dict[str, Any]:
    """Key a settings mapping by alias so later layers replace earlier ones."""
    return {_normalize_key(str(key)): value for key, value in values.items()}


def _load_env_overrides() -> Dict[str, Any]:
    """Collect environment variables named after ParserConfig aliases."""
    overrides: Dict[str, Any] = {}
    for name, field in ParserConfig.model_fields.items():
        alias = field.alias or name
        raw = os.environ.get(alias)
        if raw is None:
            continue
        if field.annotation is bool:
            lowered = raw.strip().lower()
            if lowered in _TRUE_STRINGS:
                overrides[alias] = True
            elif lowered in _FALSE_STRINGS:
                overrides[alias] = False
            else:
                raise ConfigurationError(f"Environment variable {alias} is not a boolean: {raw!r}")
        else:
            overrides[alias] = raw.strip()
        logger.debug("Config override from environment: %s", alias)
    return overrides


DEFAULT_CONFIG = ParserConfig()
