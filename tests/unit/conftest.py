"""
Unit test fixtures and configuration.

Fixtures specific to unit tests (fast, isolated tests).
"""

import pytest

from gmlsurface.core.config import ParserConfig

# ============================================================================
# Common Config Fixtures
# ============================================================================

@pytest.fixture
def default_config():
    """Parser configuration with all defaults."""
    return ParserConfig()


@pytest.fixture
def sha256_config():
    """Parser configuration hashing fallback identifiers with SHA-256."""
    return ParserConfig(hash_algorithm="sha256")


@pytest.fixture(autouse=True)
def clean_gml_env(monkeypatch):
    """Keep configuration environment overrides from leaking into tests."""
    for name in ("GML_HASH_ALGORITHM", "GML_CHECK_SRS_DIMENSION"):
        monkeypatch.delenv(name, raising=False)
