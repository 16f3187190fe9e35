"""Top-level pytest configuration for swaggerize."""

import pytest

# Import error modules for their side effects so the registry is populated
import swaggerize.errors.base
import swaggerize.definitions.errors
import swaggerize.logging.errors

from swaggerize.config import GeneratorSettings, clear_settings_cache
from swaggerize.definitions import FactoryRegistry

import sample_models


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate every test from SWAGGERIZE_* environment variables."""
    for key in (
        "SWAGGERIZE_DEFINITION_METHODS",
        "SWAGGERIZE_IGNORED_METHODS",
        "SWAGGERIZE_DEFINITIONS_PREFIX",
        "SWAGGERIZE_BODY_PARAM_NAME",
        "SWAGGERIZE_BODY_PARAM_DESCRIPTION",
        "SWAGGERIZE_GENERATE_EXAMPLES",
    ):
        monkeypatch.delenv(key, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def settings():
    return GeneratorSettings()


@pytest.fixture
def factories():
    """Factories for the sample models that have example data."""
    registry = FactoryRegistry()
    registry.register(
        sample_models.User,
        lambda: sample_models.User(
            id=1,
            email="ada@example.com",
            password="secret",
            is_admin=False,
        ),
    )
    return registry
