"""Tests for the factory based fake instance provider."""

from __future__ import annotations

import pytest

from swaggerize.definitions.errors import ProviderUnavailable
from swaggerize.definitions.examples import FactoryRegistry
from swaggerize.errors import ErrorSeverity

from sample_models import Post, Tag, User


def test_materialize_registered_factory(factories):
    user = factories.materialize(User)
    assert isinstance(user, User)
    assert user.email == "ada@example.com"


def test_materialize_accepts_instances(factories):
    assert factories.materialize(User()).id == 1


def test_unregistered_model_is_unavailable():
    with pytest.raises(ProviderUnavailable) as exc_info:
        FactoryRegistry().materialize(Post)

    error = exc_info.value
    assert error.severity == ErrorSeverity.WARNING
    assert error.context["model"] == "Post"
    assert error.context["reason"] == "no factory registered"


def test_failing_factory_is_unavailable():
    registry = FactoryRegistry()

    @registry.factory(Tag)
    def make_tag():
        raise LookupError("no database connection")

    assert Tag in registry
    with pytest.raises(ProviderUnavailable) as exc_info:
        registry.materialize(Tag)
    assert "no database connection" in exc_info.value.message
    assert isinstance(exc_info.value.__cause__, LookupError)
