"""Tests for the SQLAlchemy schema introspector."""

from __future__ import annotations

import pytest

from swaggerize.definitions.errors import ConfigurationError
from swaggerize.definitions.introspection import SQLAlchemyIntrospector

from sample_models import BadAppends, Comment, Post, User


@pytest.fixture
def introspector():
    return SQLAlchemyIntrospector()


def test_columns_in_declaration_order(introspector):
    assert introspector.list_columns(User()) == [
        "id",
        "email",
        "password",
        "is_admin",
        "created_at",
    ]


def test_accepts_classes_and_instances(introspector):
    assert introspector.list_columns(Post) == introspector.list_columns(Post())
    assert introspector.display_name(Post) == introspector.display_name(Post()) == "Post"


def test_hidden_and_computed(introspector):
    assert introspector.list_hidden(User) == {"password"}
    assert introspector.list_computed(User) == ["display_name"]
    assert introspector.list_hidden(Post) == set()
    assert introspector.list_computed(Post) == []


def test_malformed_appends(introspector):
    with pytest.raises(ConfigurationError) as exc_info:
        introspector.list_computed(BadAppends)
    assert exc_info.value.context["model"] == "BadAppends"


def test_casts_from_column_types(introspector):
    casts = introspector.list_casts(User)
    assert casts["id"] == "int"
    assert casts["email"] == "string"
    assert casts["is_admin"] == "boolean"


def test_explicit_casts_override_column_types(introspector):
    casts = introspector.list_casts(Post)
    assert casts["rating"] == "float"
    assert casts["metadata_json"] == "array"


def test_date_columns(introspector):
    assert introspector.list_date_columns(User) == {"created_at"}
    assert introspector.list_date_columns(Comment) == {"edited_on"}


def test_unmapped_class(introspector):
    class Plain:
        pass

    with pytest.raises(ConfigurationError):
        introspector.list_columns(Plain())
