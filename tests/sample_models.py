"""Sample models and controllers shared by the test suite."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from swaggerize.models import Model


class AuditMixin:
    def audit_trail(self):
        raise AssertionError("mixin methods must never be probed")


class User(AuditMixin, Model):
    __tablename__ = "users"
    __hidden__ = ("password",)
    __appends__ = ["display_name"]

    id: Mapped[int] = mapped_column(primary_key=True)
    email: Mapped[str]
    password: Mapped[str]
    is_admin: Mapped[bool] = mapped_column(default=False)
    created_at: Mapped[datetime | None]

    @property
    def display_name(self) -> str | None:
        return self.email.split("@")[0] if self.email else None

    def posts(self):
        return self.has_many(Post)

    def profile(self):
        return self.has_one(Profile)

    def greet(self, other):
        raise AssertionError("methods with required arguments must never be probed")

    def slug(self, separator="-"):
        return f"user{separator}{self.id}"

    @staticmethod
    def make():
        raise AssertionError("static methods must never be probed")

    @classmethod
    def build(cls):
        raise AssertionError("class methods must never be probed")

    def _private(self):
        raise AssertionError("private methods must never be probed")


class Profile(Model):
    __tablename__ = "profiles"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int]
    bio: Mapped[str] = mapped_column(Text)

    def user(self):
        return self.belongs_to(User)


class Post(Model):
    __tablename__ = "posts"
    __casts__ = {"rating": "float", "metadata_json": "array"}

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int]
    title: Mapped[str]
    rating: Mapped[float]
    metadata_json: Mapped[str | None]

    def author(self):
        return self.belongs_to(User)

    def comments(self):
        return self.has_many(Comment)

    def tags(self):
        return self.belongs_to_many(Tag)


class Comment(Model):
    __tablename__ = "comments"
    __dates__ = ("edited_on",)

    id: Mapped[int] = mapped_column(primary_key=True)
    post_id: Mapped[int]
    body: Mapped[str] = mapped_column(Text)
    edited_on: Mapped[str | None]

    def post(self):
        return self.belongs_to(Post)

    def reactions(self):
        return self.morph_many(Reaction)


class Tag(Model):
    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str]


class Reaction(Model):
    __tablename__ = "reactions"

    id: Mapped[int] = mapped_column(primary_key=True)
    kind: Mapped[str]


class Country(Model):
    __tablename__ = "countries"

    id: Mapped[int] = mapped_column(primary_key=True)

    def regions(self):
        return self.has_many(Region)


class Region(Model):
    __tablename__ = "regions"

    id: Mapped[int] = mapped_column(primary_key=True)

    def capital(self):
        return self.has_one(City)


class City(Model):
    __tablename__ = "cities"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str]


class Exploding(Model):
    __tablename__ = "exploding"

    id: Mapped[int] = mapped_column(primary_key=True)

    def owner(self):
        raise RuntimeError("database is down")


class BadAppends(Model):
    __tablename__ = "bad_appends"
    __appends__ = "full_name"

    id: Mapped[int] = mapped_column(primary_key=True)


class PostController:
    """
    Blog posts.

    @model sample_models.Post
    """

    def index(self):
        """List posts."""

    def show(self):
        """
        Show one comment thread.

        @model sample_models:Comment
        """


def list_tags():
    """@model sample_models:Tag"""


def list_controllers():
    """@model sample_models:PostController"""


def list_missing():
    """@model sample_models:Nope"""


def undocumented():
    pass
