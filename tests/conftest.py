"""Shared test fixtures for duoschema."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

import pytest

from duoschema import (
    Options,
    Schema,
    array,
    enum_,
    field,
    integer,
    max_length,
    min_length,
    minimum,
    optional_field,
    string,
    success,
)


class Role(StrEnum):
    ADMIN = "admin"
    MEMBER = "member"
    GUEST = "guest"


@dataclass(frozen=True)
class User:
    name: str
    age: int
    role: Role
    tags: list[str]
    nickname: str | None = None


def role_schema() -> Schema[Role]:
    return enum_(("admin", Role.ADMIN), ("member", Role.MEMBER), ("guest", Role.GUEST))


def build_user_schema() -> Schema[User]:
    return field(
        "name",
        max_length(min_length(string(), 1), 50),
        lambda name: field(
            "age",
            minimum(integer(), 0),
            lambda age: field(
                "role",
                role_schema(),
                lambda role: field(
                    "tags",
                    array(string()),
                    lambda tags: optional_field(
                        "nickname",
                        string(),
                        lambda nickname: success(User(name, age, role, tags, nickname)),
                    ),
                ),
            ),
        ),
    )


@pytest.fixture
def user_schema() -> Schema[User]:
    return build_user_schema()


@pytest.fixture
def valid_user() -> dict:
    return {"name": "Ada", "age": 36, "role": "admin", "tags": ["math", "engines"]}


@pytest.fixture
def format_options() -> Options:
    """Options with ``format`` asserted rather than annotated."""
    return Options(validate_formats=True)
