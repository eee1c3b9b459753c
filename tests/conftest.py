"""Shared fixtures for Collection Quiz tests."""

from dataclasses import dataclass, field
from decimal import Decimal

import pytest

from collection_quiz.schemas import FamilyRecord, PersonRecord


@dataclass
class PlainPerson:
    """Person that is not a pydantic model."""

    age: int | float | Decimal


@dataclass
class PlainFamily:
    """Family that is not a pydantic model."""

    id: int
    persons: list[PlainPerson] = field(default_factory=list)


@pytest.fixture
def two_families() -> list[FamilyRecord]:
    return [
        FamilyRecord(id=1, persons=(PersonRecord(age=10), PersonRecord(age=20))),
        FamilyRecord(id=2, persons=()),
    ]


@pytest.fixture
def plain_families() -> list[PlainFamily]:
    return [
        PlainFamily(id=7, persons=[PlainPerson(30), PlainPerson(41), PlainPerson(50)]),
        PlainFamily(id=3, persons=[PlainPerson(5)]),
    ]
