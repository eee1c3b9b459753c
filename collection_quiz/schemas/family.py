"""Schemas for families, their members and per-family statistics.

``Person`` and ``Family`` describe the shape the statistic functions read,
so callers can pass their own objects. ``PersonRecord`` and ``FamilyRecord``
are ready-made models that satisfy that shape and can be loaded from JSON.
"""

from collections.abc import Collection
from decimal import Decimal
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


@runtime_checkable
class Person(Protocol):
    """Anything exposing a numeric age."""

    @property
    def age(self) -> int | float | Decimal: ...


@runtime_checkable
class Family(Protocol):
    """Anything exposing an integer id and a collection of persons."""

    @property
    def id(self) -> int: ...

    @property
    def persons(self) -> Collection[Person]: ...


class PersonRecord(BaseModel):
    """A family member."""

    model_config = ConfigDict(frozen=True)

    age: Decimal = Field(description="Age of the person (not validated)")


class FamilyRecord(BaseModel):
    """A family and its members."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(alias="ID", description="Family identifier")
    persons: tuple[PersonRecord, ...] = Field(
        default=(), alias="Persons", description="Members of the family"
    )


class FamilySummary(BaseModel):
    """Statistic entry for a single family."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    family_id: int = Field(alias="familyId", description="Identifier of the family")
    number_of_family_members: int = Field(
        ge=0, alias="numberOfFamilyMembers", description="Number of persons in the family"
    )
    average_age: Decimal = Field(
        alias="averageAge", description="Average age of the members, 0 for empty families"
    )
