"""Schemas for family records and statistic results."""

from collection_quiz.schemas.family import (
    Family,
    FamilyRecord,
    FamilySummary,
    Person,
    PersonRecord,
)
from collection_quiz.schemas.letters import LetterCount

__all__ = [
    "Person",
    "Family",
    "PersonRecord",
    "FamilyRecord",
    "FamilySummary",
    "LetterCount",
]
