"""Per-family member counts and average ages."""

import logging
from collections.abc import Iterable
from decimal import Decimal

from collection_quiz.errors import MissingArgumentError
from collection_quiz.schemas import Family, FamilySummary

logger = logging.getLogger(__name__)


def summarize_family(family: Family) -> FamilySummary:
    """Build the statistic entry for a single family.

    Ages are truncated to integers before they are summed; only the final
    division is done in decimal arithmetic.
    """
    persons = family.persons
    age_sum = sum(int(person.age) for person in persons)
    count = len(persons)

    average_age = Decimal(age_sum) / count if count else Decimal(0)

    return FamilySummary(
        family_id=family.id,
        number_of_family_members=count,
        average_age=average_age,
    )


def get_family_statistic(families: Iterable[Family] | None) -> list[FamilySummary]:
    """Return a statistic about families.

    Args:
        families: Families to analyze

    Returns:
        One FamilySummary per family, in input order. average_age is 0 for
        families without persons.

    Raises:
        MissingArgumentError: If families is None
    """
    if families is None:
        raise MissingArgumentError("families must not be None", param="families")

    summaries = [summarize_family(family) for family in families]
    logger.debug("Summarized %d families", len(summaries))
    return summaries
