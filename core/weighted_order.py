# core/weighted_order.py

"""
Lottery-bag generator for the weighted call order.

Every student gets a number of tickets inversely related to their participation score: the
lowest score gets `range + 1` tickets and the highest gets exactly one. All tickets go into
one bag, the bag is shuffled, and the order is the sequence of first appearances. Everyone
appears exactly once, and low-participation students tend to come up early.

The same pass assigns each student a display tier. Tiers are for presentation grouping only
and never influence the order.
"""

import logging
import math
import random

from core.constants import TIER_COUNT
from core.errors import RosterConsistencyError
from models.roster import Roster

logger = logging.getLogger(__name__)


def ticket_counts(roster: Roster) -> dict[str, int]:
    """
    Computes the ticket count for every student.

    Returns:
        A mapping of student key to ticket count, `range - (score - min) + 1`. Empty for an
        empty roster. Every count is 1 when all scores are equal.
    """
    bounds = roster.score_bounds()
    if bounds is None:
        return {}

    low, high = bounds
    span = high - low

    return {
        student.key: span - (student.participation_score - low) + 1
        for student in roster
    }


def tier_for(score: int, low: int, span: int, tier_count: int = TIER_COUNT) -> int:
    """
    Buckets a score into a display tier in `[0, tier_count - 1]`.

    Halves round up, so a score exactly between two tiers lands in the higher one.
    """
    if span <= 0 or tier_count <= 1:
        return 0

    tier = math.floor((score - low) / span * (tier_count - 1) + 0.5)
    return max(0, min(tier_count - 1, tier))


def generate_order(
    roster: Roster,
    rng: random.Random | None = None,
    tier_count: int = TIER_COUNT,
) -> list[str]:
    """
    Generates a weighted permutation of every key in `roster`.

    Args:
        roster (Roster): The registry to order. Student tiers are updated in place.
        rng (random.Random | None, optional): Source of randomness. Defaults to a freshly seeded generator.
        tier_count (int, optional): Number of display tiers. Defaults to `TIER_COUNT`.

    Returns:
        A list holding each roster key exactly once.

    Raises:
        RosterConsistencyError: If the resulting order is not the same size as the roster.

    Notes:
        - The full bag is rebuilt on every call. Rosters are small enough that
          O(students * max_tickets) is not a concern.
    """
    rng = rng or random.Random()

    tickets = ticket_counts(roster)
    bounds = roster.score_bounds()

    if bounds is not None:
        low, high = bounds
        for student in roster:
            student.tier = tier_for(
                student.participation_score, low, high - low, tier_count
            )

    bag: list[str] = []
    for key, count in tickets.items():
        bag.extend([key] * count)

    rng.shuffle(bag)

    # dict keeps first-insertion order
    order = list(dict.fromkeys(bag))

    if len(order) != len(roster):
        raise RosterConsistencyError(
            "order-permutation",
            f"generated order has {len(order)} keys but the roster holds {len(roster)}",
        )

    logger.debug("Regenerated order over %d students (%d tickets)", len(order), len(bag))

    return order
