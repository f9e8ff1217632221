# core/search.py

"""
Builds the list of student keys shown to the operator (the "view").

With an empty query the view is the weighted order, unchanged. Otherwise it holds only the
students whose names fuzzy-match the query, best match first. Equal scores keep the roster's
iteration order, so rebuilding with the same query and roster always gives the same view.
"""

from core.fuzzy import fuzzy_score
from models.roster import Roster


def build_view(roster: Roster, order: list[str], query: str) -> list[str]:
    """
    Derives the view from the roster, the current order, and the query.

    Args:
        roster (Roster): The registry.
        order (list[str]): The current weighted order.
        query (str): The search text. May be empty.

    Returns:
        A new list of keys, all of which exist in `roster`.

    Raises:
        RosterConsistencyError: If `order` references a key the roster does not hold.
    """
    if not query:
        return [roster.require(key, "order-membership").key for key in order]

    matches: list[tuple[int, str]] = []

    for student in roster:
        score = fuzzy_score(student.name, query)
        if score is not None:
            matches.append((score, student.key))

    # sort is stable, so ties keep roster order
    matches.sort(key=lambda match: match[0], reverse=True)

    return [key for _, key in matches]
