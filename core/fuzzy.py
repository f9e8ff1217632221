# core/fuzzy.py

"""
Fuzzy subsequence scoring for the roster search box.

A pattern matches a text when every pattern character appears in the text in the same order,
ignoring case. Among all such alignments the best one is scored: every matched character earns
`SCORE_MATCH`, matches at the start of a word earn `BONUS_BOUNDARY`, a match immediately after
the previous one earns `BONUS_CONSECUTIVE`, and skipped characters between two matches cost a
gap penalty. Higher is better.
"""

SCORE_MATCH = 16
BONUS_BOUNDARY = 8
BONUS_FIRST_CHAR = 4
BONUS_CONSECUTIVE = 6
PENALTY_GAP_START = 3
PENALTY_GAP_EXTENSION = 1


def _position_bonus(text: str, index: int) -> int:
    if index == 0:
        return BONUS_BOUNDARY + BONUS_FIRST_CHAR

    if text[index].isalnum() and not text[index - 1].isalnum():
        return BONUS_BOUNDARY

    return 0


def _gap_penalty(gap: int) -> int:
    if gap <= 0:
        return 0
    return PENALTY_GAP_START + PENALTY_GAP_EXTENSION * (gap - 1)


def fuzzy_score(text: str, pattern: str) -> int | None:
    """
    Scores `pattern` against `text` as a case-insensitive subsequence.

    Args:
        text (str): The candidate string, e.g. a student's name.
        pattern (str): The query typed by the operator.

    Returns:
        The best alignment score, 0 for an empty pattern, or None if `pattern` is not a
        subsequence of `text`.
    """
    text = text.lower()
    pattern = pattern.lower()

    if not pattern:
        return 0

    if len(pattern) > len(text):
        return None

    bonuses = [_position_bonus(text, j) for j in range(len(text))]

    # best[j]: best score with the current pattern character matched at text[j]
    best: list[int | None] = [
        SCORE_MATCH + bonuses[j] if ch == pattern[0] else None
        for j, ch in enumerate(text)
    ]

    for pattern_char in pattern[1:]:
        current: list[int | None] = [None] * len(text)

        for j, ch in enumerate(text):
            if ch != pattern_char:
                continue

            candidates = []
            for k in range(j):
                previous = best[k]
                if previous is None:
                    continue

                if k == j - 1:
                    candidates.append(previous + BONUS_CONSECUTIVE)
                else:
                    candidates.append(previous - _gap_penalty(j - k - 1))

            if candidates:
                current[j] = max(candidates) + SCORE_MATCH + bonuses[j]

        best = current

    scores = [score for score in best if score is not None]
    return max(scores) if scores else None
