# core/constants.py

"""
Program-wide settings for the roster engine and its terminal front end.
"""

import logging

# --- seed file format ---

COMMENT_MARKER = "#"
FIELD_DELIMITER = "\t"

NAME_COLUMN = "name"
KEY_COLUMN = "email"
SCORE_COLUMN = "participation_score"
DEFERRALS_COLUMN = "deferrals"
ABSENCES_COLUMN = "absent"

REQUIRED_COLUMNS = (
    NAME_COLUMN,
    KEY_COLUMN,
    SCORE_COLUMN,
    DEFERRALS_COLUMN,
    ABSENCES_COLUMN,
)

# --- display tiers ---

TIER_MARKERS = ("🔴", "🟠", "🟡", "🟢", "🔵")
TIER_COUNT = len(TIER_MARKERS)
ANSWER_MARKER = "🔥"

# --- logging ---

LOG_LEVEL_ENV_VAR = "ROSTER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING
