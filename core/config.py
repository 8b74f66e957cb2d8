# core/config.py

"""
Configuration constants for the registrar.

Grade definitions, display formats, and logging defaults live here so that
policy changes (a new grade symbol, a different point value) happen in one place.
"""

# === grade definitions ===

# letter grade -> grade points used for GPA
GRADE_POINTS: dict[str, float] = {
    "A+": 4.0,
    "A": 4.0,
    "A-": 3.67,
    "B+": 3.33,
    "B": 3.0,
    "B-": 2.67,
    "C+": 2.33,
    "C": 2.0,
    "C-": 1.67,
    "D+": 1.33,
    "D": 1.0,
    "D-": 0.67,
    "F": 0.0,
}

VALID_GRADES: frozenset[str] = frozenset(GRADE_POINTS)

INVALID_GRADE_MESSAGE = "Please enter a valid grade"

# === date formats ===

# birth dates are entered as M/D/YYYY, e.g. 1/1/2001
BIRTH_DATE_INPUT_FORMAT = "%m/%d/%Y"

# === logging ===

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_LEVEL_ENV_VAR = "REGISTRAR_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
