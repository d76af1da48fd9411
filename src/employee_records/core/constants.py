"""Field limits, rounding precision and creation defaults for employee records."""

MIN_NAME_LENGTH = 2

MIN_RATING = 0.0
MAX_RATING = 5.0

SALARY_DECIMALS = 2
RATING_DECIMALS = 1

DEFAULT_RATING = 0.0
DEFAULT_EXPERIENCE = 0
