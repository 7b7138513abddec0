"""Internal constants shared across the library."""

#: Hard retention cap for the usage log. Oldest entries are evicted first.
USAGE_HISTORY_LIMIT = 100

DEFAULT_DEVICE_NAME = "Smart Trashcan"
DEFAULT_FIRMWARE_VERSION = "1.0.0"

# ------------------------------------------------------------------
# Fill level bands (percent)
# ------------------------------------------------------------------

TRASH_LEVEL_MIN = 0
TRASH_LEVEL_MAX = 100
HALF_FULL_THRESHOLD = 30
FULL_THRESHOLD = 70

# ------------------------------------------------------------------
# Analytics rollup windows (days)
# ------------------------------------------------------------------

WEEKLY_WINDOW_DAYS = 7
MONTHLY_WINDOW_DAYS = 30
MAX_PEAK_HOURS = 3

WEEKDAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def clamp_percentage(value: int | float) -> int:
    """Clamp *value* to the 0-100 percentage range and round to an int."""
    return max(TRASH_LEVEL_MIN, min(TRASH_LEVEL_MAX, int(round(value))))
