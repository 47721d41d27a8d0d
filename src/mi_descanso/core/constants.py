"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

BASE_DAYS_PER_YEAR = 22
MAX_VISIBLE_ENTRIES = 3
MIN_PASSWORD_LENGTH = 6

HOLIDAY_WEEK_LABELS = ("A", "B")
DEFAULT_HOLIDAY_WEEK_LABEL = "A"

# Placeholders when a profile name cannot be resolved.
UNKNOWN_NAME = "Unknown"
FALLBACK_NAME = "Usuario"

USER_PALETTE = (
    "blue",
    "emerald",
    "amber",
    "rose",
    "indigo",
    "cyan",
    "teal",
    "lime",
    "orange",
    "fuchsia",
    "violet",
    "sky",
    "pink",
    "red",
    "green",
    "yellow",
    "stone",
    "slate",
    "neutral",
    "zinc",
)
