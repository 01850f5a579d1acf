"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

ALL_DEPARTMENTS = "all"
UNASSIGNED_DEPARTMENT = "unassigned"

# Department values the store uses for "no department".
UNSET_DEPARTMENT_TAGS = frozenset({"", "n/a"})

DEFAULT_SUGGESTION_LIMIT = 5
