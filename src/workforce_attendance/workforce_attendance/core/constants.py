"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EARTH_RADIUS_METERS = 6_371_000

SHIFT_GRACE_MINUTES = 30
LATE_AFTER_MINUTES = 120

DEFAULT_FENCE_RADIUS_METERS = 50
GEOLOCATION_TIMEOUT_SECONDS = 10.0

DEFAULT_HISTORY_LIMIT = 30
DEFAULT_WORK_DAYS = (1, 2, 3, 4, 5)
