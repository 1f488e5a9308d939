"""Internal constants shared across the library."""

BASE_URL = "https://app.pavlok.com"
API_PREFIX = "/api/v1"

# ------------------------------------------------------------------
# Intensity limits
# ------------------------------------------------------------------

# The API carries intensity as an unsigned byte.
INTENSITY_MAX = 255

# Beep and LED patterns are numbered 1-4.
PATTERN_MIN = 1
PATTERN_MAX = 4

OUT_OF_BOUNDS_MESSAGE = "strength is out of bounds"
UNKNOWN_ERROR_MESSAGE = "Unknown error"
