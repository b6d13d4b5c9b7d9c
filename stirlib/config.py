"""
Library defaults.

Each value can be overridden through an environment variable read at import time.
"""

import os

# Calendar year projected when callers do not pass one
DEFAULT_PROJECTION_YEAR = int(os.getenv("STIRLIB_PROJECTION_YEAR", "2026"))

# Turn premiums at or below this magnitude (percentage points) are float noise
TURN_TOLERANCE_PCT = float(os.getenv("STIRLIB_TURN_TOLERANCE", "1e-5"))

# "FALLBACK" (static table) or "QUANTLIB"
DEFAULT_HOLIDAY_SOURCE = os.getenv("STIRLIB_HOLIDAY_SOURCE", "FALLBACK").upper()

# Futures price convention: price = PRICE_BASE - rate
PRICE_BASE = 100.0

BPS_PER_PERCENT = 100.0

MONTH_NAMES = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]
