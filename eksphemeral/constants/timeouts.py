"""Timeout and interval constants.

All refresh cadences and request timeouts, in seconds.
"""

from typing import Final

# ============================================================================
# Polling cadences
# ============================================================================

# Full inventory re-list (5 minutes)
INVENTORY_REFRESH_INTERVAL: Final = 300.0

# Label resolution for newly listed clusters (every second)
DETAIL_REFRESH_INTERVAL: Final = 1.0

# ============================================================================
# Control plane request timeouts
# ============================================================================

CONTROL_PLANE_REQUEST_TIMEOUT: Final = 10.0
CONTROL_PLANE_CONNECT_TIMEOUT: Final = 5.0

__all__ = [
    "CONTROL_PLANE_CONNECT_TIMEOUT",
    "CONTROL_PLANE_REQUEST_TIMEOUT",
    "DETAIL_REFRESH_INTERVAL",
    "INVENTORY_REFRESH_INTERVAL",
]
