"""Default values for settings and the create form."""

from typing import Final

# ============================================================================
# Control plane defaults
# ============================================================================

CONTROL_PLANE_URL_DEFAULT: Final = "http://localhost:8080"
SETTINGS_PATH_DEFAULT: Final = "~/.config/eksphemeral/settings.yaml"

# ============================================================================
# Action defaults
# ============================================================================

PROLONG_MINUTES_DEFAULT: Final = 30

# ============================================================================
# Create form defaults
# ============================================================================

NUM_WORKERS_DEFAULT: Final = 1
TIMEOUT_MINUTES_DEFAULT: Final = 10
KUBE_VERSIONS_DEFAULT: Final = ("1.14", "1.13", "1.12")

__all__ = [
    "CONTROL_PLANE_URL_DEFAULT",
    "KUBE_VERSIONS_DEFAULT",
    "NUM_WORKERS_DEFAULT",
    "PROLONG_MINUTES_DEFAULT",
    "SETTINGS_PATH_DEFAULT",
    "TIMEOUT_MINUTES_DEFAULT",
]
