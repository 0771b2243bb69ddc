"""Constants module for the EKSphemeral TUI.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Titles, link templates and banner texts
- timeouts.py: Polling cadences and request timeouts (seconds)
- defaults.py: Default values for settings and the create form
"""

from eksphemeral.constants.defaults import (
    CONTROL_PLANE_URL_DEFAULT,
    KUBE_VERSIONS_DEFAULT,
    NUM_WORKERS_DEFAULT,
    PROLONG_MINUTES_DEFAULT,
    SETTINGS_PATH_DEFAULT,
    TIMEOUT_MINUTES_DEFAULT,
)
from eksphemeral.constants.enums import ActionKind
from eksphemeral.constants.timeouts import (
    CONTROL_PLANE_CONNECT_TIMEOUT,
    CONTROL_PLANE_REQUEST_TIMEOUT,
    DETAIL_REFRESH_INTERVAL,
    INVENTORY_REFRESH_INTERVAL,
)
from eksphemeral.constants.values import (
    APP_TITLE,
    CONSOLE_LINK_TEMPLATE,
    CONSOLE_LINK_TOOLTIP,
    PROVISIONING_MESSAGE,
)

__all__ = [
    "APP_TITLE",
    "CONSOLE_LINK_TEMPLATE",
    "CONSOLE_LINK_TOOLTIP",
    "CONTROL_PLANE_CONNECT_TIMEOUT",
    "CONTROL_PLANE_REQUEST_TIMEOUT",
    "CONTROL_PLANE_URL_DEFAULT",
    "DETAIL_REFRESH_INTERVAL",
    "INVENTORY_REFRESH_INTERVAL",
    "KUBE_VERSIONS_DEFAULT",
    "NUM_WORKERS_DEFAULT",
    "PROLONG_MINUTES_DEFAULT",
    "PROVISIONING_MESSAGE",
    "SETTINGS_PATH_DEFAULT",
    "TIMEOUT_MINUTES_DEFAULT",
    "ActionKind",
]
