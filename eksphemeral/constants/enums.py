"""All enum definitions for the TUI."""

from enum import Enum

# =============================================================================
# Action Enums
# =============================================================================


class ActionKind(Enum):
    """User-initiated request kinds routed through the action dispatcher."""

    CREATE = "create"
    PROLONG = "prolong"
    DETAILS = "details"
    CONFIG = "config"

    @property
    def is_mutating(self) -> bool:
        """Whether the action changes control plane state."""
        return self in (ActionKind.CREATE, ActionKind.PROLONG)

