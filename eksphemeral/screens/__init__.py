"""EKSphemeral TUI screens.

Domain Structure:
    - cluster/  - Cluster inventory, detail panels and actions
    - mixins/   - Reusable screen mixins
"""

from __future__ import annotations

from eksphemeral.screens.base_screen import BaseScreen
from eksphemeral.screens.cluster import ClusterScreen

__all__ = [
    "BaseScreen",
    "ClusterScreen",
]
