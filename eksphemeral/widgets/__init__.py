"""Widgets module for the EKSphemeral TUI.

- display: Display widgets (CustomStatic)
- feedback: Dialogs (CreateClusterDialog)
"""

from eksphemeral.widgets.display import CustomStatic
from eksphemeral.widgets.feedback import CreateClusterDialog

__all__ = [
    "CreateClusterDialog",
    "CustomStatic",
]
