"""Feedback widgets: dialogs."""

from eksphemeral.widgets.feedback.custom_dialog import (
    CREATE_FORM_FIELDS,
    CreateClusterDialog,
)

__all__ = [
    "CREATE_FORM_FIELDS",
    "CreateClusterDialog",
]
