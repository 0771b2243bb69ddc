"""Custom static text widget.

CSS Classes: widget-custom-static
"""

from textual.widgets import Static


class CustomStatic(Static):
    """Static text with the application's default widget class."""

    DEFAULT_CLASSES = "widget-custom-static"
