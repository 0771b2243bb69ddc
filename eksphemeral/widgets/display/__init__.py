"""Display widgets."""

from eksphemeral.widgets.display.custom_static import CustomStatic

__all__ = ["CustomStatic"]
