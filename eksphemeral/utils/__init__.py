"""Utility helpers."""

from eksphemeral.utils.logging_config import configure_logging
from eksphemeral.utils.time_format import format_timestamp

__all__ = ["configure_logging", "format_timestamp"]
