"""Formatting utilities for terminal output."""

from .formatting import (
    color_for_size,
    format_object_line,
    format_progress,
    format_size,
    full_object_path,
    interpolate_color,
)

__all__ = [
    "color_for_size",
    "format_object_line",
    "format_progress",
    "format_size",
    "full_object_path",
    "interpolate_color",
]
