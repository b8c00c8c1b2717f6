"""Data models for listed objects, colors and deletion state."""

from .color import DARK_RED, RESET, WHITE, Color
from .object_record import DeletionBatch, DeletionTotals, ObjectRecord

__all__ = [
    "Color",
    "WHITE",
    "DARK_RED",
    "RESET",
    "ObjectRecord",
    "DeletionBatch",
    "DeletionTotals",
]
