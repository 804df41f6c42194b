"""Data models for batch results and interactive choices."""

from fsclip.models.action import BatchMode, BatchResult, ItemResult, ItemStatus
from fsclip.models.choices import (
    ApplyChoice,
    ConfirmChoice,
    DestinationChoice,
    OverwriteChoice,
)

__all__ = [
    "ApplyChoice",
    "BatchMode",
    "BatchResult",
    "ConfirmChoice",
    "DestinationChoice",
    "ItemResult",
    "ItemStatus",
    "OverwriteChoice",
]
