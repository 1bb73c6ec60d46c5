"""Shared type aliases for the core and domain layers."""
from typing import Tuple

EntityTypeId = str
Position = Tuple[float, float, float]

__all__ = ["EntityTypeId", "Position"]
