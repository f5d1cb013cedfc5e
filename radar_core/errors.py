"""Errors raised at the edges of the engine (catalog loading, answer intake).

The scoring pass itself never raises for data conditions; it resolves them
locally. These are for the layers that feed it.
"""
from __future__ import annotations


class RadarError(Exception):
    """Base class for leadership-radar errors."""


class CatalogError(RadarError):
    """A catalog file is missing, unreadable or has malformed entries."""


class AnswerError(RadarError):
    """An answer value is outside the 1-5 scale or not an integer."""

    def __init__(self, item_id: object, value: object) -> None:
        self.item_id = item_id
        self.value = value
        super().__init__(f"answer for {item_id!r} must be an integer in 1..5 or null, got {value!r}")
