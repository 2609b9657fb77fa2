"""
OG tags component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class OGRulesPort(Protocol):
    """Port for OG tag validation rules configuration."""

    def get_max_input_length(self) -> int:
        """Get the parser input cap in characters (default 50000)."""
        ...

    def get_title_limits(self) -> tuple[int, int, int]:
        """Get title (min_length, max_length, truncate_at), default (30, 60, 55)."""
        ...

    def get_description_limits(self) -> tuple[int, int, int]:
        """Get description (min_length, max_length, truncate_at), default (50, 200, 155)."""
        ...

    def get_twitter_card_types(self) -> tuple[str, ...]:
        """Get accepted twitter:card values."""
        ...
