"""
Rules adapter for the OG tags component.

Exposes the og_tags section of the loaded rules through OGRulesPort.
"""

from __future__ import annotations

from src.rules.models import OGTagRules, Rules


class RulesOGAdapter:
    """OGRulesPort backed by loaded Rules."""

    def __init__(self, rules: Rules | OGTagRules) -> None:
        self._rules = rules.og_tags if isinstance(rules, Rules) else rules

    def get_max_input_length(self) -> int:
        return self._rules.max_input_length

    def get_title_limits(self) -> tuple[int, int, int]:
        title = self._rules.title
        return title.min_length, title.max_length, title.truncate_at

    def get_description_limits(self) -> tuple[int, int, int]:
        desc = self._rules.description
        return desc.min_length, desc.max_length, desc.truncate_at

    def get_twitter_card_types(self) -> tuple[str, ...]:
        return tuple(self._rules.twitter_card_types)
