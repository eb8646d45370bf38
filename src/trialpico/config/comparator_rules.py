"""Comparator rule configuration loader.

Loads control-type hint rules, the label/description fallback rules and the
add-on design vocabulary from YAML.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from trialpico.config.rules import compile_rules, first_match
from trialpico.models.categories import ComparatorType


class ComparatorRuleConfig:
    """Ordered comparator rules and add-on phrases."""

    def __init__(self, config: dict[str, Any]):
        self._config = config
        self._hint_rules = compile_rules(config.get("hint_rules", []), ComparatorType)
        self._text_rules = compile_rules(config.get("text_rules", []), ComparatorType)
        self._add_on_phrases = tuple(p.lower() for p in config.get("add_on_phrases", []))

    @property
    def add_on_phrases(self) -> tuple[str, ...]:
        return self._add_on_phrases

    def match_hint(self, hint: str) -> ComparatorType | None:
        """Match a lower-cased control-type hint against the full rule list."""
        return first_match(self._hint_rules, hint)

    def match_text(self, text: str) -> ComparatorType | None:
        """Match lower-cased label/description text against the fallback rules."""
        return first_match(self._text_rules, text)

    def has_add_on_phrase(self, text: str) -> bool:
        """Check if lower-cased text contains any add-on phrase."""
        return any(phrase in text for phrase in self._add_on_phrases)


@lru_cache(maxsize=1)
def load_comparator_rules() -> ComparatorRuleConfig:
    """Load comparator rule configuration from YAML file.

    Returns:
        ComparatorRuleConfig instance with loaded configuration.
    """
    config_path = Path(__file__).parent / "comparator_rules.yaml"

    if not config_path.exists():
        # Return empty config if file doesn't exist
        return ComparatorRuleConfig({})

    with open(config_path) as f:
        config = yaml.safe_load(f)

    return ComparatorRuleConfig(config or {})
