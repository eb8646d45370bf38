"""Endpoint rule configuration loader.

Loads the ordered endpoint classification rules from YAML so that keyword
vocabularies and their precedence can be reviewed without touching code.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from trialpico.config.rules import KeywordRule, compile_rules, first_match
from trialpico.models.categories import EndpointType


class EndpointRuleConfig:
    """Ordered endpoint rules with an Other default."""

    def __init__(self, config: dict[str, Any]):
        self._config = config
        self._rules = compile_rules(config.get("rules", []), EndpointType)

    @property
    def rules(self) -> tuple[KeywordRule, ...]:
        return self._rules

    def categories(self) -> list[EndpointType]:
        """Categories reachable through a rule, in precedence order (duplicates removed)."""
        seen: list[EndpointType] = []
        for rule in self._rules:
            if rule.category not in seen:
                seen.append(rule.category)
        return seen

    def classify(self, measure: str) -> EndpointType:
        """Classify lower-cased measure text, first match wins."""
        category = first_match(self._rules, measure)
        return category if category is not None else EndpointType.OTHER


@lru_cache(maxsize=1)
def load_endpoint_rules() -> EndpointRuleConfig:
    """Load endpoint rule configuration from YAML file.

    Returns:
        EndpointRuleConfig instance with loaded configuration.
    """
    config_path = Path(__file__).parent / "endpoint_rules.yaml"

    if not config_path.exists():
        # Return empty config if file doesn't exist
        return EndpointRuleConfig({})

    with open(config_path) as f:
        config = yaml.safe_load(f)

    return EndpointRuleConfig(config or {})
