"""Configuration module for trialpico."""

from trialpico.config.comparator_rules import ComparatorRuleConfig, load_comparator_rules
from trialpico.config.endpoint_rules import EndpointRuleConfig, load_endpoint_rules

__all__ = [
    "ComparatorRuleConfig",
    "EndpointRuleConfig",
    "load_comparator_rules",
    "load_endpoint_rules",
]
