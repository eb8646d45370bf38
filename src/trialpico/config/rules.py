"""Ordered keyword rules shared by the rule-table loaders.

A rule matches lower-cased text when any phrase is a substring or any word
appears on word boundaries, unless one of its exclusion phrases is present.
Rule lists are evaluated top-down and the first match wins.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Iterable, TypeVar

C = TypeVar("C")


@dataclass(frozen=True)
class KeywordRule:
    """A single (predicate, category) pair."""

    category: Any
    phrases: tuple[str, ...] = ()
    words: tuple[re.Pattern[str], ...] = ()
    exclude: tuple[str, ...] = ()

    def matches(self, text: str) -> bool:
        """Check if lower-cased text satisfies this rule."""
        if any(phrase in text for phrase in self.exclude):
            return False
        if any(phrase in text for phrase in self.phrases):
            return True
        return any(pattern.search(text) for pattern in self.words)


def compile_word(word: str) -> re.Pattern[str]:
    """Compile an abbreviation into a word-boundary pattern."""
    return re.compile(rf"\b{re.escape(word.lower())}\b")


def compile_rules(
    raw_rules: Iterable[dict[str, Any]],
    to_category: Callable[[str], C],
) -> tuple[KeywordRule, ...]:
    """Build immutable rules from YAML entries, preserving their order.

    Args:
        raw_rules: Entries with 'category' and optional 'phrases', 'words', 'exclude'
        to_category: Converts the YAML category string (e.g., an Enum constructor)

    Returns:
        Tuple of KeywordRule in evaluation order
    """
    rules = []
    for entry in raw_rules or []:
        rules.append(
            KeywordRule(
                category=to_category(entry["category"]),
                phrases=tuple(p.lower() for p in entry.get("phrases", [])),
                words=tuple(compile_word(w) for w in entry.get("words", [])),
                exclude=tuple(p.lower() for p in entry.get("exclude", [])),
            )
        )
    return tuple(rules)


def first_match(rules: Iterable[KeywordRule], text: str) -> Any | None:
    """Return the category of the first rule matching text, or None."""
    for rule in rules:
        if rule.matches(text):
            return rule.category
    return None
