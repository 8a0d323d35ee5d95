"""
Built-in predicates shared by every validator.

These are module-level singletons, so adding one twice to a builder
keeps a single entry.
"""

from .base_predicate import RulePredicate
from .pattern_predicate import PatternPredicate

DEFAULT_SPECIAL_CHARACTERS = "!@#$%^&*()-+"


def _has_no_repeated_chars(password: str) -> bool:
    # Any two positions, not just adjacent ones
    return len(set(password)) == len(password)


class DefaultPredicates:
    """Namespace for the four default rules."""

    HAS_UPPERCASE = PatternPredicate("has_uppercase", "uppercase", r"[A-Z]")
    HAS_LOWERCASE = PatternPredicate("has_lowercase", "lowercase", r"[a-z]")
    HAS_DIGIT = PatternPredicate("has_digit", "digit", r"[0-9]")
    NO_REPEATED_CHARS = RulePredicate("no_repeated_chars", "no_repeated_chars", _has_no_repeated_chars)


HAS_UPPERCASE = DefaultPredicates.HAS_UPPERCASE
HAS_LOWERCASE = DefaultPredicates.HAS_LOWERCASE
HAS_DIGIT = DefaultPredicates.HAS_DIGIT
NO_REPEATED_CHARS = DefaultPredicates.NO_REPEATED_CHARS
