"""
Password rule implementations.

Provides predicates for length bounds, character classes, special
characters and repeated characters.
"""

from .base_predicate import Predicate, RulePredicate, rule_name_of, rule_type_of
from .default_predicates import (
    DEFAULT_SPECIAL_CHARACTERS,
    HAS_DIGIT,
    HAS_LOWERCASE,
    HAS_UPPERCASE,
    NO_REPEATED_CHARS,
    DefaultPredicates,
)
from .length_predicate import MaxLengthPredicate, MinLengthPredicate
from .pattern_predicate import PatternPredicate, SpecialCharPredicate

__all__ = [
    "Predicate",
    "RulePredicate",
    "PatternPredicate",
    "SpecialCharPredicate",
    "MinLengthPredicate",
    "MaxLengthPredicate",
    "DefaultPredicates",
    "DEFAULT_SPECIAL_CHARACTERS",
    "HAS_UPPERCASE",
    "HAS_LOWERCASE",
    "HAS_DIGIT",
    "NO_REPEATED_CHARS",
    "rule_name_of",
    "rule_type_of",
]
