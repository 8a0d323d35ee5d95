"""
Fluent builder for password validators.
"""

from typing import Any

from password_validator.core.predicates import (
    DEFAULT_SPECIAL_CHARACTERS,
    DefaultPredicates,
    MaxLengthPredicate,
    MinLengthPredicate,
    Predicate,
    SpecialCharPredicate,
    rule_name_of,
)
from password_validator.core.rules.validator import _FACTORY_KEY, PasswordValidator
from password_validator.observability.logger import get_logger

logger = get_logger(__name__)


class PasswordValidatorBuilder:
    """
    Accumulates predicates and produces immutable PasswordValidator instances.

    Obtain one with PasswordValidator.builder(). Every with_* method returns
    the builder, so calls chain:

        validator = (
            PasswordValidator.builder()
            .with_min_length(8)
            .with_digit()
            .build()
        )

    A predicate object is stored once no matter how often it is added;
    separately constructed predicates are always kept, even if they behave
    the same. Not safe for concurrent mutation.
    """

    def __init__(self, _key: Any = None):
        if _key is not _FACTORY_KEY:
            raise TypeError("Use PasswordValidator.builder() to create a builder")
        self.predicates: list[Predicate] = []

    def _add(self, predicate: Predicate) -> "PasswordValidatorBuilder":
        if not any(existing is predicate for existing in self.predicates):
            self.predicates.append(predicate)
        return self

    def with_predicate(self, predicate: Predicate | None) -> "PasswordValidatorBuilder":
        """Add a custom predicate. None is ignored."""
        if predicate is None:
            return self
        if not callable(predicate):
            raise TypeError(f"Predicate must be callable, got {type(predicate).__name__}")
        return self._add(predicate)

    def with_min_length(self, min_length: int) -> "PasswordValidatorBuilder":
        """Require at least min_length characters."""
        return self._add(MinLengthPredicate(min_length))

    def with_max_length(self, max_length: int) -> "PasswordValidatorBuilder":
        """Require at most max_length characters."""
        return self._add(MaxLengthPredicate(max_length))

    def with_special_char(self, special_chars: str | None = None) -> "PasswordValidatorBuilder":
        """
        Require at least one character from special_chars.

        Args:
            special_chars: Literal set of characters; defaults to
                DEFAULT_SPECIAL_CHARACTERS when None
        """
        chars = special_chars if special_chars is not None else DEFAULT_SPECIAL_CHARACTERS
        return self._add(SpecialCharPredicate(chars))

    def with_upper_case(self) -> "PasswordValidatorBuilder":
        return self._add(DefaultPredicates.HAS_UPPERCASE)

    def with_lower_case(self) -> "PasswordValidatorBuilder":
        return self._add(DefaultPredicates.HAS_LOWERCASE)

    def with_digit(self) -> "PasswordValidatorBuilder":
        return self._add(DefaultPredicates.HAS_DIGIT)

    def with_no_repeated_chars(self) -> "PasswordValidatorBuilder":
        """Reject any character occurring twice, adjacent or not."""
        return self._add(DefaultPredicates.NO_REPEATED_CHARS)

    @property
    def predicate_count(self) -> int:
        return len(self.predicates)

    def build(self) -> PasswordValidator:
        """Snapshot the current predicates into a new validator."""
        validator = PasswordValidator(list(self.predicates), _key=_FACTORY_KEY)
        logger.debug(
            "Built password validator",
            extra={
                "rule_count": len(self.predicates),
                "rules": [rule_name_of(p) for p in self.predicates],
            },
        )
        return validator


def builder() -> PasswordValidatorBuilder:
    """Shortcut for PasswordValidator.builder()."""
    return PasswordValidator.builder()
