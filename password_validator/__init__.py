"""
Composable password validation.

Assemble rules with a builder, then check candidate strings against all of them:

    from password_validator import PasswordValidator

    validator = (
        PasswordValidator.builder()
        .with_min_length(8)
        .with_max_length(24)
        .with_special_char()
        .with_digit()
        .with_upper_case()
        .with_lower_case()
        .with_no_repeated_chars()
        .build()
    )
    validator.validate("$Abcdef1")  # True
"""

from password_validator.core.models import ValidationResult, ValidationRule
from password_validator.core.predicates import (
    DEFAULT_SPECIAL_CHARACTERS,
    HAS_DIGIT,
    HAS_LOWERCASE,
    HAS_UPPERCASE,
    NO_REPEATED_CHARS,
    DefaultPredicates,
    Predicate,
    RulePredicate,
)
from password_validator.core.rules import (
    PasswordValidator,
    PasswordValidatorBuilder,
    RuleConfigError,
    RuleConfigLoader,
    builder,
)

__version__ = "0.1.0"

__all__ = [
    "builder",
    "PasswordValidator",
    "PasswordValidatorBuilder",
    "DEFAULT_SPECIAL_CHARACTERS",
    "DefaultPredicates",
    "HAS_UPPERCASE",
    "HAS_LOWERCASE",
    "HAS_DIGIT",
    "NO_REPEATED_CHARS",
    "Predicate",
    "RulePredicate",
    "RuleConfigLoader",
    "RuleConfigError",
    "ValidationRule",
    "ValidationResult",
]
