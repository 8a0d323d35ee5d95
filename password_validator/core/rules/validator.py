"""
Immutable password validator.

A PasswordValidator holds a frozen snapshot of predicates and accepts a
password only when every predicate holds. Instances are created through
PasswordValidator.builder() and are safe to share between threads.
"""

from typing import Any, Iterable

from password_validator.core.models import ValidationResult
from password_validator.core.predicates import Predicate, rule_name_of, rule_type_of
from password_validator.observability import metrics
from password_validator.observability.logger import get_logger

logger = get_logger(__name__)

# Guards the constructors of PasswordValidator and PasswordValidatorBuilder
_FACTORY_KEY = object()

ABSENT_RULE_NAME = "password_present"


class PasswordValidator:
    """
    Evaluates passwords against a fixed rule set.

    Predicates are evaluated in an unspecified order, so custom predicates
    must be pure and must not depend on one another.
    """

    __slots__ = ("_predicates",)

    def __init__(self, predicates: Iterable[Predicate], _key: Any = None):
        if _key is not _FACTORY_KEY:
            raise TypeError("PasswordValidator instances are created with PasswordValidator.builder().build()")
        object.__setattr__(self, "_predicates", tuple(predicates))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    # Immutable, so copies can share the instance
    def __copy__(self) -> "PasswordValidator":
        return self

    def __deepcopy__(self, memo: dict) -> "PasswordValidator":
        return self

    @staticmethod
    def builder():
        """Return a new, empty PasswordValidatorBuilder."""
        from password_validator.core.rules.builder import PasswordValidatorBuilder

        return PasswordValidatorBuilder(_key=_FACTORY_KEY)

    @property
    def predicates(self) -> tuple[Predicate, ...]:
        return self._predicates

    def validate(self, password: str | None) -> bool:
        """
        Check a password against all rules.

        Args:
            password: Candidate string; None is always invalid

        Returns:
            True only if the password is present and every rule holds.
            Returns on the first failing rule. Exceptions raised by a
            predicate propagate unchanged.
        """
        if password is None:
            metrics.record_validation("absent")
            return False

        for predicate in self._predicates:
            if not predicate(password):
                logger.debug(
                    "Password rejected",
                    extra={"rule_name": rule_name_of(predicate), "rule_type": rule_type_of(predicate)},
                )
                metrics.record_rule_failure(rule_type_of(predicate))
                metrics.record_validation("failed")
                return False

        metrics.record_validation("passed")
        return True

    def evaluate(self, password: str | None) -> ValidationResult:
        """
        Evaluate every rule and report which ones passed and failed.

        Args:
            password: Candidate string

        Returns:
            ValidationResult with per-rule outcomes. A missing password fails
            with the single rule "password_present".
        """
        if password is None:
            metrics.record_validation("absent")
            return ValidationResult(passed=False, failed_rules=[ABSENT_RULE_NAME])

        passed_rules = []
        failed_rules = []

        for predicate in self._predicates:
            if predicate(password):
                passed_rules.append(rule_name_of(predicate))
            else:
                failed_rules.append(rule_name_of(predicate))
                metrics.record_rule_failure(rule_type_of(predicate))

        passed = len(failed_rules) == 0
        metrics.record_validation("passed" if passed else "failed")

        return ValidationResult(
            passed=passed,
            passed_rules=passed_rules,
            failed_rules=failed_rules,
        )

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of configured rules.

        Returns:
            Dictionary with the rule count and counts per rule type
        """
        counts: dict[str, int] = {}
        for predicate in self._predicates:
            rule_type = rule_type_of(predicate)
            counts[rule_type] = counts.get(rule_type, 0) + 1
        return {
            "total_rules": len(self._predicates),
            "rules_by_type": counts,
        }

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, PasswordValidator):
            return NotImplemented
        return self._identity_set() == other._identity_set()

    def __hash__(self) -> int:
        return hash(self._identity_set())

    def _identity_set(self) -> frozenset[int]:
        return frozenset(id(p) for p in self._predicates)

    def __repr__(self) -> str:
        names = ", ".join(rule_name_of(p) for p in self._predicates)
        return f"PasswordValidator(predicates=[{names}])"
