"""
Base predicate type for all password rules.

A predicate is any callable taking the candidate string and returning a bool.
Rules created by this package are RulePredicate instances, which carry a
name and type so failures can be reported and counted.
"""

from typing import Any, Callable

Predicate = Callable[[str], bool]


class RulePredicate:
    """
    A named, pure check applied to a candidate password.

    Instances compare and hash by identity: two predicates built from the
    same parameters are distinct rules.
    """

    def __init__(self, rule_name: str, rule_type: str, check: Predicate, parameters: dict[str, Any] | None = None):
        """
        Initialize predicate.

        Args:
            rule_name: Human-readable name ("min_length_8")
            rule_type: Rule type identifier (min_length, uppercase, ...)
            check: Callable performing the actual test
            parameters: Rule-specific parameters (e.g., {"length": 8})
        """
        self.rule_name = rule_name
        self.rule_type = rule_type
        self.parameters = parameters or {}
        self._check = check

    def __call__(self, password: str) -> bool:
        return bool(self._check(password))

    def test(self, password: str) -> bool:
        """Alias of calling the predicate."""
        return self(password)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.rule_name}, params={self.parameters})"


def rule_name_of(predicate: Predicate) -> str:
    """Best-effort name for any predicate, used in results and logs."""
    name = getattr(predicate, "rule_name", None)
    if name:
        return name
    name = getattr(predicate, "__name__", None)
    if name and name != "<lambda>":
        return name
    return f"custom_{id(predicate):x}"


def rule_type_of(predicate: Predicate) -> str:
    """Rule type for any predicate; plain callables are "custom"."""
    return getattr(predicate, "rule_type", "custom")
