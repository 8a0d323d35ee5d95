"""
PatternPredicate - requires a regular expression to occur somewhere in the password.
"""

import re
from re import Pattern

from .base_predicate import RulePredicate


def _never(password: str) -> bool:
    return False


class PatternPredicate(RulePredicate):
    """
    Passes when the pattern is found anywhere in the password.

    Parameters:
    - pattern: Regular expression pattern (string or compiled Pattern)
    - flags: Optional regex flags (e.g., re.IGNORECASE)
    """

    def __init__(self, rule_name: str, rule_type: str, pattern: str | Pattern, flags: int = 0):
        # Compile pattern
        try:
            if isinstance(pattern, str):
                compiled = re.compile(pattern, flags)
            elif isinstance(pattern, Pattern):
                compiled = pattern
            else:
                raise ValueError(f"Pattern must be string or compiled Pattern, got {type(pattern)}")
        except re.error as e:
            raise ValueError(f"Invalid regex pattern: {e}")

        self._pattern = compiled
        super().__init__(
            rule_name,
            rule_type,
            lambda password, p=compiled: p.search(password) is not None,
            {"pattern": compiled.pattern},
        )

    @property
    def pattern(self) -> Pattern:
        return self._pattern


class SpecialCharPredicate(RulePredicate):
    """
    Requires at least one character from a literal character set.

    Every character in `chars` is escaped before being placed in the
    character class, so "]", "\\", "^" and "-" are matched literally.
    An empty set matches nothing.
    """

    def __init__(self, chars: str):
        if not isinstance(chars, str):
            raise TypeError(f"special characters must be a str, got {type(chars).__name__}")

        self._chars = chars
        if chars:
            self._pattern: Pattern | None = re.compile("[" + re.escape(chars) + "]")
            check = lambda password, p=self._pattern: p.search(password) is not None  # noqa: E731
        else:
            self._pattern = None
            check = _never

        super().__init__("special_char", "special_char", check, {"chars": chars})

    @property
    def chars(self) -> str:
        return self._chars

    @property
    def pattern(self) -> Pattern | None:
        return self._pattern
