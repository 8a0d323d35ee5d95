"""
Length predicates - bound the number of characters in a password.
"""

from .base_predicate import RulePredicate


def _require_int(length: int, rule_type: str) -> None:
    # bool is an int subclass but never a meaningful length
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"{rule_type} length must be an int, got {type(length).__name__}")


class MinLengthPredicate(RulePredicate):
    """
    Requires len(password) >= length.

    The bound is not checked: a negative length accepts everything.
    """

    def __init__(self, length: int):
        _require_int(length, "min_length")
        self._length = length
        super().__init__(
            f"min_length_{length}",
            "min_length",
            lambda password, n=length: len(password) >= n,
            {"length": length},
        )

    @property
    def length(self) -> int:
        return self._length


class MaxLengthPredicate(RulePredicate):
    """
    Requires len(password) <= length.

    The bound is not checked: a negative length rejects everything.
    """

    def __init__(self, length: int):
        _require_int(length, "max_length")
        self._length = length
        super().__init__(
            f"max_length_{length}",
            "max_length",
            lambda password, n=length: len(password) <= n,
            {"length": length},
        )

    @property
    def length(self) -> int:
        return self._length
