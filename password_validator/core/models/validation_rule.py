"""
ValidationRule model representing one declarative password rule.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

RuleType = Literal[
    "min_length",
    "max_length",
    "special_char",
    "uppercase",
    "lowercase",
    "digit",
    "no_repeated_chars",
]


class ValidationRule(BaseModel):
    """
    A configurable rule entry, as read from a rule configuration.

    Attributes:
        rule_type: Which builder rule to apply
        parameters: Rule-specific params (e.g., {"length": 8} or {"chars": "!?"})
        enabled: Whether rule is active
    """

    rule_type: RuleType
    parameters: dict[str, Any] = Field(default_factory=dict)
    enabled: bool = True

    @model_validator(mode="after")
    def check_parameters(self) -> "ValidationRule":
        """Length rules need an integer length; special_char takes optional chars."""
        if self.rule_type in ("min_length", "max_length"):
            length = self.parameters.get("length")
            if isinstance(length, bool) or not isinstance(length, int):
                raise ValueError(f"{self.rule_type} requires an integer 'length' parameter")
        elif self.rule_type == "special_char":
            chars = self.parameters.get("chars")
            if chars is not None and not isinstance(chars, str):
                raise ValueError("special_char 'chars' parameter must be a string")
        return self

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "rule_type": "min_length",
                "parameters": {"length": 8},
                "enabled": True,
            }
        }
    )
