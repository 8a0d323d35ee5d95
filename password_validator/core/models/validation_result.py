"""
ValidationResult model representing the outcome of a full password evaluation (ephemeral).
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ValidationResult(BaseModel):
    """
    Outcome of evaluating a password against every rule.

    Attributes:
        passed: Overall validation status
        passed_rules: Rules that succeeded
        failed_rules: Rules that failed
    """

    passed: bool
    passed_rules: List[str] = Field(default_factory=list)
    failed_rules: List[str] = Field(default_factory=list)

    @field_validator('failed_rules')
    @classmethod
    def check_passed_consistency(cls, v, info):
        """Validate that passed=True implies failed_rules is empty."""
        if info.data.get('passed') and len(v) > 0:
            raise ValueError("passed=True but failed_rules is not empty")
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "passed": False,
                "passed_rules": [
                    "min_length_8",
                    "has_digit",
                ],
                "failed_rules": [
                    "has_uppercase",
                ],
            }
        }
    )
