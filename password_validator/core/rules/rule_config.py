"""
Rule configuration management.

Turns a declarative rule list, given as YAML text or an already-parsed
mapping, into a PasswordValidatorBuilder. Nothing is read from disk; the
caller supplies the content.
"""

from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from password_validator.core.models import ValidationRule
from password_validator.core.rules.builder import PasswordValidatorBuilder
from password_validator.core.rules.validator import PasswordValidator
from password_validator.observability.logger import get_logger, log_operation

logger = get_logger(__name__)


class RuleConfigError(ValueError):
    """Raised when a rule configuration is malformed."""

    def __init__(self, message: str, rule_index: int | None = None):
        self.rule_index = rule_index
        self.message = message
        prefix = f"rule #{rule_index}: " if rule_index is not None else ""
        super().__init__(f"{prefix}{message}")


class RuleConfigLoader:
    """
    Loads password rules from a configuration document.

    Expected format (YAML shown; the equivalent dict is accepted too):
    ```yaml
    rules:
      - type: min_length
        params:
          length: 8
      - type: max_length
        params:
          length: 24
      - type: special_char
        params:
          chars: "!@#$"
      - type: uppercase
      - type: lowercase
      - type: digit
      - type: no_repeated_chars
        enabled: false
    ```
    """

    def __init__(self, config: str | Mapping[str, Any]):
        """
        Initialize the rule config loader.

        Args:
            config: YAML text or a mapping with a 'rules' list
        """
        if isinstance(config, str):
            try:
                config = yaml.safe_load(config)
            except yaml.YAMLError as e:
                raise RuleConfigError(f"Invalid YAML: {e}")

        if not isinstance(config, Mapping) or "rules" not in config:
            raise RuleConfigError("Configuration must contain 'rules' section")

        if not isinstance(config["rules"], list):
            raise RuleConfigError("'rules' must be a list")

        self.config = config

    def load_rules(self) -> list[ValidationRule]:
        """
        Parse and validate every rule entry.

        Returns:
            Enabled rules, in configuration order

        Raises:
            RuleConfigError: If an entry is invalid
        """
        rules = []
        for idx, rule_def in enumerate(self.config["rules"]):
            rule = self._parse_rule(rule_def, idx)
            if rule.enabled:
                rules.append(rule)
        return rules

    def _parse_rule(self, rule_def: Any, idx: int) -> ValidationRule:
        """
        Parse a single rule definition.

        Args:
            rule_def: The rule definition from the configuration
            idx: Index of this rule (for error messages)

        Returns:
            Validated ValidationRule
        """
        if not isinstance(rule_def, Mapping):
            raise RuleConfigError("Rule definition must be a mapping", idx)

        if "type" not in rule_def:
            raise RuleConfigError("Rule is missing 'type'", idx)

        parameters = rule_def.get("params", rule_def.get("parameters")) or {}

        try:
            return ValidationRule(
                rule_type=rule_def["type"],
                parameters=parameters,
                enabled=rule_def.get("enabled", True),
            )
        except ValidationError as e:
            raise RuleConfigError(str(e), idx)

    def to_builder(self) -> PasswordValidatorBuilder:
        """
        Create a builder with every enabled rule applied.

        Returns:
            A fresh PasswordValidatorBuilder; callers may add more rules
        """
        rules = self.load_rules()
        with log_operation("Applying rule configuration", logger=logger, rule_count=len(rules)):
            builder = PasswordValidator.builder()
            for rule in rules:
                self._apply(builder, rule)
        return builder

    def build_validator(self) -> PasswordValidator:
        """Build a validator straight from the configuration."""
        return self.to_builder().build()

    @staticmethod
    def _apply(builder: PasswordValidatorBuilder, rule: ValidationRule) -> None:
        params = rule.parameters
        if rule.rule_type == "min_length":
            builder.with_min_length(params["length"])
        elif rule.rule_type == "max_length":
            builder.with_max_length(params["length"])
        elif rule.rule_type == "special_char":
            builder.with_special_char(params.get("chars"))
        elif rule.rule_type == "uppercase":
            builder.with_upper_case()
        elif rule.rule_type == "lowercase":
            builder.with_lower_case()
        elif rule.rule_type == "digit":
            builder.with_digit()
        elif rule.rule_type == "no_repeated_chars":
            builder.with_no_repeated_chars()
