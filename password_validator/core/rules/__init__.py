"""
Password validator, its builder and rule configuration.
"""

from .builder import PasswordValidatorBuilder, builder
from .rule_config import RuleConfigError, RuleConfigLoader
from .validator import PasswordValidator

__all__ = [
    "PasswordValidator",
    "PasswordValidatorBuilder",
    "RuleConfigLoader",
    "RuleConfigError",
    "builder",
]
