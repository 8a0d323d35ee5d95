"""
Pytest configuration and fixtures for password-validator tests
"""
import pytest

from password_validator import DEFAULT_SPECIAL_CHARACTERS, PasswordValidator


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )


# =======================
# VALIDATOR FIXTURES
# =======================

@pytest.fixture(scope="session")
def strict_validator() -> PasswordValidator:
    """
    Validator with every built-in rule: 8-24 characters, a default special
    character, a digit, upper and lower case, no repeated characters
    """
    return (
        PasswordValidator.builder()
        .with_min_length(8)
        .with_max_length(24)
        .with_special_char(DEFAULT_SPECIAL_CHARACTERS)
        .with_digit()
        .with_upper_case()
        .with_lower_case()
        .with_no_repeated_chars()
        .build()
    )


@pytest.fixture(scope="function")
def empty_validator() -> PasswordValidator:
    """Validator with no rules"""
    return PasswordValidator.builder().build()
