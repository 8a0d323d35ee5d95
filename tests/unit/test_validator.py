"""
Unit tests for PasswordValidator and its builder.
"""

import copy
from concurrent.futures import ThreadPoolExecutor

import pytest
from hypothesis import given
from hypothesis import strategies as st

from password_validator import (
    HAS_DIGIT,
    PasswordValidator,
    PasswordValidatorBuilder,
    builder,
)


class TestStrictValidator:
    """The canonical configuration: 8-24 chars, special, digit, upper, lower, no repeats"""

    @pytest.mark.parametrize("password", [
        "",                            # empty
        "$Ab1",                        # length < 8
        "$Abcdee1",                    # repeated char
        "$abcdef1",                    # no uppercase
        "$ABCDEF1",                    # no lowercase
        "$Qwertyuiopasdfghjklz1234",   # length > 24
    ])
    def test_invalid_passwords(self, strict_validator, password):
        assert strict_validator.validate(password) is False

    @pytest.mark.parametrize("password", [
        "$Abcdef1",
        "$Qwertyuiopasdfghjklz123",
    ])
    def test_valid_passwords(self, strict_validator, password):
        assert strict_validator.validate(password) is True

    def test_missing_special_char(self, strict_validator):
        assert strict_validator.validate("Abcdefg1") is False

    def test_missing_digit(self, strict_validator):
        assert strict_validator.validate("$Abcdefg") is False

    def test_none_is_invalid(self, strict_validator):
        assert strict_validator.validate(None) is False

    @given(st.text(), st.characters(), st.text(), st.text())
    def test_property_repeated_characters_rejected(self, head, char, middle, tail):
        """Property test: any string with a repeated character fails"""
        validator = PasswordValidator.builder().with_no_repeated_chars().build()
        assert validator.validate(head + char + middle + char + tail) is False


class TestValidate:
    """Tests for PasswordValidator.validate"""

    def test_empty_rule_set_accepts_any_string(self, empty_validator):
        assert empty_validator.validate("") is True
        assert empty_validator.validate("anything at all") is True

    def test_empty_rule_set_rejects_none(self, empty_validator):
        assert empty_validator.validate(None) is False

    @given(st.text())
    def test_property_empty_rule_set_is_vacuously_true(self, password):
        """Property test: no rules means every present string passes"""
        assert PasswordValidator.builder().build().validate(password) is True

    def test_none_does_not_evaluate_predicates(self):
        calls = []

        def record(password):
            calls.append(password)
            return True

        validator = PasswordValidator.builder().with_predicate(record).build()
        assert validator.validate(None) is False
        assert calls == []

    def test_short_circuits_on_first_failure(self):
        calls = []

        def fail(password):
            calls.append("fail")
            return False

        def count(password):
            calls.append("count")
            return True

        validator = PasswordValidator.builder().with_predicate(fail).with_predicate(count).build()
        assert validator.validate("x") is False
        assert calls == ["fail"]

    def test_predicate_exception_propagates(self):
        def broken(password):
            raise RuntimeError("boom")

        validator = PasswordValidator.builder().with_predicate(broken).build()
        with pytest.raises(RuntimeError, match="boom"):
            validator.validate("x")

    def test_custom_predicate(self):
        validator = PasswordValidator.builder().with_predicate(lambda s: "L" in s).build()
        assert validator.validate("Linux") is True
        assert validator.validate("linux") is False

    def test_concurrent_use(self, strict_validator):
        passwords = ["$Abcdef1", "$Abcdee1"] * 200
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(strict_validator.validate, passwords))
        assert results == [True, False] * 200


class TestEvaluate:
    """Tests for PasswordValidator.evaluate"""

    def test_reports_every_rule(self, strict_validator):
        result = strict_validator.evaluate("$abcdee")

        assert result.passed is False
        assert set(result.failed_rules) == {"has_uppercase", "has_digit", "no_repeated_chars", "min_length_8"}
        assert set(result.passed_rules) == {"max_length_24", "special_char", "has_lowercase"}

    def test_passing_password(self, strict_validator):
        result = strict_validator.evaluate("$Abcdef1")

        assert result.passed is True
        assert result.failed_rules == []
        assert len(result.passed_rules) == 7

    def test_predicate_exception_propagates(self):
        def broken(password):
            raise RuntimeError("boom")

        validator = PasswordValidator.builder().with_digit().with_predicate(broken).build()
        with pytest.raises(RuntimeError, match="boom"):
            validator.evaluate("x1")

    def test_none(self, strict_validator):
        result = strict_validator.evaluate(None)

        assert result.passed is False
        assert result.failed_rules == ["password_present"]
        assert result.passed_rules == []

    def test_evaluate_agrees_with_validate(self, strict_validator):
        for password in ["", "$Ab1", "$Abcdef1", "$ABCDEF1"]:
            assert strict_validator.evaluate(password).passed == strict_validator.validate(password)

    def test_rule_summary(self, strict_validator):
        summary = strict_validator.get_rule_summary()

        assert summary["total_rules"] == 7
        assert summary["rules_by_type"]["min_length"] == 1
        assert summary["rules_by_type"]["no_repeated_chars"] == 1


class TestBuilder:
    """Tests for PasswordValidatorBuilder"""

    def test_direct_instantiation_is_rejected(self):
        with pytest.raises(TypeError):
            PasswordValidatorBuilder()

    def test_direct_validator_instantiation_is_rejected(self):
        with pytest.raises(TypeError):
            PasswordValidator([])

    def test_module_level_factory(self):
        assert isinstance(builder(), PasswordValidatorBuilder)

    def test_starts_empty(self):
        assert PasswordValidator.builder().predicate_count == 0

    def test_methods_chain(self):
        b = PasswordValidator.builder()
        assert b.with_min_length(1) is b
        assert b.with_max_length(10) is b
        assert b.with_special_char() is b
        assert b.with_upper_case() is b
        assert b.with_lower_case() is b
        assert b.with_digit() is b
        assert b.with_no_repeated_chars() is b
        assert b.with_predicate(None) is b
        assert b.with_predicate(lambda s: True) is b

    def test_none_predicate_is_ignored(self):
        b = PasswordValidator.builder().with_predicate(None)
        assert b.predicate_count == 0

    @pytest.mark.parametrize("length", [None, "8", 8.5])
    def test_non_int_lengths_raise_at_configuration(self, length):
        with pytest.raises(TypeError):
            PasswordValidator.builder().with_min_length(length)
        with pytest.raises(TypeError):
            PasswordValidator.builder().with_max_length(length)

    def test_non_string_special_chars_raise_at_configuration(self):
        with pytest.raises(TypeError):
            PasswordValidator.builder().with_special_char(42)

    def test_non_callable_predicate_raises(self):
        with pytest.raises(TypeError, match="callable"):
            PasswordValidator.builder().with_predicate("not callable")

    def test_same_predicate_stored_once(self):
        b = PasswordValidator.builder().with_digit().with_digit().with_predicate(HAS_DIGIT)
        assert b.predicate_count == 1

    def test_equivalent_predicates_are_not_deduplicated(self):
        b = PasswordValidator.builder().with_min_length(8).with_min_length(8)
        assert b.predicate_count == 2

    def test_special_char_defaults(self):
        validator = PasswordValidator.builder().with_special_char().build()
        assert validator.validate("a+") is True
        assert validator.validate("a?") is False

    def test_custom_special_chars(self):
        validator = PasswordValidator.builder().with_special_char("?]").build()
        assert validator.validate("a]") is True
        assert validator.validate("a!") is False

    def test_negative_min_length_is_always_true(self):
        validator = PasswordValidator.builder().with_min_length(-5).build()
        assert validator.validate("") is True

    def test_build_snapshots_predicates(self):
        b = PasswordValidator.builder().with_digit()
        validator = b.build()
        b.with_upper_case()

        assert len(validator.predicates) == 1
        assert validator.validate("abc1") is True
        assert b.build().validate("abc1") is False


class TestValidatorValueSemantics:
    """Tests for immutability, equality and repr"""

    def test_predicates_is_a_tuple(self, strict_validator):
        assert isinstance(strict_validator.predicates, tuple)

    def test_cannot_set_attributes(self, strict_validator):
        with pytest.raises(AttributeError):
            strict_validator._predicates = ()

    def test_equal_when_same_predicate_objects(self):
        first = PasswordValidator.builder().with_digit().with_upper_case().build()
        second = PasswordValidator.builder().with_upper_case().with_digit().build()

        assert first == second
        assert hash(first) == hash(second)

    def test_not_equal_with_distinct_predicate_objects(self):
        first = PasswordValidator.builder().with_min_length(8).build()
        second = PasswordValidator.builder().with_min_length(8).build()

        assert first != second

    def test_rules_cannot_be_changed_through_predicates(self):
        validator = PasswordValidator.builder().with_min_length(3).build()

        with pytest.raises(AttributeError):
            validator.predicates[0].length = 10

        assert validator.validate("abcd") is True

    def test_shared_default_rules_cannot_be_changed(self):
        validator = PasswordValidator.builder().with_digit().build()
        other = PasswordValidator.builder().with_digit().build()

        with pytest.raises(AttributeError):
            validator.predicates[0].pattern = None

        assert other.validate("abc1") is True
        assert other.validate("abc") is False

    def test_copy_returns_same_instance(self, strict_validator):
        assert copy.copy(strict_validator) is strict_validator

    def test_deepcopy_returns_same_instance(self, strict_validator):
        assert copy.deepcopy(strict_validator) is strict_validator

    def test_deepcopy_inside_container(self):
        validator = PasswordValidator.builder().with_digit().build()
        config = {"validator": validator, "name": "signup"}

        copied = copy.deepcopy(config)

        assert copied is not config
        assert copied["validator"] is validator
        assert copied["validator"].validate("abc1") is True

    def test_repr_lists_rule_names(self):
        validator = PasswordValidator.builder().with_digit().with_min_length(3).build()
        assert repr(validator) == "PasswordValidator(predicates=[has_digit, min_length_3])"
