"""Tests for rule factories, the rule registry and the validation service."""

import pytest

from smartfield.validation import (
    FieldValidationConfig,
    RuleRegistry,
    UnknownRuleError,
    VALIDATION_PATTERNS,
    ValidationService,
    register_builtin_rules,
    rules,
)


# =============================================================================
# Rule factories
# =============================================================================


class TestRequired:
    @pytest.mark.parametrize("value", ["", "   ", "\t\n"])
    def test_blank_fails(self, value):
        assert not rules.required().check(value)

    def test_content_passes(self):
        assert rules.required().check(" a ")

    def test_custom_message(self):
        assert rules.required("Username is required").message == "Username is required"


class TestLengthRules:
    def test_min_length_measures_trimmed_value(self):
        rule = rules.min_length(3)
        assert not rule.check("ab   ")
        assert rule.check("abc")

    def test_min_length_untrimmed(self):
        rule = rules.min_length(3, trim=False)
        assert rule.check("ab ")

    def test_max_length_measures_raw_value(self):
        rule = rules.max_length(3)
        assert not rule.check("ab  ")
        assert rule.check("abc")

    def test_empty_passes(self):
        assert rules.min_length(5).check("")
        assert rules.max_length(0).check("")

    def test_names_and_default_messages(self):
        assert rules.min_length(5).name == "minLength_5"
        assert rules.max_length(10).message == "Must not exceed 10 characters"


class TestPatternRules:
    def test_pattern_matches_from_start(self):
        rule = rules.pattern(r"\d", "Must start with a digit", name="startsWithDigit")
        assert rule.check("1 Main St")
        assert not rule.check("Main St 1")

    def test_pattern_search(self):
        rule = rules.pattern(r"\d", "Must contain a digit", name="hasDigit", search=True)
        assert rule.check("Main St 1")

    def test_pattern_trim_and_ignore_case(self):
        rule = rules.pattern(r"^[A-Z]+$", "Letters only", name="letters", trim=True, ignore_case=True)
        assert rule.check("  abc  ")

    def test_compiled_pattern_accepted(self):
        rule = rules.pattern(VALIDATION_PATTERNS["US_ZIP"], "Bad ZIP")
        assert rule.check("12345-6789")
        assert not rule.check("1234")

    def test_any_pattern(self):
        rule = rules.any_pattern([r"^\d{5}$", r"^[A-Z]\d[A-Z]\s?\d[A-Z]\d$"], "Bad", name="postal")
        assert rule.check("12345")
        assert rule.check("M5H 2N2")
        assert not rule.check("M5H-2N2")


class TestPatternDialect:
    @pytest.mark.parametrize(
        "rule",
        [
            rules.pattern(r"^\d+$", "Digits only", name="digits"),
            rules.pattern(VALIDATION_PATTERNS["EMAIL"], "Email must be valid", name="email"),
            rules.any_pattern([r"^\d{5}$"], "Bad ZIP", name="zip"),
        ],
    )
    def test_end_anchor_rejects_trailing_newline(self, rule):
        value = "12345\n" if rule.name != "email" else "someone@example.com\n"
        assert not rule.check(value)
        assert rule.check(value.rstrip("\n"))

    def test_escaped_dollar_is_literal(self):
        assert rules.compile_pattern(r"^cost\$").match("cost$")
        assert rules.compile_pattern(r"^a\\$").match("a\\")

    def test_digit_classes_are_ascii(self):
        arabic_indic = "١٢٣٤٥"
        assert not rules.pattern(VALIDATION_PATTERNS["US_ZIP"], "Bad ZIP").check(arabic_indic)
        assert not rules.digit_count(5, 5, "Five digits").check(arabic_indic)


class TestOtherRules:
    def test_equals_reads_lazily(self):
        original = {"password": "Secret1!"}
        rule = rules.equals(lambda: original["password"], "Passwords do not match")
        assert rule.check("Secret1!")
        original["password"] = "Changed1!"
        assert not rule.check("Secret1!")

    def test_digit_count(self):
        rule = rules.digit_count(10, 15, "Phone number must be valid (10-15 digits)")
        assert rule.check("+1 (555) 123-4567")
        assert not rule.check("555-1234")

    def test_custom(self):
        rule = rules.custom("noSpaces", "No spaces", lambda value: " " not in value)
        assert rule.name == "noSpaces"
        assert not rule.check("a b")


# =============================================================================
# RuleRegistry
# =============================================================================


class TestRuleRegistry:
    @pytest.fixture(autouse=True)
    def clear_registry(self):
        RuleRegistry.clear()
        yield
        RuleRegistry.clear()

    def test_register_and_get(self):
        rule = rules.custom("noSpaces", "No spaces", lambda value: " " not in value)
        RuleRegistry.register(rule)
        assert RuleRegistry.get("noSpaces") is rule

    def test_register_idempotent(self):
        first = rules.custom("same", "first", lambda value: True)
        RuleRegistry.register(first)
        RuleRegistry.register(rules.custom("same", "second", lambda value: True))
        assert RuleRegistry.get("same") is first

    def test_get_unknown_raises(self):
        with pytest.raises(UnknownRuleError, match="not registered"):
            RuleRegistry.get("missing")

    def test_builtins(self):
        register_builtin_rules()
        assert RuleRegistry.list_registered() == [
            "email",
            "phone",
            "required",
            "streetNumber",
            "strongPassword",
            "unitNumber",
        ]
        assert RuleRegistry.get("email").check("someone@example.com")
        assert not RuleRegistry.get("unitNumber").check("12 B")


# =============================================================================
# ValidationService
# =============================================================================


class TestValidationService:
    @pytest.fixture
    def service(self):
        return ValidationService()

    def test_unknown_field_is_valid(self, service):
        assert service.validate_field("nickname", "").is_valid

    def test_required_email(self, service):
        result = service.validate_field("email", "")
        assert result.errors == ("This field is required",)

    def test_invalid_email(self, service):
        assert service.validate_field("email", "nope").errors == ("Email must be valid",)

    def test_weak_password_reports_strength(self, service):
        result = service.validate_field("password", "short")
        assert result.errors[0] == "Must be at least 8 characters long"
        assert len(result.errors) == 2

    def test_explicit_config_overrides_registered(self, service):
        config = FieldValidationConfig(field_name="email", rules=())
        assert service.validate_field("email", "", config).is_valid

    def test_register_field_config(self, service):
        service.register_field_config(
            FieldValidationConfig(field_name="nickname", rules=(rules.max_length(5),))
        )
        assert "nickname" in service.list_fields()
        assert not service.validate_field("nickname", "toolong").is_valid

    def test_without_defaults(self):
        assert ValidationService(register_defaults=False).list_fields() == []
