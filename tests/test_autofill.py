"""Tests for the default autofill heuristic."""

import pytest

from smartfield.controller import HeuristicAutofillDetector
from smartfield.validation import AutofillConfig, InputFieldType


class TestHeuristicAutofillDetector:
    def test_blank_to_content_is_autofill(self):
        detector = HeuristicAutofillDetector()
        assert detector("", "221B Baker Street")

    @pytest.mark.parametrize("old_value", ["a", "existing"])
    def test_non_blank_old_value_is_not_autofill(self, old_value):
        assert not HeuristicAutofillDetector()(old_value, old_value + "more text")

    def test_whitespace_old_value_counts_as_blank(self):
        assert HeuristicAutofillDetector()("  ", "  Toronto")

    def test_blank_new_value_is_not_autofill(self):
        assert not HeuristicAutofillDetector()("", "      ")

    def test_threshold_is_exclusive(self):
        detector = HeuristicAutofillDetector(AutofillConfig(min_change_threshold=3))
        assert not detector("", "abc")
        assert detector("", "abcd")

    def test_email_defaults_require_at_and_dot(self):
        detector = HeuristicAutofillDetector(field_type=InputFieldType.EMAIL)
        assert detector("", "someone@example.com")
        assert not detector("", "someone@example")

    def test_password_defaults_require_mixed_characters(self):
        detector = HeuristicAutofillDetector(field_type=InputFieldType.PASSWORD)
        assert detector("", "Secret123")
        assert not detector("", "secret123")

    def test_explicit_patterns_override_defaults(self):
        detector = HeuristicAutofillDetector(
            AutofillConfig(content_patterns=(r"^\d+$",)),
            field_type=InputFieldType.EMAIL,
        )
        assert detector("", "12345")
        assert not detector("", "someone@example.com")

    def test_types_without_defaults_accept_any_content(self):
        detector = HeuristicAutofillDetector(field_type=InputFieldType.POSTAL_CODE)
        assert detector("", "M5H 2N2")
