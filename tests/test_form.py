"""Tests for form-level aggregation of field results."""

import pytest

from smartfield.catalog import FieldCatalog
from smartfield.controller import FieldValidationController
from smartfield.form import FormValidationTracker
from smartfield.validation import ValidationMode, ValidationResult

INVALID = ValidationResult.of(["bad"])
VALID = ValidationResult.valid()


@pytest.fixture(scope="module")
def catalog():
    catalog = FieldCatalog()
    catalog.load_all()
    return catalog


class TestFormValidationTracker:
    def test_update_ignores_unchanged_results(self):
        form = FormValidationTracker()
        assert form.update("city", INVALID)
        assert not form.update("city", ValidationResult.of(["bad"]))
        assert form.update("city", VALID)

    def test_disabled_form_is_always_ready(self):
        form = FormValidationTracker(required_fields=["city"], enabled=False)
        form.update("city", INVALID)
        assert form.is_ready_to_submit({})

    def test_required_fields_must_have_values(self):
        form = FormValidationTracker(required_fields=["city", "country"])
        form.update("city", VALID)
        form.update("country", VALID)
        assert not form.is_ready_to_submit({"city": "Toronto", "country": "  "})
        assert form.is_ready_to_submit({"city": "Toronto", "country": "Canada"})

    def test_any_invalid_result_blocks_submit(self):
        form = FormValidationTracker(required_fields=["city"])
        form.update("city", VALID)
        form.update("postalOrZipCode", INVALID)
        assert not form.is_ready_to_submit({"city": "Toronto", "postalOrZipCode": "1"})

    def test_skippable_form_ignores_blank_fields(self):
        form = FormValidationTracker(required_fields=["city"], skippable=True)
        form.update("city", INVALID)
        form.update("postalOrZipCode", VALID)
        assert form.is_ready_to_submit({"city": "", "postalOrZipCode": "12345"})
        assert not form.is_ready_to_submit({"city": "T", "postalOrZipCode": "12345"})

    def test_errors_and_forget(self):
        form = FormValidationTracker()
        form.update("city", INVALID)
        form.update("country", VALID)
        assert form.errors() == {"city": ["bad"]}
        form.forget("city")
        assert form.errors() == {}

    def test_callback_for_combined_field(self):
        form = FormValidationTracker()
        callback = form.callback_for("streetNumber", "streetName")
        callback(INVALID)
        assert form.results == {"streetNumber": INVALID, "streetName": INVALID}


class TestFormWithControllers:
    def test_controllers_feed_form(self, catalog):
        form = FormValidationTracker(required_fields=["city", "postalOrZipCode"])
        values = {"city": "", "postalOrZipCode": ""}

        city = FieldValidationController(
            catalog.build_config("city", ValidationMode.REQUIRED),
            values["city"],
            on_validation_change=form.callback_for("city"),
        )
        postal = FieldValidationController(
            catalog.build_config("postalOrZipCode", ValidationMode.REQUIRED),
            values["postalOrZipCode"],
            on_validation_change=form.callback_for("postalOrZipCode"),
        )
        # Results are known before the user touches anything
        assert not form.is_ready_to_submit(values)
        assert set(form.errors()) == {"city", "postalOrZipCode"}

        for controller, name, value in ((city, "city", "Toronto"), (postal, "postalOrZipCode", "M5H 2N2")):
            controller.on_focus()
            controller.on_change(value, values[name])
            values[name] = value
            controller.on_blur()

        assert form.is_ready_to_submit(values)
