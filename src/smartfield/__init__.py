"""smartfield: form field validation engine.

A field's value is evaluated against an ordered list of rules on every
change, while a per-field controller tracks focus, blur and autofill so
errors are only shown once the user has interacted with the field.

Usage:
    from smartfield import FieldCatalog, FieldValidationController, ValidationMode

    catalog = FieldCatalog()
    catalog.load_all()
    controller = FieldValidationController(
        catalog.build_config("postalOrZipCode", ValidationMode.REQUIRED),
        on_validation_change=print,
    )
"""

from smartfield.catalog import FieldCatalog, UnknownFieldError
from smartfield.controller import FieldValidationController, HeuristicAutofillDetector
from smartfield.form import FormValidationTracker
from smartfield.validation import (
    FieldValidationConfig,
    Rule,
    ValidationMode,
    ValidationResult,
    evaluate,
    rules,
)

__version__ = "0.1.0"

__all__ = [
    "FieldCatalog",
    "FieldValidationConfig",
    "FieldValidationController",
    "FormValidationTracker",
    "HeuristicAutofillDetector",
    "Rule",
    "UnknownFieldError",
    "ValidationMode",
    "ValidationResult",
    "evaluate",
    "rules",
]
