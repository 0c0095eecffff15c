"""smartfield field validation controller.

Stateful half of the engine: one controller per field, combining the
evaluator with touched/focus tracking and autofill detection.

Usage:
    from smartfield.controller import FieldValidationController

    controller = FieldValidationController(config, on_validation_change=print)
    controller.on_blur()
"""

from smartfield.controller.autofill import (
    DEFAULT_CONTENT_PATTERNS,
    AutofillDetector,
    HeuristicAutofillDetector,
    never_autofill,
)
from smartfield.controller.controller import (
    FieldHandlers,
    FieldValidationController,
    ValidationCallback,
)
from smartfield.controller.tracker import FieldValidationState, InteractionTracker

__all__ = [
    "AutofillDetector",
    "DEFAULT_CONTENT_PATTERNS",
    "FieldHandlers",
    "FieldValidationController",
    "FieldValidationState",
    "HeuristicAutofillDetector",
    "InteractionTracker",
    "ValidationCallback",
    "never_autofill",
]
