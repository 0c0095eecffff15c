"""Field validation controller.

Binds the evaluator, the interaction tracker and autofill detection for one
field, and reports every fresh ValidationResult to the host through an
optional callback.

Usage:
    controller = FieldValidationController(
        config,
        value="",
        on_validation_change=lambda result: form.update("email", result),
    )
    controller.on_focus()
    controller.on_change("someone@example.com", "")
    controller.on_blur()
    controller.display_errors  # errors to render
"""

import logging
from dataclasses import dataclass
from typing import Callable, Sequence

from smartfield.controller.autofill import AutofillDetector, HeuristicAutofillDetector
from smartfield.controller.tracker import FieldValidationState, InteractionTracker
from smartfield.validation.evaluator import validate_value
from smartfield.validation.types import FieldValidationConfig, ValidationResult

logger = logging.getLogger(__name__)

ValidationCallback = Callable[[ValidationResult], None]


@dataclass(frozen=True)
class FieldHandlers:
    """Event handlers a host attaches to its input element."""

    on_focus: Callable[[], None]
    on_change: Callable[..., ValidationResult]
    on_blur: Callable[[], None]


class FieldValidationController:
    """Validation state machine for a single field.

    The host owns the field value and reports changes through on_change()
    or set_value(); the controller never modifies the value itself.

    The callback receives the full current result on construction, on every
    value change, on every configuration or enable/disable transition, and
    on any other transition that changes the result.
    """

    def __init__(
        self,
        config: FieldValidationConfig | None,
        value: str = "",
        *,
        enabled: bool = True,
        on_validation_change: ValidationCallback | None = None,
        autofill_detector: AutofillDetector | None = None,
    ):
        self._config = config
        self._enabled = enabled
        self._callback = on_validation_change
        self._custom_detector = autofill_detector
        self._detector = self._build_detector()
        self._tracker = InteractionTracker(value)
        self._result = ValidationResult.valid()
        self._reported: ValidationResult | None = None

        self._revalidate()
        self._publish(force=True)

    # =========================================================================
    # Derived state
    # =========================================================================

    @property
    def config(self) -> FieldValidationConfig | None:
        return self._config

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def active(self) -> bool:
        """True when validation is enabled and a configuration is present."""
        return self._enabled and self._config is not None

    @property
    def value(self) -> str:
        return self._tracker.last_value

    @property
    def result(self) -> ValidationResult:
        return self._result

    @property
    def is_valid(self) -> bool:
        return self._result.is_valid

    @property
    def touched(self) -> bool:
        return self._tracker.touched

    @property
    def focused(self) -> bool:
        return self._tracker.focused

    @property
    def autofilled(self) -> bool:
        return self._tracker.autofilled

    @property
    def state(self) -> FieldValidationState:
        return self._tracker.state

    @property
    def display_errors(self) -> list[str]:
        if not self.active:
            return []
        return list(self._tracker.display_errors)

    @property
    def is_required(self) -> bool:
        """Whether the host should render a required marker."""
        return self.active and self._config.required

    @property
    def handlers(self) -> FieldHandlers:
        return FieldHandlers(
            on_focus=self.on_focus,
            on_change=self.on_change,
            on_blur=self.on_blur,
        )

    def resolve_errors(self, external_errors: Sequence[str] = ()) -> list[str]:
        """Errors the host should render.

        Controller errors take precedence whenever validation is active;
        external errors are shown only when it is disabled or unconfigured.
        """
        if self.active:
            return self.display_errors
        return list(external_errors)

    # =========================================================================
    # Event handlers
    # =========================================================================

    def on_focus(self) -> None:
        self._tracker.focus()

    def on_change(self, new_value: str, old_value: str | None = None) -> ValidationResult:
        """Handle a user edit of the field value.

        Args:
            new_value: The value after the edit
            old_value: The value before the edit (defaults to the last seen value)

        Returns:
            The fresh ValidationResult, which is also sent to the callback
        """
        if old_value is None:
            old_value = self._tracker.last_value

        if self.active and self._tracker.can_detect_autofill():
            if self._detector(old_value, new_value):
                logger.debug(
                    "Autofill detected on '%s'; marking touched", self._config.field_name
                )
                self._tracker.mark_autofilled()

        self._tracker.record_value(new_value)
        self._revalidate()
        self._publish(force=True)
        return self._result

    def on_blur(self) -> None:
        first_blur = not self._tracker.touched
        self._tracker.blur()
        if first_blur and self._config is not None:
            logger.debug("Field '%s' touched on blur", self._config.field_name)
        self._tracker.refresh(self._result.errors)
        self._publish()

    # =========================================================================
    # Host-driven transitions
    # =========================================================================

    def set_value(self, value: str) -> ValidationResult:
        """Replace the value without autofill detection (e.g., form reset)."""
        self._tracker.record_value(value)
        self._revalidate()
        self._publish(force=True)
        return self._result

    def set_enabled(self, enabled: bool) -> None:
        """Turn validation on or off.

        Both directions reset interaction state. Disabling reports an
        always-valid result immediately, even for an invalid value.
        """
        if enabled == self._enabled:
            return

        self._enabled = enabled
        self._tracker.reset()
        logger.debug(
            "Validation %s for '%s'",
            "enabled" if enabled else "disabled",
            self._config.field_name if self._config else "<unconfigured>",
        )
        self._revalidate()
        self._publish(force=True)

    def reconfigure(self, config: FieldValidationConfig | None) -> None:
        """Swap in a new configuration, preserving touched state."""
        self._config = config
        self._detector = self._build_detector()
        self._revalidate()
        self._publish(force=True)

    # =========================================================================
    # Internals
    # =========================================================================

    def _build_detector(self) -> AutofillDetector:
        if self._custom_detector is not None:
            return self._custom_detector
        if self._config is None:
            return HeuristicAutofillDetector()
        return HeuristicAutofillDetector(self._config.autofill, self._config.field_type)

    def _revalidate(self) -> None:
        if self.active:
            self._result = validate_value(self._tracker.last_value, self._config)
        else:
            self._result = ValidationResult.valid()
        self._tracker.refresh(self._result.errors)

    def _publish(self, force: bool = False) -> None:
        if not force and self._result == self._reported:
            return
        self._reported = self._result
        if self._callback is not None:
            self._callback(self._result)
