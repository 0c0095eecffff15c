"""Interaction tracking for a single field.

Tracks whether the user has interacted with a field and decides which of
the evaluator's errors are visible:
- Untouched: nothing is displayed, whatever the evaluator reports
- Touched: displayed errors mirror the evaluator's errors exactly

A field becomes touched on its first blur or when a change is detected as
autofill. It stays touched until reset().
"""

from dataclasses import dataclass, replace
from typing import Sequence


@dataclass
class FieldValidationState:
    """Interaction state of one field.

    Attributes:
        touched: Set on first blur or detected autofill; monotonic until reset
        focused: True between focus and blur
        last_value: Most recent value seen by the controller
        display_errors: Errors currently visible; always empty when untouched
        autofilled: True once a change was detected as autofill
    """

    touched: bool = False
    focused: bool = False
    last_value: str = ""
    display_errors: tuple[str, ...] = ()
    autofilled: bool = False


class InteractionTracker:
    """Owns a FieldValidationState and applies the display policy."""

    def __init__(self, value: str = ""):
        self._state = FieldValidationState(last_value=value)

    @property
    def state(self) -> FieldValidationState:
        """A snapshot of the current state."""
        return replace(self._state)

    @property
    def touched(self) -> bool:
        return self._state.touched

    @property
    def focused(self) -> bool:
        return self._state.focused

    @property
    def autofilled(self) -> bool:
        return self._state.autofilled

    @property
    def last_value(self) -> str:
        return self._state.last_value

    @property
    def display_errors(self) -> tuple[str, ...]:
        return self._state.display_errors

    def can_detect_autofill(self) -> bool:
        """Autofill is only considered before any user interaction."""
        s = self._state
        return not (s.touched or s.focused or s.autofilled)

    def focus(self) -> None:
        self._state.focused = True

    def blur(self) -> None:
        self._state.focused = False
        self._state.touched = True

    def mark_autofilled(self) -> None:
        self._state.autofilled = True
        self._state.touched = True

    def record_value(self, value: str) -> None:
        self._state.last_value = value

    def refresh(self, errors: Sequence[str]) -> tuple[str, ...]:
        """Recompute displayed errors from the latest evaluation."""
        self._state.display_errors = tuple(errors) if self._state.touched else ()
        return self._state.display_errors

    def reset(self, value: str | None = None) -> None:
        """Return to the untouched state, keeping the last value unless given."""
        if value is None:
            value = self._state.last_value
        self._state = FieldValidationState(last_value=value)
