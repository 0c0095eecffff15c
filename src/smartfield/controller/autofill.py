"""Autofill detection.

Browsers and password managers fill fields in one bulk write rather than
keystroke by keystroke. A detector looks at a single value change and
decides whether it looks like such a fill. Detection is approximate; the
controller treats any callable with the AutofillDetector signature as a
drop-in replacement for the default heuristic.
"""

from dataclasses import dataclass, field
from typing import Protocol

from smartfield.validation.rules import compile_pattern
from smartfield.validation.types import AutofillConfig, InputFieldType


# Content a filled value is expected to look like, per field type
DEFAULT_CONTENT_PATTERNS: dict[InputFieldType, tuple[str, ...]] = {
    InputFieldType.EMAIL: (r"@", r"\."),
    InputFieldType.PASSWORD: (r"[A-Z]", r"[a-z]", r"[0-9]"),
    InputFieldType.PHONE: (r"^\+?[\d\s\-()]+$",),
    InputFieldType.NAME: (r"^[a-zA-Z\s'-]+$",),
    InputFieldType.TEXT: (),
}


class AutofillDetector(Protocol):
    """Decides whether a value change looks like autofill."""

    def __call__(self, old_value: str, new_value: str) -> bool:
        ...


@dataclass
class HeuristicAutofillDetector:
    """Default detector: a blank field that jumps to content in one change.

    A change counts as autofill when the old value is blank, the new value
    is not, the value grew by more than `min_change_threshold` characters,
    and the new value matches every content pattern for the field type.
    """

    config: AutofillConfig = field(default_factory=AutofillConfig)
    field_type: InputFieldType = InputFieldType.TEXT

    def __post_init__(self) -> None:
        sources = self.config.content_patterns
        if sources is None:
            sources = DEFAULT_CONTENT_PATTERNS.get(self.field_type, ())
        self._patterns = [compile_pattern(source) for source in sources]

    def __call__(self, old_value: str, new_value: str) -> bool:
        old_value = old_value or ""
        new_value = new_value or ""

        if old_value.strip():
            return False
        if not new_value.strip():
            return False
        if len(new_value) - len(old_value) <= self.config.min_change_threshold:
            return False
        return all(p.search(new_value) for p in self._patterns)


def never_autofill(old_value: str, new_value: str) -> bool:
    """Detector that disables autofill handling."""
    return False
