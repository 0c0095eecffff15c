"""Form-level aggregation of field validation results.

Collects the results each field controller reports and decides whether the
form may be submitted.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable

from smartfield.validation.types import ValidationResult

logger = logging.getLogger(__name__)


@dataclass
class FormValidationTracker:
    """Tracks the latest ValidationResult of every field in a form.

    Attributes:
        required_fields: Fields that must hold a non-blank value to submit
        enabled: When False the form is always ready to submit
        skippable: Only fields holding a value need to be valid
    """

    required_fields: list[str] = field(default_factory=list)
    enabled: bool = True
    skippable: bool = False
    results: dict[str, ValidationResult] = field(default_factory=dict)

    def update(self, field_name: str, result: ValidationResult) -> bool:
        """Record a field's result. Returns False when it is unchanged."""
        if self.results.get(field_name) == result:
            return False
        self.results[field_name] = result
        logger.debug("Field '%s' is now %s", field_name, "valid" if result.is_valid else "invalid")
        return True

    def callback_for(self, *field_names: str) -> Callable[[ValidationResult], None]:
        """Build an on_validation_change callback feeding one or more fields.

        A combined input (e.g., street number and name) reports the same
        result under each of its field names.
        """

        def on_validation_change(result: ValidationResult) -> None:
            for name in field_names:
                self.update(name, result)

        return on_validation_change

    def forget(self, field_name: str) -> None:
        self.results.pop(field_name, None)

    def errors(self) -> dict[str, list[str]]:
        return {
            name: list(result.errors)
            for name, result in self.results.items()
            if not result.is_valid
        }

    def is_ready_to_submit(self, values: dict[str, str]) -> bool:
        """Whether the form may be submitted with the given field values."""
        if not self.enabled:
            return True

        if self.skippable:
            return all(
                result.is_valid
                for name, result in self.results.items()
                if (values.get(name) or "").strip()
            )

        complete = all((values.get(name) or "").strip() for name in self.required_fields)
        return complete and all(result.is_valid for result in self.results.values())
