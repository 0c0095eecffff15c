"""Core types for the smartfield validation engine.

This module defines the data shared by every layer of the engine:
- Rule: a named predicate with the message reported when it fails
- ValidationResult: the outcome of evaluating a value against a rule set
- FieldValidationConfig: the immutable configuration a controller runs with
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Sequence


RulePredicate = Callable[[str], bool]


class ValidationMode(Enum):
    """Whether a field must hold a value."""

    REQUIRED = "required"
    OPTIONAL = "optional"


class InputFieldType(Enum):
    """Input field types, used to pick autofill detection patterns."""

    TEXT = "text"
    EMAIL = "email"
    PASSWORD = "password"
    PHONE = "phone"
    NAME = "name"
    POSTAL_CODE = "postalCode"
    ADDRESS = "address"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Rule:
    """A single validation rule.

    Attributes:
        name: Identifier, unique within a rule set (e.g., "minLength_5")
        message: Human-readable message reported when the rule fails
        validator: Predicate returning True when the value passes
    """

    name: str
    message: str
    validator: RulePredicate

    def check(self, value: str) -> bool:
        return bool(self.validator(value))


@dataclass(frozen=True)
class ValidationResult:
    """Result of validating a value.

    Attributes:
        is_valid: True if no rule failed
        errors: Messages of the failing rules, in rule-set order
    """

    is_valid: bool
    errors: tuple[str, ...] = ()

    @classmethod
    def of(cls, errors: Sequence[str]) -> "ValidationResult":
        """Build a result whose validity is derived from the error list."""
        errors = tuple(errors)
        return cls(is_valid=not errors, errors=errors)

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls(is_valid=True, errors=())

    def to_dict(self) -> dict[str, Any]:
        return {
            "isValid": self.is_valid,
            "errors": list(self.errors),
        }


@dataclass(frozen=True)
class AutofillConfig:
    """Tuning knobs for the default autofill heuristic.

    Attributes:
        min_change_threshold: A value must grow by more than this many
            characters in one change to count as autofill
        content_patterns: Regexes the new value must all match; None means
            use the defaults for the field type
    """

    min_change_threshold: int = 2
    content_patterns: tuple[str, ...] | None = None


@dataclass(frozen=True)
class FieldValidationConfig:
    """Configuration a field validation controller runs with.

    A new instance is built whenever the field's validation mode or rule
    set changes; it is never mutated in place.

    Attributes:
        field_name: Name of the field (e.g., "postalOrZipCode")
        rules: Ordered rule set; order defines the order errors are reported
        mode: REQUIRED or OPTIONAL
        field_type: Input type, used by autofill detection
        transform: Optional value transformation applied before evaluation
        autofill: Optional overrides for the autofill heuristic
    """

    field_name: str
    rules: tuple[Rule, ...] = ()
    mode: ValidationMode = ValidationMode.OPTIONAL
    field_type: InputFieldType = InputFieldType.TEXT
    transform: Callable[[str], str] | None = None
    autofill: AutofillConfig = field(default_factory=AutofillConfig)

    def __post_init__(self) -> None:
        # Accept any sequence for rules but store a tuple so the config stays immutable
        object.__setattr__(self, "rules", tuple(self.rules))
        names = [rule.name for rule in self.rules]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(
                f"Field '{self.field_name}' has duplicate rule names: {', '.join(duplicates)}"
            )

    @property
    def required(self) -> bool:
        return self.mode is ValidationMode.REQUIRED
