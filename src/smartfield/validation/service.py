"""Field-level validation service.

Keeps a registry of per-field configurations so callers can validate a
value by field name alone:

    service = ValidationService()
    result = service.validate_field("email", "someone@example.com")
"""

from smartfield.validation import rules
from smartfield.validation.evaluator import validate_value
from smartfield.validation.registry import RuleRegistry, register_builtin_rules
from smartfield.validation.types import (
    FieldValidationConfig,
    InputFieldType,
    ValidationMode,
    ValidationResult,
)


class ValidationService:
    """Validates single field values against registered configurations.

    Fields without a configuration are always valid.
    """

    def __init__(self, register_defaults: bool = True):
        self._field_configs: dict[str, FieldValidationConfig] = {}
        register_builtin_rules()
        if register_defaults:
            self._register_default_field_configs()

    def register_field_config(self, config: FieldValidationConfig) -> None:
        """Register (or replace) the configuration for a field."""
        self._field_configs[config.field_name] = config

    def get_field_config(self, field_name: str) -> FieldValidationConfig | None:
        return self._field_configs.get(field_name)

    def list_fields(self) -> list[str]:
        return sorted(self._field_configs.keys())

    def validate_field(
        self,
        field_name: str,
        value: str,
        config: FieldValidationConfig | None = None,
    ) -> ValidationResult:
        """Validate a single field value.

        Args:
            field_name: Field whose registered configuration is used
            value: The value to validate
            config: Explicit configuration overriding the registered one

        Returns:
            ValidationResult; valid when no configuration is known
        """
        config = config or self.get_field_config(field_name)
        if config is None:
            return ValidationResult.valid()
        return validate_value(value, config)

    def _register_default_field_configs(self) -> None:
        required = RuleRegistry.get("required")

        defaults = [
            FieldValidationConfig(
                field_name="email",
                field_type=InputFieldType.EMAIL,
                mode=ValidationMode.REQUIRED,
                rules=(required, RuleRegistry.get("email"), rules.max_length(100)),
            ),
            FieldValidationConfig(
                field_name="password",
                field_type=InputFieldType.PASSWORD,
                mode=ValidationMode.REQUIRED,
                rules=(
                    required,
                    rules.min_length(8),
                    rules.max_length(128),
                    RuleRegistry.get("strongPassword"),
                ),
            ),
            FieldValidationConfig(
                field_name="firstName",
                field_type=InputFieldType.NAME,
                mode=ValidationMode.REQUIRED,
                rules=(required, rules.max_length(100)),
            ),
            FieldValidationConfig(
                field_name="lastName",
                field_type=InputFieldType.NAME,
                mode=ValidationMode.REQUIRED,
                rules=(required, rules.max_length(100)),
            ),
            FieldValidationConfig(
                field_name="phone",
                field_type=InputFieldType.PHONE,
                rules=(RuleRegistry.get("phone"), rules.max_length(30)),
            ),
            FieldValidationConfig(
                field_name="streetNumber",
                rules=(RuleRegistry.get("streetNumber"), rules.max_length(20)),
            ),
            FieldValidationConfig(
                field_name="unitNumber",
                rules=(RuleRegistry.get("unitNumber"), rules.max_length(20)),
            ),
            FieldValidationConfig(
                field_name="postalOrZipCode",
                field_type=InputFieldType.POSTAL_CODE,
                rules=(rules.max_length(20),),
            ),
        ]
        for name in ("streetName", "city", "stateOrProvince", "country"):
            limit = 200 if name == "streetName" else 100
            defaults.append(
                FieldValidationConfig(
                    field_name=name,
                    mode=ValidationMode.REQUIRED,
                    rules=(required, rules.max_length(limit)),
                )
            )

        for config in defaults:
            self.register_field_config(config)
