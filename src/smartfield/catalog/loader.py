"""Load field definitions from YAML and turn them into validation configs."""

import logging
import re
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml

from smartfield.catalog.validator import validate_document
from smartfield.validation import rules
from smartfield.validation.registry import RuleRegistry, UnknownRuleError, register_builtin_rules
from smartfield.validation.types import (
    AutofillConfig,
    FieldValidationConfig,
    InputFieldType,
    Rule,
    ValidationMode,
)

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent / "fields"


class FieldCatalogError(ValueError):
    """Raised when a field definition file is malformed."""


class UnknownFieldError(ValueError):
    """Raised when a field name is not in the catalog."""


@dataclass
class FieldDefinition:
    name: str
    display_name: str
    required_message: str
    type: InputFieldType = InputFieldType.TEXT
    rules: list[Rule] = field(default_factory=list)
    autofill: AutofillConfig = field(default_factory=AutofillConfig)
    source: Path | None = None


class FieldCatalog:
    """Loads field definitions from a directory of YAML files.

    Example:
        catalog = FieldCatalog()
        catalog.load_all()
        config = catalog.build_config("postalOrZipCode", ValidationMode.REQUIRED)
    """

    def __init__(self, catalog_path: Path | None = None):
        self.catalog_path = catalog_path or DEFAULT_CATALOG_PATH
        self.fields: dict[str, FieldDefinition] = {}

    def load_all(self) -> None:
        """Load every field definition in the catalog directory."""
        register_builtin_rules()

        if not self.catalog_path.exists():
            raise FieldCatalogError(f"Field catalog not found at {self.catalog_path}")

        for yaml_file in sorted(self.catalog_path.glob("*.yaml")):
            try:
                with open(yaml_file) as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise FieldCatalogError(f"Invalid YAML in {yaml_file.name}: {e}") from e

            if not data or "field" not in data:
                logger.warning("Skipping %s: no 'field' key", yaml_file.name)
                continue

            definition = self._resolve_field(data, yaml_file)
            if definition.name in self.fields:
                raise FieldCatalogError(
                    f"Field '{definition.name}' is defined in both "
                    f"{self.fields[definition.name].source} and {yaml_file}"
                )
            self.fields[definition.name] = definition

        logger.debug("Loaded %d field definition(s) from %s", len(self.fields), self.catalog_path)

    def get(self, name: str) -> FieldDefinition:
        if name not in self.fields:
            raise UnknownFieldError(
                f"Field '{name}' is not in the catalog. "
                "Available fields: " + ", ".join(self.list_fields())
            )
        return self.fields[name]

    def list_fields(self) -> list[str]:
        return sorted(self.fields.keys())

    def build_config(
        self,
        name: str,
        mode: ValidationMode = ValidationMode.OPTIONAL,
    ) -> FieldValidationConfig:
        """Build a controller configuration for a catalog field.

        The presence rule leads the rule set in required mode and is left
        out entirely in optional mode.
        """
        definition = self.get(name)
        field_rules = list(definition.rules)
        if mode is ValidationMode.REQUIRED:
            field_rules.insert(0, rules.required(definition.required_message))

        return FieldValidationConfig(
            field_name=definition.name,
            rules=tuple(field_rules),
            mode=mode,
            field_type=definition.type,
            autofill=definition.autofill,
        )

    def _resolve_field(self, data: dict[str, Any], source: Path) -> FieldDefinition:
        """Convert a field dict to a FieldDefinition."""
        issues = [i for i in validate_document(data, source) if i.severity == "error"]
        if issues:
            raise FieldCatalogError(
                f"Invalid field definition {source.name}:\n"
                + "\n".join(str(issue) for issue in issues)
            )

        name = data["field"]
        autofill_data = data.get("autofill", {})
        patterns = autofill_data.get("contentPatterns")

        try:
            field_rules = [self._resolve_rule(spec) for spec in data.get("rules", [])]
            for regex in patterns or []:
                rules.compile_pattern(regex)
        except (UnknownRuleError, re.error) as e:
            raise FieldCatalogError(f"Invalid field definition {source.name}: {e}") from e

        return FieldDefinition(
            name=name,
            display_name=data.get("displayName", self._to_display_name(name)),
            required_message=data["requiredMessage"],
            type=InputFieldType(data.get("type", "text")),
            rules=field_rules,
            autofill=AutofillConfig(
                min_change_threshold=autofill_data.get("minChangeThreshold", 2),
                content_patterns=tuple(patterns) if patterns is not None else None,
            ),
            source=source,
        )

    def _resolve_rule(self, spec: dict[str, Any]) -> Rule:
        message = spec.get("message")
        trim = spec.get("trim", False)

        if "minLength" in spec:
            return rules.min_length(spec["minLength"], message, trim=spec.get("trim", True))
        if "maxLength" in spec:
            return rules.max_length(spec["maxLength"], message)
        if "pattern" in spec:
            return rules.pattern(
                spec["pattern"],
                message,
                name=spec["name"],
                trim=trim,
                ignore_case=spec.get("ignoreCase", False),
                search=spec.get("search", False),
            )
        if "anyPattern" in spec:
            return rules.any_pattern(
                spec["anyPattern"],
                message,
                name=spec["name"],
                trim=trim,
                ignore_case=spec.get("ignoreCase", False),
            )
        if "digits" in spec:
            return rules.digit_count(
                spec["digits"]["min"], spec["digits"]["max"], message, name=spec["name"]
            )

        rule = RuleRegistry.get(spec["rule"])
        if message:
            rule = replace(rule, message=message)
        return rule

    @staticmethod
    def _to_display_name(name: str) -> str:
        """Convert camelCase to Title Case."""
        words = re.sub(r"([a-z0-9])([A-Z])", r"\1 \2", name)
        return words[:1].upper() + words[1:]
