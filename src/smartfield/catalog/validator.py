"""
catalog/validator.py: JSON Schema validation for field definition YAML files.

Usage:
    from smartfield.catalog.validator import validate_catalog_dir

    issues = validate_catalog_dir(Path("fields"))
    for issue in issues:
        print(issue)
"""
from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from smartfield.validation.registry import RuleRegistry, register_builtin_rules
from smartfield.validation.rules import compile_pattern

logger = logging.getLogger(__name__)

_SCHEMA_PATH = Path(__file__).parent / "schemas" / "field.schema.json"


@dataclass
class CatalogIssue:
    """A single validation finding for a field definition file."""

    file: Path
    message: str
    path: str = ""           # Location within the document, e.g. "rules[2]"
    severity: str = "error"  # "error" | "warning"

    def __str__(self) -> str:
        loc = f" at {self.path}" if self.path else ""
        return f"[{self.severity.upper()}] {self.file}{loc}: {self.message}"


def _load_schema() -> dict[str, Any]:
    with _SCHEMA_PATH.open() as fh:
        return json.load(fh)


def _json_path(error: ValidationError) -> str:
    """Convert a jsonschema error path to a readable string."""
    parts = []
    for p in error.absolute_path:
        if isinstance(p, int):
            parts.append(f"[{p}]")
        else:
            parts.append(str(p))
    return "/".join(parts).replace("/[", "[")


def validate_document(doc: Any, source: Path, *, schema: dict[str, Any] | None = None) -> list[CatalogIssue]:
    """Validate an already-parsed field definition.

    Rule references and patterns are only checked once the document
    matches the schema.
    """
    if doc is None:
        return [CatalogIssue(file=source, message="File is empty or contains only whitespace")]

    validator = Draft202012Validator(schema or _load_schema())
    issues = [
        CatalogIssue(file=source, message=error.message, path=_json_path(error))
        for error in sorted(validator.iter_errors(doc), key=_json_path)
    ]
    if issues:
        return issues
    return _check_rule_specs(doc, source)


def _check_rule_specs(doc: dict[str, Any], source: Path) -> list[CatalogIssue]:
    """Report rule references that are not registered and patterns that do not compile."""
    register_builtin_rules()
    issues: list[CatalogIssue] = []

    def check_pattern(regex: str, path: str) -> None:
        try:
            compile_pattern(regex)
        except re.error as exc:
            issues.append(
                CatalogIssue(file=source, message=f"Invalid pattern '{regex}': {exc}", path=path)
            )

    for i, spec in enumerate(doc.get("rules", [])):
        if "rule" in spec and not RuleRegistry.is_registered(spec["rule"]):
            issues.append(
                CatalogIssue(
                    file=source,
                    message=f"Rule '{spec['rule']}' is not registered",
                    path=f"rules[{i}]",
                )
            )
        if "pattern" in spec:
            check_pattern(spec["pattern"], f"rules[{i}]")
        for j, regex in enumerate(spec.get("anyPattern", [])):
            check_pattern(regex, f"rules[{i}]/anyPattern[{j}]")

    for j, regex in enumerate(doc.get("autofill", {}).get("contentPatterns") or []):
        check_pattern(regex, f"autofill/contentPatterns[{j}]")

    return issues


def _read_yaml(yaml_path: Path) -> tuple[Any, list[CatalogIssue]]:
    try:
        with yaml_path.open() as fh:
            return yaml.safe_load(fh), []
    except yaml.YAMLError as exc:
        return None, [CatalogIssue(file=yaml_path, message=f"YAML parse error: {exc}")]


def validate_field_file(yaml_path: Path, *, schema: dict[str, Any] | None = None) -> list[CatalogIssue]:
    """
    Validate a single field definition file.

    Returns:
        A list of :class:`CatalogIssue` objects (empty on success).
    """
    doc, issues = _read_yaml(yaml_path)
    if issues:
        return issues
    return validate_document(doc, yaml_path, schema=schema)


def validate_catalog_dir(catalog_dir: Path, *, strict: bool = False) -> list[CatalogIssue]:
    """
    Validate every ``.yaml`` file in *catalog_dir*.

    Besides schema errors, unregistered rule references, patterns that do
    not compile, duplicate field names across files and duplicate
    rule names within a file are reported, and a missing displayName is a
    warning.
    With *strict*, warnings are escalated to errors.
    """
    if not catalog_dir.is_dir():
        return [
            CatalogIssue(
                file=catalog_dir,
                message=f"Field catalog directory does not exist: {catalog_dir}",
            )
        ]

    try:
        schema = _load_schema()
    except (FileNotFoundError, json.JSONDecodeError) as exc:
        return [CatalogIssue(file=_SCHEMA_PATH, message=f"Failed to load JSON Schema: {exc}")]

    all_issues: list[CatalogIssue] = []
    seen: dict[str, Path] = {}

    for yaml_file in sorted(catalog_dir.glob("*.yaml")):
        doc, file_issues = _read_yaml(yaml_file)
        if not file_issues:
            file_issues = validate_document(doc, yaml_file, schema=schema)
        all_issues.extend(file_issues)
        if file_issues:
            continue

        name = doc["field"]
        if name in seen:
            all_issues.append(
                CatalogIssue(
                    file=yaml_file,
                    message=f"Field '{name}' is already defined in {seen[name].name}",
                )
            )
        else:
            seen[name] = yaml_file

        rule_names = ["required"] + [rule_spec_name(spec) for spec in doc.get("rules", [])]
        for dup in sorted({n for n in rule_names if rule_names.count(n) > 1}):
            all_issues.append(
                CatalogIssue(
                    file=yaml_file,
                    message=f"Rule name '{dup}' is used more than once",
                    path="rules",
                )
            )

        if "displayName" not in doc:
            all_issues.append(
                CatalogIssue(
                    file=yaml_file,
                    message="No displayName; one will be derived from the field name",
                    severity="warning",
                )
            )

    if strict:
        for issue in all_issues:
            if issue.severity == "warning":
                issue.severity = "error"

    logger.debug("Validated field catalog %s: %d issue(s)", catalog_dir, len(all_issues))
    return all_issues


def rule_spec_name(spec: dict[str, Any]) -> str:
    """Name a rule spec will be registered under once built."""
    if "name" in spec:
        return spec["name"]
    if "rule" in spec:
        return spec["rule"]
    if "minLength" in spec:
        return f"minLength_{spec['minLength']}"
    return f"maxLength_{spec['maxLength']}"
