"""smartfield validation layer.

Stateless pieces of the engine: rule types, rule factories, the rule
registry, the evaluator and the field-level validation service.

Usage:
    from smartfield.validation import evaluate, rules

    result = evaluate("A", [rules.min_length(2), rules.max_length(10)])
    result.errors  # ("Must be at least 2 characters long",)
"""

from smartfield.validation import rules
from smartfield.validation.evaluator import evaluate, validate_value
from smartfield.validation.registry import (
    RuleRegistry,
    UnknownRuleError,
    register_builtin_rules,
)
from smartfield.validation.rules import VALIDATION_PATTERNS, compile_pattern
from smartfield.validation.service import ValidationService
from smartfield.validation.types import (
    AutofillConfig,
    FieldValidationConfig,
    InputFieldType,
    Rule,
    RulePredicate,
    ValidationMode,
    ValidationResult,
)

__all__ = [
    # Types
    "AutofillConfig",
    "FieldValidationConfig",
    "InputFieldType",
    "Rule",
    "RulePredicate",
    "ValidationMode",
    "ValidationResult",
    # Rules
    "VALIDATION_PATTERNS",
    "compile_pattern",
    "rules",
    # Registry
    "RuleRegistry",
    "UnknownRuleError",
    "register_builtin_rules",
    # Evaluation
    "evaluate",
    "validate_value",
    "ValidationService",
]
