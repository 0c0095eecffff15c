"""Rule evaluation.

Evaluation is a pure function of the value and the rule set. Every rule
runs; there is no short-circuiting, so a value that is both too long and
badly formatted reports both messages in declaration order.
"""

import logging
from typing import Sequence

from smartfield.validation.types import FieldValidationConfig, Rule, ValidationResult

logger = logging.getLogger(__name__)


def evaluate(value: str, rules: Sequence[Rule]) -> ValidationResult:
    """Evaluate a value against an ordered rule set.

    Args:
        value: The field value (may be empty)
        rules: Rules in the order their failures should be reported

    Returns:
        ValidationResult listing the message of every failing rule
    """
    errors: list[str] = []

    for rule in rules:
        try:
            passed = rule.check(value)
        except Exception as e:
            # Rules are expected to be total; a raising predicate is reported, not propagated
            logger.warning("Rule '%s' raised while validating: %s", rule.name, e)
            errors.append(f"Validation error: {e}")
            continue

        if not passed:
            errors.append(rule.message)

    return ValidationResult.of(errors)


def validate_value(value: str, config: FieldValidationConfig) -> ValidationResult:
    """Evaluate a value using a field configuration.

    Applies the configuration's transform, if any, before evaluating.
    """
    if config.transform is not None:
        value = config.transform(value)
    return evaluate(value, config.rules)
