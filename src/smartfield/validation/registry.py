"""Rule registry for smartfield.

Provides registration and lookup for named rules that field definitions
can reference by name (e.g., "email", "strongPassword").
"""

from smartfield.validation import rules
from smartfield.validation.rules import VALIDATION_PATTERNS
from smartfield.validation.types import Rule


class UnknownRuleError(ValueError):
    """Raised when a rule name has not been registered."""


class RuleRegistry:
    """Registry for named rules.

    Rules must be registered before field definitions can reference them.
    Built-in rules are registered by register_builtin_rules(); applications
    add their own at startup.

    Example:
        RuleRegistry.register(rules.custom("noSpaces", "Must not contain spaces", ...))

        # Later, resolve from a field definition
        rule = RuleRegistry.get("noSpaces")
    """

    _rules: dict[str, Rule] = {}

    @classmethod
    def register(cls, rule: Rule) -> None:
        """Register a rule under its own name.

        Idempotent - re-registering the same name is a no-op.
        """
        if rule.name in cls._rules:
            return
        cls._rules[rule.name] = rule

    @classmethod
    def get(cls, name: str) -> Rule:
        """Get a registered rule by name.

        Raises:
            UnknownRuleError: If the rule is not registered
        """
        if name not in cls._rules:
            raise UnknownRuleError(
                f"Validation rule '{name}' is not registered. "
                "Available rules: " + ", ".join(cls.list_registered())
            )
        return cls._rules[name]

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls._rules

    @classmethod
    def list_registered(cls) -> list[str]:
        return sorted(cls._rules.keys())

    @classmethod
    def clear(cls) -> None:
        """Clear all registrations. Primarily for testing."""
        cls._rules.clear()


def register_builtin_rules() -> None:
    """Register the rules shipped with smartfield.

    Safe to call more than once.
    """
    RuleRegistry.register(rules.required())
    RuleRegistry.register(
        rules.pattern(VALIDATION_PATTERNS["EMAIL"], "Email must be valid", name="email")
    )
    RuleRegistry.register(
        rules.pattern(
            VALIDATION_PATTERNS["PHONE_INTERNATIONAL"],
            "Phone number must be a valid format (e.g., +1-555-123-4567)",
            name="phone",
        )
    )
    RuleRegistry.register(
        rules.pattern(
            VALIDATION_PATTERNS["PASSWORD_STRONG"],
            "Password must contain at least 8 characters, including uppercase, "
            "lowercase, number, and special character",
            name="strongPassword",
        )
    )
    RuleRegistry.register(
        rules.pattern(
            VALIDATION_PATTERNS["STREET_NUMBER"],
            "Street number contains invalid characters",
            name="streetNumber",
        )
    )
    RuleRegistry.register(
        rules.pattern(
            VALIDATION_PATTERNS["UNIT_NUMBER"],
            "Unit number contains invalid characters",
            name="unitNumber",
        )
    )
