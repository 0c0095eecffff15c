"""Rule factories for common field constraints.

Every factory except `required` lets an empty value pass so that presence
is checked by exactly one rule:
- required: value must contain non-whitespace characters
- min_length / max_length: string length bounds
- pattern: regex format check
- equals: value must match another value (confirm password)
- digit_count: number of digits within bounds (phone numbers)

Patterns are compiled by compile_pattern(): character classes are ASCII-only
and a trailing `$` anchors at the very end of the value, never before a
final newline.
"""

import re
from typing import Callable

from smartfield.validation.types import Rule


def compile_pattern(source: str, flags: int = 0) -> re.Pattern[str]:
    """Compile a field pattern with ASCII classes and a strict end anchor."""
    body = source[:-1]
    if source.endswith("$") and (len(body) - len(body.rstrip("\\"))) % 2 == 0:
        source = body + r"\Z"
    return re.compile(source, flags | re.ASCII)


# =============================================================================
# Common Patterns
# =============================================================================

VALIDATION_PATTERNS: dict[str, re.Pattern[str]] = {
    "EMAIL": compile_pattern(r"^[^\s@]+@[^\s@]+\.[^\s@]+$"),
    "PHONE_INTERNATIONAL": compile_pattern(r"^[\+\(\d][\d\-\s\(\)\.]{6,28}$"),
    "CANADIAN_POSTAL": compile_pattern(r"^[A-Za-z]\d[A-Za-z][ -]?\d[A-Za-z]\d$"),
    "US_ZIP": compile_pattern(r"^\d{5}(-\d{4})?$"),
    "STREET_NUMBER": compile_pattern(r"^[0-9A-Za-z\-/\s]*$"),
    "UNIT_NUMBER": compile_pattern(r"^[A-Za-z0-9\-#]*$"),
    "PASSWORD_STRONG": compile_pattern(
        r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&_])[A-Za-z\d@$!%*?&_]{8,}$"
    ),
}


def _is_blank(value: str) -> bool:
    return not value or not value.strip()


# =============================================================================
# Rule Factories
# =============================================================================


def required(message: str = "This field is required") -> Rule:
    return Rule(
        name="required",
        message=message,
        validator=lambda value: not _is_blank(value),
    )


def min_length(length: int, message: str | None = None, *, trim: bool = True) -> Rule:
    """Minimum length, measured on the trimmed value unless trim is False."""
    return Rule(
        name=f"minLength_{length}",
        message=message or f"Must be at least {length} characters long",
        validator=lambda value: not value or len(value.strip() if trim else value) >= length,
    )


def max_length(length: int, message: str | None = None) -> Rule:
    """Maximum length, measured on the raw value."""
    return Rule(
        name=f"maxLength_{length}",
        message=message or f"Must not exceed {length} characters",
        validator=lambda value: not value or len(value) <= length,
    )


def pattern(
    regex: str | re.Pattern[str],
    message: str,
    *,
    name: str | None = None,
    trim: bool = False,
    ignore_case: bool = False,
    search: bool = False,
) -> Rule:
    """Format rule backed by a regular expression.

    Args:
        regex: Pattern source or compiled pattern
        message: Message reported on mismatch
        name: Rule name (defaults to "pattern_<source>")
        trim: Strip surrounding whitespace before matching
        ignore_case: Match case-insensitively
        search: Match anywhere in the value instead of from the start
    """
    flags = re.IGNORECASE if ignore_case else 0
    compiled = compile_pattern(regex.pattern if isinstance(regex, re.Pattern) else regex, flags)
    match = compiled.search if search else compiled.match

    def validator(value: str) -> bool:
        if not value:
            return True
        candidate = value.strip() if trim else value
        return match(candidate) is not None

    return Rule(
        name=name or f"pattern_{compiled.pattern}",
        message=message,
        validator=validator,
    )


def any_pattern(
    patterns: list[str],
    message: str,
    *,
    name: str,
    trim: bool = False,
    ignore_case: bool = False,
) -> Rule:
    """Format rule that passes when any of several patterns matches."""
    flags = re.IGNORECASE if ignore_case else 0
    compiled = [compile_pattern(p, flags) for p in patterns]

    def validator(value: str) -> bool:
        if not value:
            return True
        candidate = value.strip() if trim else value
        return any(p.match(candidate) for p in compiled)

    return Rule(name=name, message=message, validator=validator)


def equals(other: Callable[[], str] | str, message: str, *, name: str = "matches") -> Rule:
    """Value must equal another value, read lazily when given a callable."""

    def validator(value: str) -> bool:
        if not value:
            return True
        expected = other() if callable(other) else other
        return value == expected

    return Rule(name=name, message=message, validator=validator)


def digit_count(minimum: int, maximum: int, message: str, *, name: str = "digitCount") -> Rule:
    """Number of digits in the value must fall within [minimum, maximum]."""

    def validator(value: str) -> bool:
        if not value:
            return True
        digits = re.sub(r"\D", "", value, flags=re.ASCII)
        return minimum <= len(digits) <= maximum

    return Rule(name=name, message=message, validator=validator)


def custom(name: str, message: str, validator: Callable[[str], bool]) -> Rule:
    return Rule(name=name, message=message, validator=validator)
