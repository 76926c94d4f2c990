# This project was developed with assistance from AI tools.
"""Input coercion for raw form values.

Pure functions that turn the loosely-typed strings posted by the application
form into typed optional values. None of them raise: anything that cannot be
parsed comes back as None and the field is simply absent downstream.
"""

import enum
import re
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

_NON_NUMERIC = re.compile(r"[^0-9.\-]")
_NON_DIGIT = re.compile(r"\D")
_CENTS = Decimal("0.01")

_DATE_FORMATS = ("%Y-%m-%d", "%m/%d/%Y", "%m-%d-%Y", "%B %d, %Y", "%b %d, %Y")

# Literal placeholders the browser form posts for unset inputs.
_EMPTY_MARKERS = frozenset({"null", "undefined"})

_TRUTHY = frozenset({"true", "t", "yes", "y", "1", "on", "checked"})
_FALSY = frozenset({"false", "f", "no", "n", "0", "off", "unchecked"})


class TriState(str, enum.Enum):
    """A yes/no answer that may not have been given at all."""

    UNKNOWN = "unknown"
    TRUE = "true"
    FALSE = "false"

    def as_bool(self) -> bool | None:
        if self is TriState.UNKNOWN:
            return None
        return self is TriState.TRUE

    def or_false(self) -> bool:
        return self is TriState.TRUE


def to_null_if_empty(value) -> str | None:
    """Trimmed string, or None for missing / blank input."""
    if value is None:
        return None
    text = value if isinstance(value, str) else str(value)
    text = text.strip()
    if not text or text.lower() in _EMPTY_MARKERS:
        return None
    return text


def to_decimal(value) -> Decimal | None:
    """Parse a money amount, e.g. ``"$1,200.50"`` -> ``Decimal("1200.50")``."""
    text = to_null_if_empty(value)
    if text is None:
        return None
    cleaned = _NON_NUMERIC.sub("", text)
    if not cleaned:
        return None
    try:
        amount = Decimal(cleaned)
        if not amount.is_finite():
            return None
        return amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return None


def to_int(value) -> int | None:
    """Parse a whole number; fractional parts are truncated."""
    text = to_null_if_empty(value)
    if text is None:
        return None
    cleaned = _NON_NUMERIC.sub("", text)
    if not cleaned:
        return None
    try:
        number = Decimal(cleaned)
    except InvalidOperation:
        return None
    if not number.is_finite():
        return None
    return int(number)


def to_tri_state(value) -> TriState:
    text = to_null_if_empty(value)
    if text is None:
        return TriState.UNKNOWN
    lowered = text.lower()
    if lowered in _TRUTHY:
        return TriState.TRUE
    if lowered in _FALSY:
        return TriState.FALSE
    return TriState.UNKNOWN


def to_tri_state_bool(value) -> bool | None:
    return to_tri_state(value).as_bool()


def safe_date(value) -> date | None:
    """Parse a date in any of the formats the form has historically sent."""
    text = to_null_if_empty(value)
    if text is None:
        return None
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def last4(value) -> str | None:
    """Last four digits of an SSN or account number. Fewer than 4 digits -> None."""
    text = to_null_if_empty(value)
    if text is None:
        return None
    digits = _NON_DIGIT.sub("", text)
    if len(digits) < 4:
        return None
    return digits[-4:]


def parse_age_list(value) -> list[int]:
    """``"4, 7,x, 12"`` -> ``[4, 7, 12]``. Negative ages are dropped."""
    text = to_null_if_empty(value)
    if text is None:
        return []
    ages = []
    for part in text.split(","):
        age = to_int(part)
        if age is not None and age >= 0:
            ages.append(age)
    return ages
