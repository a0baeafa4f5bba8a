"""Number rounding and display helpers shared by chart outputs."""

from __future__ import annotations

import math
import re

DEFAULT_SIGNIFICANT_DIGITS = 3
MISSING_VALUE = "–"

_SUBSCRIPTS = str.maketrans("0123456789", "₀₁₂₃₄₅₆₇₈₉")
_SUPERSCRIPTS = str.maketrans("0123456789", "⁰¹²³⁴⁵⁶⁷⁸⁹")

_SUB_TAG = re.compile(r"<sub>(\d)</sub>")
_SUP_TAG = re.compile(r"<sup>(\d)</sup>")
_ANY_TAG = re.compile(r"<[^>]*>?")

_ENTITIES = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&deg;", "°"),
    ("&sup2;", "²"),
    ("&sup3;", "³"),
    ("&micro;", "µ"),
    ("&nbsp;", " "),
    ("&amp;", "&"),
)


def to_precision(value: float, significant_digits: int) -> float:
    """Round to a number of significant digits."""
    if value == 0 or not math.isfinite(value):
        return value
    return float(f"{value:.{significant_digits}g}")


def round_significant(
    value: float,
    significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS,
) -> float:
    """Round for display.

    Values below one keep ``significant_digits`` decimals, larger values
    keep ``significant_digits`` significant digits.
    """
    if abs(value) < 1:
        return round(value, significant_digits)
    return to_precision(value, significant_digits)


def _group_thousands(value: float) -> str:
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,}"


def beautify_value(
    value: float | None,
    significant_digits: int | None = None,
    fraction_digits: int | None = None,
) -> str:
    """Format a value for labels with thousands separators.

    ``fraction_digits`` overrides significant digits.
    """
    if value is None:
        return MISSING_VALUE
    if not value:
        return "0"

    if fraction_digits is not None:
        return _group_thousands(round(value, fraction_digits))

    digits = significant_digits or DEFAULT_SIGNIFICANT_DIGITS
    return _group_thousands(round_significant(value, digits))


def format_number(
    value: float | None,
    maximum_fraction_digits: int | None = None,
    significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS,
) -> str:
    """Format a number, rendering missing or non-finite values as a dash."""
    if value is None or not math.isfinite(value):
        return MISSING_VALUE
    if maximum_fraction_digits is not None:
        return _group_thousands(round(value, maximum_fraction_digits))
    return _group_thousands(to_precision(value, significant_digits))


def sanitize_html_unit(unit: str | None) -> str:
    """Turn an HTML unit string into plain text.

    Digit sub/sup tags become Unicode sub/superscripts, remaining tags are
    stripped and common entities decoded.
    """
    text = unit or ""

    text = _SUB_TAG.sub(lambda m: m.group(1).translate(_SUBSCRIPTS), text)
    text = _SUP_TAG.sub(lambda m: m.group(1).translate(_SUPERSCRIPTS), text)

    # Repeat until stable so stripped tags cannot re-form new ones
    previous_length = None
    while previous_length != len(text):
        previous_length = len(text)
        text = _ANY_TAG.sub("", text)

    for entity, replacement in _ENTITIES:
        text = text.replace(entity, replacement)
    return text
