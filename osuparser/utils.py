"""
Classes and functions that provide general utility.
"""
import math
import re

from typing import Any, TypeVar

__all__ = [
    "LenientInt",
    "clamp",
    "is_nan",
    "or_default",
    "parse_int",
    "parse_float",
    "remove_whitespace",
]

T = TypeVar("T")
LenientInt = int | float
"""An integer, or ``math.nan`` when the token it came from was not numeric."""

INT_REGEX = re.compile(r"^\s*([+-]?\d+)")
FLOAT_REGEX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?Infinity)")
STRICT_INT_REGEX = re.compile(r"\s*[+-]?\d+\s*")
STRICT_FLOAT_REGEX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*")


def clamp(value: T, low_bound: T | None = None, high_bound: T | None = None) -> T:
    """
    Clamp a value to a range.

    If a bound is set to `None`, then the value will not be clamped on that side.

    :param value: The value to clamp.
    :param low_bound: The lower value to clamp to. If `None`, the low side is unbounded.
    :param high_bound: The higher value to clamp to. If `None`, the high side is unbounded.
    :returns: The clamped value.
    """
    if low_bound is not None and high_bound is not None and low_bound > high_bound:
        raise ValueError("low bound cannot be larger than high bound")
    if low_bound is not None and value < low_bound:
        return low_bound
    if high_bound is not None and value > high_bound:
        return high_bound
    return value


def is_nan(value: Any) -> bool:
    """Check whether a value is the float not-a-number sentinel."""
    return isinstance(value, float) and math.isnan(value)


def or_default(value: Any, default: T) -> Any | T:
    """
    Return ``value``, or ``default`` if ``value`` is falsy.

    NaN counts as falsy here, so a malformed number and an explicit zero both end up as the default.
    """
    if value is None or is_nan(value) or not value:
        return default
    return value


def parse_int(s: str | None, *, strict: bool = False) -> LenientInt:
    """
    Parse the leading base-10 integer of a string.

    Leading whitespace is skipped and anything after the digits is ignored, so ``"12px"`` and ``"3.5"`` give 12
    and 3 respectively.

    :param s: The token to parse. `None` is treated like an empty token.
    :param strict: If set, the whole token must be an integer, and a malformed token raises instead of
        producing NaN.
    :returns: The parsed integer, or ``math.nan`` if the token has no leading integer.
    :raises ValueError: if ``strict`` is set and the token is not an integer.
    """
    if strict:
        if s is None or STRICT_INT_REGEX.fullmatch(s) is None:
            raise ValueError(f"expected an integer (got {s!r})")
        return int(s)

    match = INT_REGEX.match(s or "")
    if match is None:
        return math.nan
    return int(match.group(1))


def parse_float(s: str | None, *, strict: bool = False) -> float:
    """
    Parse the leading decimal number of a string.

    :param s: The token to parse. `None` is treated like an empty token.
    :param strict: If set, the whole token must be a number, and a malformed token raises instead of
        producing NaN.
    :returns: The parsed number, or ``math.nan`` if the token has no leading number.
    :raises ValueError: if ``strict`` is set and the token is not a number.
    """
    if strict:
        if s is None or STRICT_FLOAT_REGEX.fullmatch(s) is None:
            raise ValueError(f"expected a number (got {s!r})")
        return float(s)

    match = FLOAT_REGEX.match(s or "")
    if match is None:
        return math.nan
    return float(match.group(1).replace("Infinity", "inf"))


def remove_whitespace(s: str) -> str:
    """Remove every whitespace character from a string."""
    return "".join(s.split())
