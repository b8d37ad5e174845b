"""Number parsing and formatting with 32-bit integer semantics."""

from __future__ import annotations

from collections.abc import Sequence

from .textutils import is_space

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


class IntRangeError(OverflowError):
    """A parsed integer does not fit in 32 bits; ``value`` holds the clamped result."""

    def __init__(self, text: str, value: int) -> None:
        super().__init__(f"integer out of range: {text!r}")
        self.text = text
        self.value = value


class DecimalFormatError(ValueError):
    """A decimal string is malformed; ``value`` holds what was parsed before the error."""

    def __init__(self, text: str, value: float) -> None:
        super().__init__(f"malformed decimal: {text!r}")
        self.text = text
        self.value = value


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def _leading_digits(text: str) -> str:
    end = 0
    for char in text:
        if not "0" <= char <= "9":
            break
        end += 1
    return text[:end]


def _split_sign(text: str) -> tuple[int, str]:
    if text[:1] in ("-", "+"):
        return (-1 if text[0] == "-" else 1), text[1:]
    return 1, text


def _lstrip_space(text: str) -> str:
    start = 0
    for char in text:
        if not is_space(char):
            break
        start += 1
    return text[start:]


def parse_int(text: str) -> int:
    """Parse a leading integer, skipping whitespace; wraps like a 32-bit int.

    Anything after the digits is ignored; no digits yields 0.
    """
    sign, rest = _split_sign(_lstrip_space(text))
    digits = _leading_digits(rest)
    magnitude = _wrap32(int(digits)) if digits else 0
    return _wrap32(magnitude * sign)


def parse_int_bounded(text: str) -> int:
    """Parse a leading integer after plain spaces, rejecting values outside 32 bits.

    Raises IntRangeError, whose ``value`` is INT_MAX or INT_MIN, on overflow.
    """
    sign, rest = _split_sign(text.lstrip(" "))
    digits = _leading_digits(rest)
    magnitude = int(digits) if digits else 0
    limit = INT_MAX if sign == 1 else -INT_MIN
    if magnitude > limit:
        raise IntRangeError(text, INT_MAX if sign == 1 else INT_MIN)
    return magnitude * sign


def parse_decimal(text: str) -> float:
    """Parse a decimal number of the form ``[ws][sign]digits[.digits][ws...]``.

    A string that holds only an integer part is returned without its sign.
    Raises DecimalFormatError when the text does not match the form.
    """
    sign, rest = _split_sign(_lstrip_space(text))
    digits = _leading_digits(rest)
    result = 0.0
    for char in digits:
        result = result * 10 + (ord(char) - ord("0"))
    rest = rest[len(digits):]
    if not rest:
        return result
    if rest[0] != ".":
        raise DecimalFormatError(text, result)
    rest = rest[1:]
    fraction = 0.0
    place = 0.1
    fraction_digits = _leading_digits(rest)
    for char in fraction_digits:
        fraction += (ord(char) - ord("0")) * place
        place *= 0.1
    rest = rest[len(fraction_digits):]
    if rest and not is_space(rest[0]):
        raise DecimalFormatError(text, result)
    return sign * (result + fraction)


def format_int(value: int) -> str:
    """Return the decimal representation of ``value``."""
    return str(int(value))


def mod(a: int, b: int) -> int:
    """Return the remainder of ``a / b`` carrying the sign of ``b``."""
    return a % b


def lerp(target: float, old: Sequence[float], new: Sequence[float]) -> float:
    """Map ``target`` linearly from the range ``old`` onto the range ``new``."""
    old_low, old_high = old
    new_low, new_high = new
    return (new_high - new_low) * ((target - old_low) / (old_high - old_low)) + new_low