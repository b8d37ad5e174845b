"""A small printf supporting %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

from .numbers import format_int

_UINT_MASK = 0xFFFFFFFF


def _as_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - 2**32 if value >= 2**31 else value


def format_unsigned(value: int) -> str:
    """Return ``value`` as an unsigned 32-bit decimal string."""
    return str(value & _UINT_MASK)


def format_hex(value: int, specifier: str) -> str:
    """Return ``value`` as unsigned 32-bit hex; ``specifier`` 'x' is lower case, 'X' upper."""
    if specifier not in ("x", "X"):
        raise ValueError(f"hex specifier must be 'x' or 'X', not {specifier!r}")
    return format(value & _UINT_MASK, specifier)


def format_pointer(address: int | None) -> str:
    """Return an address as ``0x`` followed by lower-case hex, or ``(nil)`` for none."""
    if not address:
        return "(nil)"
    return f"0x{address:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdiuxXp":
        return "%" + spec
    try:
        arg = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        if isinstance(arg, str):
            if len(arg) != 1:
                raise TypeError("%c requires a single character")
            return arg
        return chr(arg & 0xFF)
    if spec == "s":
        return "(null)" if arg is None else str(arg)
    if spec in ("d", "i"):
        return format_int(_as_int32(arg))
    if spec == "u":
        return format_unsigned(arg)
    if spec in ("x", "X"):
        return format_hex(arg, spec)
    return format_pointer(arg)


def format_printf(template: str, *args: Any) -> str:
    """Expand the conversions in ``template`` with ``args`` and return the text.

    An unknown conversion is kept literally; a lone ``%`` at the end raises ValueError.
    """
    values = iter(args)
    pieces: list[str] = []
    start = 0
    while (cursor := template.find("%", start)) >= 0:
        pieces.append(template[start:cursor])
        spec = template[cursor + 1:cursor + 2]
        if not spec:
            raise ValueError("incomplete conversion at end of template")
        pieces.append(_convert(spec, values))
        start = cursor + 2
    pieces.append(template[start:])
    return "".join(pieces)


def printf(template: str, *args: Any) -> int:
    """Write the expanded template to standard output and return its length."""
    text = format_printf(template, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)