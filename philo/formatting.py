"""A small printf-style formatter supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

_INT_BITS = 32
_UINT_MASK = (1 << _INT_BITS) - 1
_POINTER_MASK = (1 << 64) - 1
_NULL_STRING = "(null)"
_NULL_POINTER = "0x0"


def _as_int(value: Any, spec: str) -> int:
    if isinstance(value, int):
        return value
    raise TypeError(f"%{spec} needs an integer, not {type(value).__name__}")


def _signed(value: int) -> int:
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def _char(value: Any) -> str:
    if isinstance(value, str) and len(value) == 1:
        return value
    if isinstance(value, int):
        return chr(value & 0xFF)
    raise TypeError("%c needs a single character or an integer")


def _string(value: Any) -> str:
    if value is None:
        return _NULL_STRING
    if isinstance(value, str):
        return value
    raise TypeError(f"%s needs a string, not {type(value).__name__}")


def _pointer(value: Any) -> str:
    if value is None:
        return _NULL_POINTER
    address = value if isinstance(value, int) else id(value)
    address &= _POINTER_MASK
    if address == 0:
        return _NULL_POINTER
    return "0x" + format(address, "x")


def _decimal(value: Any) -> str:
    return str(_signed(_as_int(value, "d")))


def _unsigned(value: Any) -> str:
    return str(_as_int(value, "u") & _UINT_MASK)


def _hex_lower(value: Any) -> str:
    return format(_as_int(value, "x") & _UINT_MASK, "x")


def _hex_upper(value: Any) -> str:
    return format(_as_int(value, "X") & _UINT_MASK, "X")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _decimal,
    "i": _decimal,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def _render(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    values = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            yield char
            continue
        spec = next(chars, None)
        if spec is None:
            return
        if spec == "%":
            yield "%"
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            # Unknown conversions are dropped silently and take no argument.
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(f"missing argument for %{spec}") from None
        yield convert(value)


def format_string(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the resulting text."""
    return "".join(_render(fmt, args))


def print_formatted(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (stdout by default); return its length."""
    text = format_string(fmt, *args)
    (file if file is not None else sys.stdout).write(text)
    return len(text)