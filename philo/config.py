"""Command-line settings for the dining philosophers simulation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32


class ConfigError(ValueError):
    """Raised when the simulation arguments are missing or out of range."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds."""

    philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat: int | None = None


def parse_int(text: str) -> int:
    """Read a leading integer the lenient way: skip blanks, one sign, digits.

    Anything after the digits is ignored and text without digits reads as 0.
    The value wraps around like a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    value = sign * int("".join(digits) or "0")
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def parse_args(args: Sequence[str]) -> Settings:
    """Build settings from the four or five positional arguments.

    The arguments are: number of philosophers, time to die, time to eat,
    time to sleep and, optionally, how many times each must eat.
    """
    if len(args) not in (4, 5):
        raise ConfigError("Invalid arguments")
    philosophers, time_to_die, time_to_eat, time_to_sleep = (
        parse_int(arg) for arg in args[:4]
    )
    must_eat = parse_int(args[4]) if len(args) == 5 else None
    if min(philosophers, time_to_die, time_to_eat, time_to_sleep) < 1:
        raise ConfigError("Invalid arguments")
    if must_eat is not None and must_eat < 1:
        raise ConfigError("Invalid arguments")
    return Settings(philosophers, time_to_die, time_to_eat, time_to_sleep, must_eat)