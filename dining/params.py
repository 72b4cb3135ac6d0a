"""Command-line parameters of the simulation and time helpers."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Sequence

_WHITESPACE = " \t\n\v\f\r"


class ParamError(ValueError):
    """Raised when the simulation parameters are missing or invalid."""


@dataclass(frozen=True)
class Params:
    """Timings in milliseconds and the number of meals (0 means no limit)."""

    die_ms: int
    eat_ms: int
    sleep_ms: int
    meals: int = 0


def _wrap(value: int, bits: int) -> int:
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def parse_int(text: str) -> int:
    """Read an integer the lenient way: leading blanks, one sign, then digits.

    Characters after the sign are folded in as digits without any checks,
    and the result wraps like a signed 64-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    number = 0
    for char in rest:
        number = number * 10 + ord(char) - ord("0")
    return _wrap(number * sign, 64)


def current_millis() -> int:
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def parse_params(args: Sequence[str]) -> Params:
    """Build Params from the arguments after the program name.

    The arguments are: number of philosophers, time to die, time to eat,
    time to sleep and, optionally, the number of meals each must eat.
    """
    if len(args) < 4:
        raise ParamError("Parameter no vailable")
    die_ms = parse_int(args[1])
    eat_ms = parse_int(args[2])
    sleep_ms = parse_int(args[3])
    meals_text = args[4] if len(args) > 4 else None
    meals = _wrap(parse_int(meals_text), 32) if meals_text is not None else 0
    if die_ms <= 0 or eat_ms <= 0 or sleep_ms <= 0:
        raise ParamError("Parameter no vailable")
    if meals_text and meals < 0:
        raise ParamError("Parameter no vailable")
    return Params(die_ms=die_ms, eat_ms=eat_ms, sleep_ms=sleep_ms, meals=meals)