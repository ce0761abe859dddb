"""Runtime values for Stellar.

Stellar literals map onto plain Python values wherever Python already has
a matching type: numbers are ``float``, strings are ``str`` and booleans
are ``bool``. Characters and ``null`` need their own marker types, since a
one-character ``str`` would otherwise be indistinguishable from a string
and Python's ``None`` is reserved for "declared but never initialized" in
the environment.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Union


@dataclass(frozen=True)
class CharVal:
    """A single character value, written ``'x'`` in source."""
    value: str

    def __str__(self) -> str:
        return self.value


class NullVal:
    """Marker object for the Stellar ``null`` value."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'null'


NULL = NullVal()

Value = Union[float, str, bool, CharVal, NullVal]


def type_name(value: Value) -> str:
    """Return the Stellar-visible name of a value's type."""
    # bool first: it is never a float, but keep the checks unambiguous
    if isinstance(value, bool):
        return 'bool'
    if isinstance(value, float):
        return 'number'
    if isinstance(value, str):
        return 'String'
    if isinstance(value, CharVal):
        return 'char'
    if isinstance(value, NullVal):
        return 'null'
    raise TypeError(f"not a Stellar value: {value!r}")


def format_number(x: float) -> str:
    """Shortest round-trip digits, always positional (no exponent)."""
    if not math.isfinite(x):
        return repr(x)
    if x == int(x):
        return str(int(x))
    return format(Decimal(repr(x)), 'f')


def to_string(value: Value) -> str:
    """Render a value the way ``print`` shows it."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, str):
        return value
    return str(value) if isinstance(value, CharVal) else 'null'


def is_truthy(value: Value) -> bool:
    """Coerce any value to a boolean.

    Numbers are truthy only when strictly positive, strings when
    non-empty and chars unless they are the digit ``'0'``. ``null`` is
    always falsy.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return value > 0.0
    if isinstance(value, str):
        return value != ''
    if isinstance(value, CharVal):
        return value.value != '0'
    return False
