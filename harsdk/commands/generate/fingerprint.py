"""Name-insensitive structural fingerprint of a type definition.

Two definitions inferred from different endpoints usually carry different
generated names even when their shapes coincide (``{id: number, name:
string}`` returned by both ``/users`` and ``/teams``).  The fingerprint
ignores those names so the registry can collapse such definitions into one.

The hash is a 32-bit ``h * 31 + c`` rolling hash rendered in base 36.
Collisions are accepted as "same type"; there is no secondary comparison.
"""

from __future__ import annotations

import re

_WHITESPACE = re.compile(r"\s+")
_DECLARATION = re.compile(r"\b(interface|type)\s+(\w+)")
_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def declared_names(definition: str) -> list[str]:
    """Names declared by *definition* (root first, then auxiliaries), deduplicated."""
    return list(dict.fromkeys(name for _, name in _DECLARATION.findall(definition)))


def normalize_definition(definition: str) -> str:
    """Return the canonical text that ``fingerprint`` hashes.

    Whitespace runs collapse to one space.  Every name declared in the text
    (root and auxiliary interfaces, type aliases) is first replaced by a
    positional placeholder wherever it is referenced, then erased from its
    declaration, so ``interface Foo { bar: FooBar; }`` and
    ``interface Baz { bar: BazBar; }`` normalize identically when ``FooBar``
    and ``BazBar`` are declared in the same text with the same shape.
    """
    text = _WHITESPACE.sub(" ", definition).strip()
    for index, name in enumerate(declared_names(text)):
        text = re.sub(rf"\b{re.escape(name)}\b", f"#{index}", text)
    return re.sub(r"\b(interface|type) #\d+ ?", r"\1 ", text)


def fingerprint(definition: str) -> str:
    """Structural hash token of *definition*, insensitive to declared names."""
    h = 0
    for char in normalize_definition(definition):
        h = (h * 31 + ord(char)) & 0xFFFFFFFF
    if h & 0x80000000:
        h -= 0x100000000
    return _to_base36(h)


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    value = abs(value)
    digits: list[str] = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36_DIGITS[rem])
    return sign + "".join(reversed(digits))
