"""Command line entry: build stack a from the arguments and print both stacks."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .stacks import PushSwapError, StackPair

_WHITESPACE = " \t\n\v\f\r"
_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1


def atoi(text: str) -> int:
    """Parse a leading integer the way C ``atoi`` does; 0 if there is none.

    Out-of-range values saturate to a 64-bit long and are then narrowed
    to a 32-bit int.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not ("0" <= char <= "9"):
            break
        digits.append(char)
    if not digits:
        return 0
    value = sign * int("".join(digits))
    value = max(_LONG_MIN, min(_LONG_MAX, value))
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def format_stack(label: str, values: Iterable[int]) -> str:
    """Render one stack line, each value followed by a space."""
    return f"Stack {label}: " + "".join(f"{value} " for value in values)


def main(argv: Sequence[str] | None = None) -> int:
    """Load the arguments into stack a and print both stacks."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        pair = StackPair((atoi(arg) for arg in args), [])
    except PushSwapError:
        sys.stderr.write("Error\n")
        return 1
    print(format_stack("A", pair.a))
    print(format_stack("B", pair.b))
    return 0


if __name__ == "__main__":
    sys.exit(main())