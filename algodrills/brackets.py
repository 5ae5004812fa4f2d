"""Checking that brackets in a text are balanced."""

from __future__ import annotations

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def check_brackets(text: str) -> int | None:
    """Return ``None`` if the brackets in ``text`` balance, else a one-based error position.

    The position is that of the first closing bracket with no matching
    opener, or, failing that, of the last opening bracket left unclosed.
    Characters other than ``()[]{}`` are ignored.
    """
    stack: list[tuple[str, int]] = []
    for position, char in enumerate(text, start=1):
        if char in _OPENERS:
            stack.append((char, position))
        elif char in _PAIRS:
            if not stack:
                return position
            opener, _ = stack.pop()
            if opener != _PAIRS[char]:
                return position
    if stack:
        return stack[-1][1]
    return None