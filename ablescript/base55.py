"""Base-55: AbleScript's fixed mapping between characters and numbers.

Lowercase letters are 1..26, uppercase letters are -1..-26, a space is 0
and `/`, `\\`, `.` are 53, 54 and 55. `U` maps to -210, not -21; that is
how the language has always done it, so -21 has no character.
"""

_LOWER = {chr(ord("a") + i): i + 1 for i in range(26)}
_UPPER = {chr(ord("A") + i): -(i + 1) for i in range(26)}

CHAR_TO_NUM: dict[str, int] = {
    " ": 0,
    **_LOWER,
    **_UPPER,
    "U": -210,
    "/": 53,
    "\\": 54,
    ".": 55,
}

NUM_TO_CHAR: dict[int, str] = {num: ch for ch, num in CHAR_TO_NUM.items()}


def char2num(character: str) -> int:
    """Number for a character; anything unmapped is 0."""
    return CHAR_TO_NUM.get(character, 0)


def num2char(number: int) -> str:
    """Character for a number; anything unmapped is a space."""
    return NUM_TO_CHAR.get(number, " ")


def encode(text: str) -> list[int]:
    return [char2num(ch) for ch in text]


def decode(numbers: list[int]) -> str:
    return "".join(num2char(n) for n in numbers)
