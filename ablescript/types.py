"""Runtime value model for AbleScript."""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, BinaryIO, Union
import random
import re

from .errors import AbleError, ErrorKind

if TYPE_CHECKING:
    from .ast_nodes import Block


# Coercion result for nul and unparsable strings
ANSWER = 42

I32_MIN = -(2 ** 31)
I32_MAX = 2 ** 31 - 1

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def wrap_i32(value: int) -> int:
    """Wrap a Python int into the signed 32-bit range."""
    return (value - I32_MIN) % (2 ** 32) + I32_MIN


def parse_i32(text: str) -> int | None:
    """Parse a decimal 32-bit integer. No whitespace, optional sign."""
    if not _INT_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if value < I32_MIN or value > I32_MAX:
        return None
    return value


class Abool(Enum):
    """Tri-state boolean. SOMETIMES resolves anew on every coercion."""
    NEVER = -1
    SOMETIMES = 0
    ALWAYS = 1

    def __str__(self):
        return self.name.lower()

    def to_bool(self, rng: Any = random) -> bool:
        if self is Abool.NEVER:
            return False
        if self is Abool.ALWAYS:
            return True
        return bool(rng.getrandbits(1))


@dataclass
class BfFunctio:
    """Tape-machine subroutine: raw instructions plus tape size."""
    instructions: bytes = b""
    tape_len: int = 0


def _empty_block() -> Block:
    from .ast_nodes import Block
    return Block()


@dataclass
class AbleFunctio:
    """Native functio: parameter names plus a body block."""
    params: list[str] = field(default_factory=list)
    body: Block = field(default_factory=_empty_block)


Functio = Union[BfFunctio, AbleFunctio]


class ValueType(Enum):
    NUL = "Nul"
    STR = "Str"
    INT = "Int"
    BOOL = "Bool"
    ABOOL = "Abool"
    FUNCTIO = "Functio"


class Value:
    """Wraps a Python payload with its AbleScript variant."""

    __slots__ = ("value", "type")

    def __init__(self, value: Any, able_type: ValueType):
        self.value = value
        self.type = able_type

    def __repr__(self):
        if self.type == ValueType.NUL:
            return "Value(Nul)"
        return f"Value({self.type.value}: {self.value!r})"

    def __eq__(self, other):
        if not isinstance(other, Value):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    __hash__ = None

    def __str__(self):
        if self.type == ValueType.NUL:
            return "nul"
        if self.type == ValueType.STR:
            return self.value
        if self.type == ValueType.INT:
            return str(self.value)
        if self.type == ValueType.BOOL:
            return "true" if self.value else "false"
        if self.type == ValueType.ABOOL:
            return str(self.value)
        if self.type == ValueType.FUNCTIO:
            return _format_functio(self.value)
        raise TypeError(f"unknown value type {self.type!r}")

    # ============================================================
    # Coercion
    # ============================================================

    def into_i32(self) -> int:
        """Coerce to a signed 32-bit integer. Never fails."""
        if self.type == ValueType.ABOOL:
            return self.value.value
        if self.type == ValueType.BOOL:
            return int(self.value)
        if self.type == ValueType.FUNCTIO:
            func = self.value
            if isinstance(func, BfFunctio):
                return wrap_i32(len(func.instructions) + func.tape_len)
            return wrap_i32(len(func.params) + len(func.body.statements))
        if self.type == ValueType.INT:
            return self.value
        if self.type == ValueType.NUL:
            return ANSWER
        if self.type == ValueType.STR:
            parsed = parse_i32(self.value)
            return ANSWER if parsed is None else parsed
        raise TypeError(f"unknown value type {self.type!r}")

    def into_bool(self, rng: Any = random) -> bool:
        """
        Coerce to a boolean. Never fails.
        `rng` only matters for Abool SOMETIMES; anything with `getrandbits` will do.
        """
        if self.type == ValueType.ABOOL:
            return self.value.to_bool(rng)
        if self.type == ValueType.BOOL:
            return self.value
        if self.type == ValueType.FUNCTIO:
            return True
        if self.type == ValueType.INT:
            return self.value != 0
        if self.type == ValueType.NUL:
            return True
        if self.type == ValueType.STR:
            return self.value != ""
        raise TypeError(f"unknown value type {self.type!r}")

    def bf_write(self, stream: BinaryIO):
        """Feed this value to a tape-machine input stream as a single byte."""
        stream.write(bytes([self.into_i32() & 0xFF]))


def _format_functio(func: Functio) -> str:
    if isinstance(func, BfFunctio):
        try:
            source = func.instructions.decode("utf-8")
        except UnicodeDecodeError as e:
            raise AbleError(ErrorKind.INVALID_UTF8, detail=str(e)) from e
        return f"({func.tape_len}) {source}"
    params = ", ".join(func.params)
    return f"({params}) -> {func.body.statements!r}"


# ============================================================
# Constructors
# ============================================================

def able_nul() -> Value:
    return Value(None, ValueType.NUL)

def able_str(value: str) -> Value:
    return Value(value, ValueType.STR)

def able_int(value: int) -> Value:
    return Value(wrap_i32(value), ValueType.INT)

def able_bool(value: bool) -> Value:
    return Value(bool(value), ValueType.BOOL)

def able_abool(value: Abool) -> Value:
    return Value(value, ValueType.ABOOL)

def able_functio(value: Functio) -> Value:
    return Value(value, ValueType.FUNCTIO)
