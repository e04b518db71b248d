"""Variable bindings and scoped storage for AbleScript."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from .types import Value, able_nul


@dataclass
class ValueCell:
    """Mutable storage for one Value. Several Variables may share a cell."""
    value: Value = field(default_factory=able_nul)


@dataclass
class Variable:
    """A named binding: a local melo (cursed) flag over possibly shared storage.

    Writing through `value` mutates the cell, so every alias sees the change.
    The melo flag belongs to this binding only.
    """
    cell: ValueCell = field(default_factory=ValueCell)
    melo: bool = False

    @classmethod
    def new(cls, value: Value) -> Variable:
        """Bind over freshly allocated storage."""
        return cls(cell=ValueCell(value))

    @classmethod
    def alias(cls, other: Variable) -> Variable:
        """Bind over the storage of an existing binding (pass-by-reference)."""
        return cls(cell=other.cell)

    @property
    def value(self) -> Value:
        return self.cell.value

    @value.setter
    def value(self, value: Value):
        self.cell.value = value

    def shares_storage(self, other: Variable) -> bool:
        return self.cell is other.cell


class Environment:
    """Scoped variable storage."""

    def __init__(self, parent: Optional[Environment] = None):
        self.parent = parent
        self.variables: dict[str, Variable] = {}

    def child(self) -> Environment:
        return Environment(parent=self)

    def define(self, name: str, variable: Variable):
        self.variables[name] = variable

    def get(self, name: str) -> Optional[Variable]:
        if name in self.variables:
            return self.variables[name]
        if self.parent:
            return self.parent.get(name)
        return None

    def set_value(self, name: str, value: Value) -> bool:
        """Write through the nearest binding called `name`."""
        variable = self.get(name)
        if variable is None:
            return False
        variable.value = value
        return True

    def has(self, name: str) -> bool:
        return self.get(name) is not None

    def has_local(self, name: str) -> bool:
        return name in self.variables

