"""Tests for AbleScript variable bindings and environments."""
import pytest
from ablescript.variables import Variable, ValueCell, Environment
from ablescript.types import able_int, able_str, able_nul


class TestVariable:
    def test_creation(self):
        v = Variable.new(able_int(42))
        assert v.value == able_int(42)
        assert v.melo is False

    def test_default_storage_is_nul(self):
        assert Variable().value == able_nul()

    def test_write(self):
        v = Variable.new(able_int(1))
        v.value = able_str("two")
        assert v.value == able_str("two")

    def test_fresh_bindings_do_not_share(self):
        a = Variable.new(able_int(1))
        b = Variable.new(able_int(1))
        a.value = able_int(2)
        assert b.value == able_int(1)
        assert not a.shares_storage(b)


class TestAliasing:
    def test_write_visible_through_alias(self):
        a = Variable.new(able_int(1))
        b = Variable.alias(a)
        b.value = able_int(99)
        assert a.value == able_int(99)
        a.value = able_str("back")
        assert b.value == able_str("back")

    def test_alias_shares_cell(self):
        a = Variable.new(able_int(1))
        b = Variable.alias(a)
        assert a.shares_storage(b)
        assert a.cell is b.cell

    def test_melo_is_not_shared(self):
        a = Variable.new(able_int(1))
        b = Variable.alias(a)
        a.melo = True
        assert a.melo is True
        assert b.melo is False

    def test_alias_of_cursed_binding_starts_clean(self):
        a = Variable.new(able_int(1))
        a.melo = True
        assert Variable.alias(a).melo is False

    def test_alias_chain(self):
        a = Variable.new(able_int(1))
        c = Variable.alias(Variable.alias(a))
        c.value = able_int(3)
        assert a.value == able_int(3)

    def test_explicit_cell(self):
        cell = ValueCell(able_int(7))
        a = Variable(cell=cell)
        b = Variable(cell=cell, melo=True)
        cell.value = able_int(8)
        assert a.value == b.value == able_int(8)
        assert a.melo is False


class TestEnvironment:
    def test_define_and_get(self):
        env = Environment()
        env.define("x", Variable.new(able_int(1)))
        assert env.get("x").value == able_int(1)
        assert env.get("y") is None

    def test_child_sees_parent(self):
        env = Environment()
        env.define("x", Variable.new(able_int(1)))
        child = env.child()
        assert child.has("x")
        assert not child.has_local("x")

    def test_shadowing(self):
        env = Environment()
        env.define("x", Variable.new(able_int(1)))
        child = env.child()
        child.define("x", Variable.new(able_int(2)))
        assert child.get("x").value == able_int(2)
        assert env.get("x").value == able_int(1)

    def test_set_value_writes_nearest(self):
        env = Environment()
        env.define("x", Variable.new(able_int(1)))
        child = env.child()
        assert child.set_value("x", able_int(5)) is True
        assert env.get("x").value == able_int(5)
        assert child.set_value("missing", able_int(0)) is False

    def test_pass_by_reference(self):
        caller = Environment()
        caller.define("arg", Variable.new(able_int(1)))
        callee = Environment(parent=caller)
        callee.define("param", Variable.alias(caller.get("arg")))
        callee.set_value("param", able_int(10))
        assert caller.get("arg").value == able_int(10)

    def test_storage_outlives_scope(self):
        inner = Environment()
        inner.define("x", Variable.new(able_int(1)))
        outer = Environment()
        outer.define("y", Variable.alias(inner.get("x")))
        del inner
        assert outer.get("y").value == able_int(1)

