#
# Varinspect - Properties Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import collections
import functools
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from varinspect.properties import (
    PropertyDescriptor,
    Unreadable,
    ValueKind,
    classify,
    function_length,
    function_name,
    own_properties,
    prototype_of,
)
from varinspect.sentinels import UNDEFINED


# Local Classes & Methods ----------------------------------------------------------------------------------------------

class Plain:
    def __init__(self):
        self.public = 1
        self._private = 2


class WithProperty:
    @property
    def value(self):
        raise AssertionError("getter called")

    @value.setter
    def value(self, v):
        raise AssertionError("setter called")


class Base:
    __slots__ = ("a",)


class Child(Base):
    __slots__ = ("__hidden", "b")

    def __init__(self):
        self.a = 1
        self.__hidden = 2


@dataclass(frozen=True)
class Frozen:
    a: int = 1


def named(a, b=1, *args, c, **kwargs):
    pass


# Tests ----------------------------------------------------------------------------------------------------------------

class TestClassify:
    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(UNDEFINED, ValueKind.UNDEFINED, id="undefined"),
            pytest.param(None, ValueKind.NULL, id="none"),
            pytest.param(False, ValueKind.BOOLEAN, id="bool"),
            pytest.param(0, ValueKind.NUMBER, id="int"),
            pytest.param(Decimal("1"), ValueKind.NUMBER, id="decimal"),
            pytest.param("", ValueKind.STRING, id="str"),
            pytest.param(b"", ValueKind.BLOB, id="bytes"),
            pytest.param(memoryview(b""), ValueKind.BLOB, id="memoryview"),
            pytest.param(len, ValueKind.FUNCTION, id="builtin"),
            pytest.param(named, ValueKind.FUNCTION, id="function"),
            pytest.param(Plain, ValueKind.FUNCTION, id="class"),
            pytest.param(Plain().__init__, ValueKind.FUNCTION, id="method"),
            pytest.param(functools.partial(named, 1), ValueKind.FUNCTION, id="partial"),
            pytest.param([], ValueKind.ARRAY, id="list"),
            pytest.param((), ValueKind.ARRAY, id="tuple"),
            pytest.param(range(3), ValueKind.ARRAY, id="range"),
            pytest.param(collections.deque(), ValueKind.ARRAY, id="deque"),
            pytest.param(frozenset(), ValueKind.ARRAY, id="frozenset"),
            pytest.param({}, ValueKind.OBJECT, id="dict"),
            pytest.param(Plain(), ValueKind.OBJECT, id="instance"),
        ],
    )
    def test_classify(self, value, expected):
        assert classify(value) is expected


class TestFunctionInfo:
    def test_length_excludes_var_params(self):
        assert function_length(named) == 3

    def test_length_bound_method(self):
        assert function_length(Plain().__init__) == 0

    def test_length_no_signature(self):
        """Callables without signature report 0."""

        class NoSig:
            __signature__ = "broken"

        assert function_length(NoSig) == 0

    @pytest.mark.parametrize(
        "func, expected",
        [
            pytest.param(named, "named", id="function"),
            pytest.param(lambda: None, None, id="lambda"),
            pytest.param(Plain, "Plain", id="class"),
            pytest.param(functools.partial(named, 1), "named", id="partial"),
        ],
    )
    def test_name(self, func, expected):
        assert function_name(func) == expected


class TestOwnProperties:
    def test_dict(self):
        props = own_properties({"a": 1, 2: "b"})
        assert [name for name, _ in props] == ["a", "2"]
        assert props[0][1] == PropertyDescriptor(value=1)

    def test_read_only_mapping(self):
        """Immutable mappings yield non-configurable, read-only items."""
        (name, desc), = own_properties(MappingProxyType({"a": 1}))
        assert name == "a"
        assert desc.configurable is False
        assert desc.writable is False
        assert desc.enumerable is True

    def test_list(self):
        props = own_properties(["x", "y"])
        assert [(name, d.value) for name, d in props] == [("0", "x"), ("1", "y")]
        assert all(d.writable and d.configurable for _, d in props)

    def test_limit(self):
        assert len(own_properties(range(10 ** 9), limit=1)) == 1

    def test_instance(self):
        props = dict(own_properties(Plain()))
        assert props["public"].enumerable is True
        assert props["_private"].enumerable is False

    def test_frozen_dataclass(self):
        (_, desc), = own_properties(Frozen())
        assert desc.writable is False
        assert desc.configurable is False

    def test_slots_along_mro(self):
        """Set slots are listed with mangled private names, unset ones skipped."""
        props = dict(own_properties(Child()))
        assert props["a"].value == 1
        assert props["_Child__hidden"].value == 2
        assert "b" not in props

    def test_class_accessor(self):
        """Class properties become accessors that reference, never call, get/set."""
        props = dict(own_properties(WithProperty))
        desc = props["value"]
        assert desc.accessor is True
        assert desc.value is UNDEFINED
        assert desc.get is WithProperty.value.fget
        assert desc.set is WithProperty.value.fset

    def test_class_dunder_not_enumerable(self):
        props = dict(own_properties(WithProperty))
        assert props["__module__"].enumerable is False
        assert props["__dict__"].accessor is True

    def test_class_slot_accessor(self):
        """Slot members reference the member descriptor itself as get and set."""
        member = vars(Base)["a"]
        desc = dict(own_properties(Base))["a"]
        assert desc.accessor is True
        assert desc.get is member
        assert desc.set is member

    def test_dict_property_not_invoked(self):
        """A user-defined __dict__ attribute is never run."""
        calls = []

        class Shadowed:
            @property
            def __dict__(self):
                calls.append(1)
                return {"fake": 1}

        assert own_properties(Shadowed()) == []
        assert calls == []

    def test_builtin_class_immutable(self):
        props = dict(own_properties(int))
        assert props["__add__"].configurable is False
        assert props["__add__"].writable is False

    def test_unreadable_item(self):
        class Flaky(dict):
            def __getitem__(self, key):
                raise LookupError(key)

        (name, desc), = own_properties(Flaky(a=1))
        assert name == "a"
        assert isinstance(desc.value, Unreadable)
        assert isinstance(desc.value.error, LookupError)

    def test_empty(self):
        assert own_properties(object()) == []
        assert own_properties(named) == []


class TestPrototypeOf:
    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(1, int, id="int"),
            pytest.param(Plain(), Plain, id="instance"),
            pytest.param(bool, int, id="class"),
            pytest.param(Child, Base, id="subclass"),
            pytest.param(object, None, id="object"),
        ],
    )
    def test_prototype(self, value, expected):
        assert prototype_of(value) is expected
