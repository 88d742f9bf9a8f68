"""
Own-property model of arbitrary Python values.

The inspector walks values through a small, uniform view: a value has an
ordered list of named own properties, each with a descriptor telling whether
it is writable, configurable, enumerable or an accessor (getter/setter), and
a prototype. This module maps Python containers, classes and instances onto
that view.

Reading a property never runs user getters: accessor descriptors only carry
references to their get/set callables.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
import dataclasses
import functools
import inspect
import numbers

from dataclasses import dataclass
from enum import Enum, unique
from itertools import islice
from typing import Any, Iterator

# Local ----------------------------------------------------------------------------------------------------------------
from .blobs import is_blob
from .sentinels import UNDEFINED

# CPython sets this type flag on builtin and extension types whose attributes cannot be reassigned
_TPFLAGS_IMMUTABLETYPE = 1 << 8


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class ValueKind(Enum):
    """
    Closed classification of values, decided once per rendered node.

    FUNCTION, ARRAY and OBJECT are all composites; they only differ in how
    their header line is labeled.
    """
    UNDEFINED = "undefined"
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    BLOB = "blob"
    FUNCTION = "function"
    ARRAY = "array"
    OBJECT = "object"


@dataclass(frozen=True)
class PropertyDescriptor:
    """
    Descriptor of one own property.

    Attributes:
        value: Property value; UNDEFINED for accessors.
        configurable: False when the property cannot be removed or redefined.
        enumerable: False for private names (leading underscore).
        writable: False when the property cannot be reassigned.
        accessor: True for getter/setter properties.
        get: Getter reference of an accessor, never called.
        set: Setter reference of an accessor, never called.
    """
    value: Any = UNDEFINED
    configurable: bool = True
    enumerable: bool = True
    writable: bool = True
    accessor: bool = False
    get: Any = None
    set: Any = None


@dataclass(frozen=True)
class Unreadable:
    """Placeholder for a property whose value could not be read."""
    error: BaseException


# Methods --------------------------------------------------------------------------------------------------------------

def classify(value: Any) -> ValueKind:
    """
    Classify value for rendering.

    Order matters: bool before numbers, text and blobs before sequences.

    Examples:
        >>> classify(True), classify(1.5), classify([1])
        (<ValueKind.BOOLEAN: 'boolean'>, <ValueKind.NUMBER: 'number'>, <ValueKind.ARRAY: 'array'>)
    """
    if value is UNDEFINED:
        return ValueKind.UNDEFINED
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, numbers.Number):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if is_blob(value):
        return ValueKind.BLOB
    if is_function_like(value):
        return ValueKind.FUNCTION
    if is_list_like(value):
        return ValueKind.ARRAY
    return ValueKind.OBJECT


def is_function_like(value: Any) -> bool:
    """Functions, methods, builtins, classes and partials."""
    return (
        inspect.isroutine(value)
        or inspect.isclass(value)
        or isinstance(value, functools.partial)
    )


def is_list_like(value: Any) -> bool:
    """Non-text sequences and sets: their elements are shown by position."""
    if isinstance(value, (str, bytes, bytearray, memoryview)):
        return False
    return isinstance(value, (abc.Sequence, abc.Set))


def function_name(func: Any) -> str | None:
    """Function or class name; None for lambdas and nameless callables."""
    if isinstance(func, functools.partial):
        func = func.func
    name = getattr(func, "__name__", None)
    if not isinstance(name, str) or not name or name == "<lambda>":
        return None
    return name


def function_length(func: Any) -> int:
    """
    Number of named parameters a function declares.

    Var-positional and var-keyword parameters are not counted. Callables
    without an introspectable signature report 0.

    Examples:
        >>> function_length(lambda a, b=1, *args, **kwargs: None)
        2
    """
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return 0
    return sum(
        1 for p in sig.parameters.values()
        if p.kind not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
    )


def own_properties(value: Any, limit: int | None = None) -> list[tuple[str, PropertyDescriptor]]:
    """
    List the own properties of value in enumeration order.

    Mappings yield their items, sequences and sets their elements under the
    names "0", "1", ..., classes the entries of their namespace and other
    objects their instance attributes (__dict__ first, then set __slots__).
    Containers that also carry instance attributes list those after their items.

    Args:
        value: Any value.
        limit: Stop after this many properties; None lists all of them.

    Raises:
        Exception: Whatever the value raises while being enumerated; reading a
            single mapping item that fails yields an Unreadable value instead.

    Examples:
        >>> [(name, d.value) for name, d in own_properties({"a": 1, 2: "b"})]
        [('a', 1), ('2', 'b')]
        >>> len(own_properties(range(10**9), limit=1))
        1
    """
    return list(islice(_iter_own_properties(value), limit))


def prototype_of(value: Any) -> Any:
    """
    Prototype of value: the first base of a class, the type of anything else.

    Examples:
        >>> prototype_of(1)
        <class 'int'>
        >>> prototype_of(bool)
        <class 'int'>
        >>> prototype_of(object) is None
        True
    """
    if isinstance(value, type):
        bases = value.__bases__
        return bases[0] if bases else None
    return type(value)


def is_enumerable_name(name: str) -> bool:
    return not name.startswith("_")


# Private Methods ------------------------------------------------------------------------------------------------------

def _iter_own_properties(value: Any) -> Iterator[tuple[str, PropertyDescriptor]]:
    if isinstance(value, type):
        yield from _class_properties(value)
        return

    if isinstance(value, abc.Mapping):
        yield from _mapping_properties(value)
    elif is_list_like(value):
        yield from _element_properties(value)

    yield from _attribute_properties(value)


def _property_name(key: Any) -> str:
    return key if isinstance(key, str) else repr(key)


def _mapping_properties(mp: abc.Mapping) -> Iterator[tuple[str, PropertyDescriptor]]:
    mutable = isinstance(mp, abc.MutableMapping)
    for key in mp.keys():
        try:
            item = mp[key]
        except Exception as exc:
            item = Unreadable(exc)
        yield _property_name(key), PropertyDescriptor(value=item, configurable=mutable, writable=mutable)


def _element_properties(seq: abc.Sequence | abc.Set) -> Iterator[tuple[str, PropertyDescriptor]]:
    mutable = isinstance(seq, (abc.MutableSequence, abc.MutableSet))
    # set slots cannot be assigned by position
    writable = isinstance(seq, abc.MutableSequence)
    for i, item in enumerate(seq):
        yield str(i), PropertyDescriptor(value=item, configurable=mutable, writable=writable)


def _attribute_properties(obj: Any) -> Iterator[tuple[str, PropertyDescriptor]]:
    cls = type(obj)
    frozen = (
        dataclasses.is_dataclass(cls)
        and getattr(getattr(cls, "__dataclass_params__", None), "frozen", False)
    )
    mutable = not frozen

    seen = set()
    attrs = _instance_dict(obj)
    if isinstance(attrs, abc.Mapping):
        for name, attr in list(attrs.items()):
            name = _property_name(name)
            seen.add(name)
            yield name, PropertyDescriptor(
                value=attr,
                configurable=mutable,
                enumerable=is_enumerable_name(name),
                writable=mutable,
            )

    for name, attr in _slot_values(obj):
        if name in seen:
            continue
        seen.add(name)
        yield name, PropertyDescriptor(
            value=attr,
            configurable=mutable,
            enumerable=is_enumerable_name(name),
            writable=mutable,
        )


def _instance_dict(obj: Any) -> abc.Mapping | None:
    """The instance __dict__, read only through the builtin descriptor."""
    desc = inspect.getattr_static(obj, "__dict__", None)
    if not (inspect.isgetsetdescriptor(desc) or inspect.ismemberdescriptor(desc)):
        # a user-defined __dict__ attribute is never invoked
        return None
    return desc.__get__(obj, type(obj))


def _slot_values(obj: Any) -> list[tuple[str, Any]]:
    """Values of the __slots__ declared along the MRO that are currently set."""
    values = []
    for cls in type(obj).__mro__:
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot in ("__dict__", "__weakref__"):
                continue
            attr_name = slot
            if slot.startswith("__") and not slot.endswith("__"):
                attr_name = f"_{cls.__name__.lstrip('_')}{slot}"
            member = cls.__dict__.get(attr_name)
            if member is None or not inspect.ismemberdescriptor(member):
                continue
            try:
                values.append((attr_name, member.__get__(obj, cls)))
            except AttributeError:
                # declared but never assigned
                continue
    return values


def _class_properties(cls: type) -> list[tuple[str, PropertyDescriptor]]:
    mutable = not (getattr(cls, "__flags__", 0) & _TPFLAGS_IMMUTABLETYPE)

    props = []
    for name, attr in list(vars(cls).items()):
        enumerable = is_enumerable_name(name)
        if isinstance(attr, property):
            desc = PropertyDescriptor(
                configurable=mutable, enumerable=enumerable, writable=False,
                accessor=True, get=attr.fget, set=attr.fset,
            )
        elif inspect.isgetsetdescriptor(attr) or inspect.ismemberdescriptor(attr):
            desc = PropertyDescriptor(
                configurable=mutable, enumerable=enumerable, writable=False,
                accessor=True, get=attr, set=attr,
            )
        else:
            desc = PropertyDescriptor(
                value=attr, configurable=mutable, enumerable=enumerable, writable=mutable,
            )
        props.append((name, desc))
    return props
