"""
Varinspect utilities shared across the package.

Contains functions used by multiple modules to avoid circular imports.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import re
from typing import Any

_INDEX_NAME = re.compile(r"(?:0|[1-9][0-9]*)")

ANONYMOUS = "(anonymous)"


# Methods --------------------------------------------------------------------------------------------------------------


def class_name(
    obj: Any,
    fully_qualified: bool = False,
    fully_qualified_builtins: bool = False,
) -> str:
    """
    Get the class name of an object or a class.

    Returns class name whether given an instance or the class itself.
    For example, both `class_name(10)` and `class_name(int)` return 'int'.

    Parameters:
        obj (Any): An object or a class.
        fully_qualified (bool): If true, returns the fully qualified name for user objects or classes.
        fully_qualified_builtins (bool): If true, returns the fully qualified name for builtin objects or classes.

    Returns:
        str: The class name.

    Examples:
        >>> class_name(10)
        'int'
        >>> class_name(10, fully_qualified_builtins=True)
        'builtins.int'
    """
    cls = obj if issubclass(type(obj), type) else type(obj)

    if cls.__module__ == "builtins":
        qualify = fully_qualified_builtins
    else:
        qualify = fully_qualified

    if qualify:
        return cls.__module__ + "." + cls.__name__
    return cls.__name__


def constructor_name(obj: Any) -> str:
    """
    Name of the class that constructed obj, as shown in inspector headers.

    Unlike class_name(), a class argument is NOT unwrapped: the constructor of
    a class is its metaclass. The class is taken from type(obj), so a
    __class__ attribute overridden by obj (as proxies do) is never run.

    Returns:
        str: The class name, or '(anonymous)' when the class has an empty name.

    Examples:
        >>> constructor_name({})
        'dict'
        >>> constructor_name(dict)
        'type'
    """
    name = getattr(type(obj), "__name__", None)
    if not name or not isinstance(name, str):
        return ANONYMOUS
    return name


def is_index_name(name: Any) -> bool:
    """
    Check whether name is a canonical non-negative integer literal.

    Examples:
        >>> is_index_name("12")
        True
        >>> is_index_name("012"), is_index_name("-1"), is_index_name("1.0")
        (False, False, False)
    """
    return isinstance(name, str) and _INDEX_NAME.fullmatch(name) is not None
