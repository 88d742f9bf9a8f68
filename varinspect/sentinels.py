"""
Sentinel objects used by the inspector.

All sentinels use identity checks (using 'is') rather than equality checks.

Sentinels:
    UNDEFINED: A value that was never assigned; rendered as `undefined`
    UNSET: Represents an unprovided optional argument (distinguishes from None)

Example:
    >>> from varinspect.inspector import render
    >>> render(UNDEFINED)
    'undefined\\n'
"""

from typing import Any, Final

__all__ = [
    'UNDEFINED',
    'UNSET',
    'UndefinedType',
    'UnsetType',
]


# Base Sentinel --------------------------------------------------------------------------------------------------------

class _SentinelBase:
    """
    Base class for all sentinel objects.

    Sentinels are singleton objects optimized for identity checks.
    """
    __slots__ = ('_name',)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return f'<{self._name}>'

    def __eq__(self, other: Any) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple:
        return (self.__class__, ())


# Sentinel Types -------------------------------------------------------------------------------------------------------

class UndefinedType(_SentinelBase):
    """
    Sentinel type for UNDEFINED.

    Stands for a slot that exists but holds no value at all, as opposed to
    a slot explicitly set to None.
    """
    _instance: 'UndefinedType | None' = None

    def __new__(cls) -> 'UndefinedType':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if not hasattr(self, '_name'):
            super().__init__("UNDEFINED")


class UnsetType(_SentinelBase):
    """
    Sentinel type for UNSET.

    Used to distinguish between 'not provided' and 'explicitly set to None'.
    """
    _instance: 'UnsetType | None' = None

    def __new__(cls) -> 'UnsetType':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if not hasattr(self, '_name'):
            super().__init__("UNSET")


# Sentinel Objects -----------------------------------------------------------------------------------------------------

UNDEFINED: Final[UndefinedType] = UndefinedType()
"""
Sentinel for a value that was never defined.

The inspector renders it as the `undefined` constant.
"""

UNSET: Final[UnsetType] = UnsetType()
"""
Sentinel representing an unprovided optional argument.

Use with identity check: `if arg is UNSET:`
"""

