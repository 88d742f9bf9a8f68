"""Exceptions raised at the varinspect API boundary."""

from typing import Any


class InvalidOptionError(ValueError):
    """An inspector option has an unsupported value."""

    def __init__(self, option: str, value: Any, expected: str = ""):
        self.option = option
        self.value = value
        message = f"invalid value for option '{option}': {value!r}"
        if expected:
            message += f", expected {expected}"
        super().__init__(message)
