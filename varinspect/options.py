"""
Inspector options and module-level defaults.

InspectOptions is immutable; derive variants with merge() or the preset
constructors. configure() changes the defaults that render() starts from
when it is not handed a complete InspectOptions.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
import logging

from dataclasses import dataclass, fields, replace
from typing import Any, Literal

# Local ----------------------------------------------------------------------------------------------------------------
from .exceptions import InvalidOptionError
from .sentinels import UNSET
from .styles import InspectStyle, StyleName, get_style

logger = logging.getLogger(__name__)

Preset = Literal["default", "compact", "debug", "terminal"]

# Alternative spellings accepted in option mappings
OPTION_ALIASES = {
    "noFunc": "no_func",
    "nofunc": "no_func",
    "funcDetails": "func_details",
    "showProto": "show_proto",
    "proto": "show_proto",
    "maxItems": "max_items",
}


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class InspectOptions:
    """
    Options controlling one render() call.

    Attributes:
        style: Output style: 'none' (plain text, default), 'color' (ANSI),
            'html', or a custom InspectStyle table.
        depth: Nesting level at which composites stop being expanded and
            show '[depth limit]' instead. Default 3.
        no_func: Omit function-like values entirely, including their line.
        func_details: Expand function-like values' own properties instead of
            collapsing them to a single line.
        show_proto: Also render each expanded composite's prototype under the
            '__proto__' key.
        max_items: Most own properties listed per composite; the rest are
            summarized by a '... N more' line. None lists all of them.
            Default 1000.

    Raises:
        TypeError: If depth or max_items is not an int.
        InvalidOptionError: If depth or max_items is negative, or style names no known table.

    Examples:
        >>> InspectOptions(depth=1).merge(style="color")
        InspectOptions(style='color', depth=1, no_func=False, func_details=False, show_proto=False, max_items=1000)
    """
    style: str | InspectStyle | None = StyleName.NONE
    depth: int = 3
    no_func: bool = False
    func_details: bool = False
    show_proto: bool = False
    max_items: int | None = 1000

    def __post_init__(self):
        if isinstance(self.depth, bool) or not isinstance(self.depth, int):
            raise TypeError(f"depth must be an int, but found {type(self.depth).__name__}")
        if self.depth < 0:
            raise InvalidOptionError("depth", self.depth, expected="a non-negative int")
        if self.max_items is not None:
            if isinstance(self.max_items, bool) or not isinstance(self.max_items, int):
                raise TypeError(f"max_items must be an int or None, but found {type(self.max_items).__name__}")
            if self.max_items < 0:
                raise InvalidOptionError("max_items", self.max_items, expected="a non-negative int or None")
        # Fail fast on unknown style names
        get_style(self.style)

    # Class Methods ------------------------------------

    @classmethod
    def compact(cls) -> "InspectOptions":
        """One level of expansion, at most 20 properties, functions hidden."""
        return cls(depth=1, no_func=True, max_items=20)

    @classmethod
    def debug(cls) -> "InspectOptions":
        """Deep expansion with function details and prototypes."""
        return cls(depth=5, func_details=True, show_proto=True)

    @classmethod
    def terminal(cls) -> "InspectOptions":
        """Default expansion with ANSI colors."""
        return cls(style=StyleName.COLOR)

    @classmethod
    def from_mapping(cls, mp: abc.Mapping, base: "InspectOptions | None" = None) -> "InspectOptions":
        """
        Build options from a mapping of option names.

        Accepts field names and the aliases in OPTION_ALIASES. Keys that name
        no option are ignored, None values leave the base value in place.

        Examples:
            >>> InspectOptions.from_mapping({"depth": 1, "noFunc": True}).no_func
            True
        """
        base = cls() if base is None else base
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in mp.items():
            name = OPTION_ALIASES.get(key, key)
            if name not in known:
                logger.debug("ignoring unknown inspect option %r", key)
                continue
            if value is None:
                continue
            kwargs[name] = value
        return replace(base, **kwargs)

    # Methods and Properties ---------------------------

    def merge(self, **kwargs) -> "InspectOptions":
        """
        Return a copy with the given fields replaced.

        Aliases are accepted; UNSET values are skipped.

        Raises:
            TypeError: If a keyword names no option.
        """
        changes = {}
        for key, value in kwargs.items():
            if value is UNSET:
                continue
            changes[OPTION_ALIASES.get(key, key)] = value
        if not changes:
            return self
        return replace(self, **changes)

    @property
    def style_table(self) -> InspectStyle:
        """The resolved style table."""
        return get_style(self.style)


# Module Config --------------------------------------------------------------------------------------------------------

_PRESETS = {
    "default": InspectOptions,
    "compact": InspectOptions.compact,
    "debug": InspectOptions.debug,
    "terminal": InspectOptions.terminal,
}

_options = InspectOptions()


def configure(preset: Preset | None = None, **overrides: Any) -> InspectOptions:
    """
    Change the module-level default options.

    Args:
        preset: Start from a named preset; None keeps the current defaults.
        **overrides: Option fields to change on top of the starting point.

    Returns:
        The new default options.

    Raises:
        InvalidOptionError: If preset is unknown.

    Examples:
        >>> configure(preset="debug", style="color").depth
        5
    """
    global _options

    if preset is None:
        base = _options
    else:
        try:
            base = _PRESETS[preset]()
        except KeyError:
            raise InvalidOptionError("preset", preset, expected=", ".join(map(repr, _PRESETS))) from None

    _options = base.merge(**overrides)
    logger.debug("inspect defaults set to %r", _options)
    return _options


def get_options() -> InspectOptions:
    """Current module-level default options."""
    return _options


def reset_options() -> InspectOptions:
    """Restore the built-in defaults."""
    global _options
    _options = InspectOptions()
    return _options


def resolve_options(options: Any = None, **overrides: Any) -> InspectOptions:
    """
    Turn whatever the caller passed as options into InspectOptions.

    An InspectOptions is used as-is, a mapping is applied over the module
    defaults, anything else is ignored in favor of the module defaults.
    Keyword overrides are merged last.
    """
    if isinstance(options, InspectOptions):
        opts = options
    elif isinstance(options, abc.Mapping):
        opts = InspectOptions.from_mapping(options, base=_options)
    else:
        opts = _options
    return opts.merge(**overrides)
