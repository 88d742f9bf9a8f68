"""
Style tables for the inspector output.

A style table is a set of pure string decorators, one per semantic category
of the rendered tree, plus the indentation unit and the line terminator.
Three tables ship with the package:

    PLAIN: plain text, suitable for logs and files (the default)
    COLOR: ANSI escape sequences for terminals
    HTML:  inline-styled span/italic tags

COLOR and HTML start from PLAIN and override some categories, so every
category always resolves to a callable.

The inspector HTML-escapes its whole output once when HTML is used, including
the table's own tags, <br /> and &nbsp;, so the result reads correctly only
when displayed as text inside a page, not when inserted as markup.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, replace
from enum import StrEnum, unique
from typing import Callable

# Local ----------------------------------------------------------------------------------------------------------------
from .exceptions import InvalidOptionError


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class StyleName(StrEnum):
    """Names accepted for the `style` option."""
    NONE = "none"
    PLAIN = "plain"
    COLOR = "color"
    HTML = "html"


# @formatter:off
@unique
class Ansi(StrEnum):
    """ANSI SGR sequences used by the COLOR table."""
    RESET = "\x1b[0m"
    BOLD = "\x1b[1m"
    ITALIC = "\x1b[3m"
    UNDERLINE = "\x1b[4m"
    DEFAULT_COLOR = "\x1b[39m"
    BLACK = "\x1b[30m"
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    BLUE = "\x1b[34m"
    MAGENTA = "\x1b[35m"
    CYAN = "\x1b[36m"
    WHITE = "\x1b[37m"
    BRIGHT_BLACK = "\x1b[90m"
    BRIGHT_RED = "\x1b[91m"
    BRIGHT_GREEN = "\x1b[92m"
    BRIGHT_YELLOW = "\x1b[93m"
    BRIGHT_BLUE = "\x1b[94m"
    BRIGHT_MAGENTA = "\x1b[95m"
    BRIGHT_CYAN = "\x1b[96m"
    BRIGHT_WHITE = "\x1b[97m"
# @formatter:on


def _noop(s: str) -> str:
    return s


def _angle(s: str) -> str:
    return "<" + s + ">"


@dataclass(frozen=True)
class InspectStyle:
    """
    Formatting table consulted by the inspector for every rendered fragment.

    Every category is a callable `(str) -> str`; unset categories default to
    identity. Decorators must accept any string, including the empty one.

    Attributes:
        tab: Indentation unit, repeated once per nesting level.
        nl: Line terminator.
        limit: '[depth limit]', '[circular]' and similar truncation markers.
        type: Runtime type labels ('number', 'string', 'object', ...) and
            property descriptor flags.
        constant: undefined / null / true / false.
        func_name: Function names.
        constructor_name: Class names in composite headers.
        length: '(N)' length annotations.
        key: Property names.
        index: Sequence positions.
        number: Number values.
        inspect: Binary blob previews.
        string: String contents, without the surrounding quotes.

    Examples:
        >>> loud = InspectStyle(key=str.upper)
        >>> loud.key("name"), loud.index("0")
        ('NAME', '0')
    """
    tab: str = "    "
    nl: str = "\n"
    limit: Callable[[str], str] = _noop
    type: Callable[[str], str] = _noop
    constant: Callable[[str], str] = _noop
    func_name: Callable[[str], str] = _noop
    constructor_name: Callable[[str], str] = _noop
    length: Callable[[str], str] = _noop
    key: Callable[[str], str] = _noop
    index: Callable[[str], str] = _noop
    number: Callable[[str], str] = _noop
    inspect: Callable[[str], str] = _noop
    string: Callable[[str], str] = _noop


# Style Tables ---------------------------------------------------------------------------------------------------------

def _ansi(*codes: Ansi) -> Callable[[str], str]:
    prefix = "".join(codes)

    def wrap(s: str) -> str:
        return prefix + s + Ansi.RESET

    return wrap


def _tag(tag: str, color: str) -> Callable[[str], str]:
    opening = f'<{tag} style="color:{color}">'
    closing = f"</{tag}>"

    def wrap(s: str) -> str:
        return opening + s + closing

    return wrap


PLAIN = InspectStyle(
    type=_angle,
    constructor_name=_angle,
)

COLOR = replace(
    PLAIN,
    limit=_ansi(Ansi.BOLD, Ansi.BRIGHT_RED),
    type=_ansi(Ansi.ITALIC, Ansi.BRIGHT_BLACK),
    constant=_ansi(Ansi.CYAN),
    func_name=_ansi(Ansi.ITALIC, Ansi.MAGENTA),
    constructor_name=_ansi(Ansi.MAGENTA),
    length=_ansi(Ansi.ITALIC, Ansi.BRIGHT_BLACK),
    key=_ansi(Ansi.GREEN),
    index=_ansi(Ansi.BLUE),
    number=_ansi(Ansi.CYAN),
    inspect=_ansi(Ansi.CYAN),
    string=_ansi(Ansi.BLUE),
)

HTML = replace(
    PLAIN,
    tab="&nbsp;&nbsp;&nbsp;&nbsp;",
    nl="<br />",
    limit=_tag("span", "red"),
    type=_tag("i", "gray"),
    constant=_tag("span", "cyan"),
    func_name=_tag("i", "magenta"),
    constructor_name=_tag("span", "magenta"),
    length=_tag("i", "gray"),
    key=_tag("span", "green"),
    index=_tag("span", "blue"),
    number=_tag("span", "cyan"),
    inspect=_tag("span", "cyan"),
    string=_tag("span", "blue"),
)

STYLES: dict[str, InspectStyle] = {
    StyleName.NONE: PLAIN,
    StyleName.PLAIN: PLAIN,
    StyleName.COLOR: COLOR,
    StyleName.HTML: HTML,
}


# Methods --------------------------------------------------------------------------------------------------------------

def get_style(style: "str | InspectStyle | None" = None) -> InspectStyle:
    """
    Resolve a style option to a style table.

    Args:
        style: None (PLAIN), one of the StyleName values, or an InspectStyle
            instance which is returned as-is.

    Returns:
        The resolved InspectStyle.

    Raises:
        InvalidOptionError: If style is a string that names no known table.
        TypeError: If style is neither None, a string nor an InspectStyle.

    Examples:
        >>> get_style() is PLAIN
        True
        >>> get_style("color") is COLOR
        True
    """
    if style is None:
        return PLAIN
    if isinstance(style, InspectStyle):
        return style
    if isinstance(style, str):
        try:
            return STYLES[style]
        except KeyError:
            raise InvalidOptionError(
                "style", style, expected=", ".join(repr(str(name)) for name in StyleName)
            ) from None
    raise TypeError(f"style must be a str, an InspectStyle or None, but got {type(style).__name__}")
