"""
String escaping helpers for inspector output.

control() makes control characters visible in one-line string previews,
html() protects a finished text block before it is embedded in a page.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import html as _html
import re

# Named escapes; every other C0 control and DEL falls back to \xHH
CONTROL_ESCAPES = {
    "\r": "\\r",
    "\n": "\\n",
    "\t": "\\t",
}

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


# Methods --------------------------------------------------------------------------------------------------------------


def control(s: str) -> str:
    """
    Replace control characters in s with a printable escaped form.

    Examples:
        >>> control("a\\nb")
        'a\\\\nb'
        >>> control("\\x1b[0m")
        '\\\\x1b[0m'
    """
    return _CONTROL_CHARS.sub(_escape_control_char, s)


def html(s: str) -> str:
    """
    Escape the five HTML-reserved characters: & < > " '

    Examples:
        >>> html('<a href="x">&</a>')
        '&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;'
    """
    return _html.escape(s, quote=True)


# Private Methods ------------------------------------------------------------------------------------------------------


def _escape_control_char(match: re.Match) -> str:
    ch = match.group(0)
    escaped = CONTROL_ESCAPES.get(ch)
    if escaped is not None:
        return escaped
    return f"\\x{ord(ch):02x}"
