"""
Variable inspector.

Renders any value as a human-readable tree, one line per node, for
debugging and logging. Composites are expanded depth-first down to a
configurable depth, reference cycles along the current path are reported
instead of followed, and getters/setters are shown without being called.

Output styles are pluggable, see varinspect.styles:

    >>> print(render({"x": 1, "y": [1, 2]}), end="")
    <dict> <object> {
        x: 1 <number>
        y: <list>(2) <object> {
            [0] 1 <number>
            [1] 2 <number>
        }
    }
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import sys

from dataclasses import dataclass
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from . import escape
from .blobs import blob_length, blob_preview
from .options import InspectOptions, resolve_options
from .properties import (
    PropertyDescriptor,
    Unreadable,
    ValueKind,
    classify,
    function_length,
    function_name,
    own_properties,
    prototype_of,
)
from .sentinels import UNSET
from .styles import HTML, InspectStyle
from .utils import ANONYMOUS, class_name, constructor_name, is_index_name

logger = logging.getLogger(__name__)

GETTER_SETTER = "getter/setter"

# Python frames held per expanded nesting level, and frames kept in reserve
# for the caller and for property enumeration at the deepest level
_FRAMES_PER_LEVEL = 3
_RESERVED_FRAMES = 100

_CONSTANTS = {
    ValueKind.UNDEFINED: "undefined",
    ValueKind.NULL: "null",
}


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class TraversalState:
    """
    Per-node traversal state, owned by one recursive call.

    Attributes:
        depth: Nesting level of the node, 0 for the root.
        indent: Indentation prefix of the node's lines.
        ancestors: Composites being expanded on the path from the root, compared by identity.
        key: Property name of the node; None for the root.
        key_is_property: Render the key as 'key:' rather than '[index]'.
        descriptor: Descriptor of the property holding the node, if any.
        force_type: Label replacing the header of a pseudo-node (getter/setter).
    """
    depth: int = 0
    indent: str = ""
    ancestors: tuple = ()
    key: str | None = None
    key_is_property: bool = False
    descriptor: PropertyDescriptor | None = None
    force_type: str | None = None

    def child(
        self,
        parent: Any,
        indent: str,
        key: str,
        key_is_property: bool,
        descriptor: PropertyDescriptor | None = None,
        force_type: str | None = None,
    ) -> "TraversalState":
        """State of a property of parent, one level deeper."""
        return TraversalState(
            depth=self.depth + 1,
            indent=indent,
            ancestors=self.ancestors + (parent,),
            key=key,
            key_is_property=key_is_property,
            descriptor=descriptor,
            force_type=force_type,
        )

    def has_ancestor(self, value: Any) -> bool:
        return any(a is value for a in self.ancestors)


# Methods --------------------------------------------------------------------------------------------------------------

def render(value: Any, options: Any = None, **overrides: Any) -> str:
    """
    Render value as an indented, optionally styled text tree.

    Args:
        value: Any Python value.
        options: InspectOptions, a mapping of option names (see
            InspectOptions.from_mapping) or None for the configured defaults.
            Anything else is ignored.
        **overrides: Option fields applied on top, e.g. depth=1, style="color".

    Returns:
        The rendered tree, every line terminated by the style's line
        terminator. Empty string for a function-like value with no_func set.

    Raises:
        InvalidOptionError: If the style name is unknown or depth is negative.
        TypeError: If depth is not an int or an override names no option.

    Examples:
        >>> render(42)
        '42 <number>\\n'
        >>> render("a\\nb")
        '"a\\\\nb" <string>(3)\\n'
        >>> render([1], depth=0)
        '<list>(1) <object> [depth limit]\\n'
    """
    opts = resolve_options(options, **overrides)
    if opts.depth > max_render_depth():
        logger.debug("depth=%d exceeds the recursion limit, clamped to %d", opts.depth, max_render_depth())
    logger.debug("rendering %s with depth=%d", class_name(value, fully_qualified=True), opts.depth)
    return _inspect(TraversalState(), opts, value)


def max_render_depth() -> int:
    """
    Deepest nesting level the interpreter's recursion limit lets render() expand.

    A requested depth above this is clamped: the value is cut off with
    '[depth limit]' at this level.
    """
    return max((sys.getrecursionlimit() - _RESERVED_FRAMES) // _FRAMES_PER_LEVEL, 0)


def inspect_value(state: TraversalState | None, options: Any, value: Any = UNSET) -> str:
    """
    Recursive form of render().

    With state None this is a top-level call: when only two arguments are
    given the second one is the value, and options are resolved as render()
    does. Otherwise options must already be resolved InspectOptions.

    Examples:
        >>> inspect_value(None, True)
        'true\\n'
        >>> inspect_value(None, {"style": "none"}, None)
        'null\\n'
    """
    if state is None:
        if value is UNSET:
            value, options = options, None
        return render(value, options)
    return _inspect(state, options, value)


# Private Methods ------------------------------------------------------------------------------------------------------

def _inspect(state: TraversalState, options: InspectOptions, value: Any) -> str:
    style = options.style_table
    kind = classify(value)

    if kind is ValueKind.FUNCTION and options.no_func:
        return ""

    key = ""
    descriptor_str = ""
    if state.key is not None:
        if state.descriptor is not None:
            flags = _descriptor_flags(state.descriptor)
            if flags:
                descriptor_str = " " + style.type(" ".join(flags))

        if state.key_is_property:
            key = style.key(state.key) + ": "
        else:
            key = "[" + style.index(state.key) + "] "

    pre = state.indent + key

    if isinstance(value, Unreadable):
        out = pre + _unreadable(style, value.error) + descriptor_str + style.nl
    elif kind in _CONSTANTS:
        out = pre + style.constant(_CONSTANTS[kind]) + descriptor_str + style.nl
    elif kind is ValueKind.BOOLEAN:
        out = pre + style.constant("true" if value else "false") + descriptor_str + style.nl
    elif kind is ValueKind.NUMBER:
        out = pre + style.number(_safe_str(value)) + " " + style.type("number") + descriptor_str + style.nl
    elif kind is ValueKind.STRING:
        out = (
            pre + '"' + style.string(escape.control(value)) + '" '
            + style.type("string") + style.length(f"({len(value)})") + descriptor_str + style.nl
        )
    elif kind is ValueKind.BLOB:
        out = (
            pre + style.inspect(blob_preview(value)) + " "
            + style.type("Buffer") + style.length(f"({blob_length(value)})") + descriptor_str + style.nl
        )
    else:
        out = _inspect_composite(state, options, style, kind, value, pre, descriptor_str)

    if state.depth == 0 and style is HTML:
        out = escape.html(out)

    return out


def _inspect_composite(
    state: TraversalState,
    options: InspectOptions,
    style: InspectStyle,
    kind: ValueKind,
    value: Any,
    pre: str,
    descriptor_str: str,
) -> str:
    func_name = length = ""

    if kind is ValueKind.FUNCTION:
        func_name = " " + style.func_name(function_name(value) or ANONYMOUS)
        length = style.length(f"({function_length(value)})")
    elif kind is ValueKind.ARRAY:
        size = _safe_len(value)
        if size is not None:
            length = style.length(f"({size})")

    if state.force_type:
        parts = [pre + style.type(state.force_type)]
    else:
        runtime_type = "function" if kind is ValueKind.FUNCTION else "object"
        parts = [
            pre + style.constructor_name(constructor_name(value)) + func_name + length
            + " " + style.type(runtime_type) + descriptor_str
        ]

    if kind is ValueKind.FUNCTION and not options.func_details:
        parts.append(style.nl)
        return "".join(parts)

    depth_limit = min(options.depth, max_render_depth())

    try:
        # Only the first property is needed to tell an empty composite apart
        has_props = bool(own_properties(value, limit=1))
        props = None
        if has_props and state.depth < depth_limit and not state.has_ancestor(value):
            # One extra property tells whether the listing is cut short
            limit = None if options.max_items is None else options.max_items + 1
            props = own_properties(value, limit=limit)
    except RecursionError:
        raise
    except Exception as exc:
        logger.debug("cannot enumerate %s: %r", class_name(value), exc)
        parts.append(" " + _unreadable(style, exc) + style.nl)
        return "".join(parts)

    if not has_props:
        parts.append(" {}" + style.nl)
    elif state.depth >= depth_limit:
        parts.append(" " + style.limit("[depth limit]") + style.nl)
    elif state.has_ancestor(value):
        logger.debug("circular reference to %s at depth %d", class_name(value), state.depth)
        parts.append(" " + style.limit("[circular]") + style.nl)
    else:
        next_indent = state.indent + style.tab
        parts.append(" {" + style.nl)

        truncated = options.max_items is not None and len(props) > options.max_items
        if truncated:
            props = props[:options.max_items]

        is_array = kind is ValueKind.ARRAY
        for name, descriptor in props:
            key_is_property = not (is_array and descriptor.enumerable and is_index_name(name))

            if descriptor.accessor:
                child = state.child(value, next_indent, name, key_is_property, descriptor, force_type=GETTER_SETTER)
                child_value = {"get": descriptor.get, "set": descriptor.set}
            else:
                child = state.child(value, next_indent, name, key_is_property, descriptor)
                child_value = descriptor.value

            parts.append(_inspect(child, options, child_value))

        if truncated:
            parts.append(next_indent + style.limit(_more_marker(value, options.max_items)) + style.nl)

        if options.show_proto:
            child = state.child(value, next_indent, "__proto__", True)
            parts.append(_inspect(child, options, prototype_of(value)))

        parts.append(state.indent + "}" + style.nl)

    return "".join(parts)


def _descriptor_flags(descriptor: PropertyDescriptor) -> list[str]:
    flags = []
    if not descriptor.configurable:
        flags.append("-conf")
    if not descriptor.enumerable:
        flags.append("-enum")
    # accessors have no writable flag
    if not descriptor.accessor and not descriptor.writable:
        flags.append("-w")
    return flags


def _more_marker(value: Any, shown: int) -> str:
    size = _safe_len(value)
    if size is not None and size > shown:
        return f"... {size - shown} more"
    return "... more"


def _unreadable(style: InspectStyle, error: BaseException) -> str:
    return style.limit(f"[unreadable: {type(error).__name__}]")


def _safe_len(value: Any) -> int | None:
    try:
        return len(value)
    except Exception:
        return None


def _safe_str(value: Any) -> str:
    """
    Defensive str() call - handle broken __str__ methods gracefully
    """
    try:
        return str(value)
    except Exception as e:
        return f"<{type(value).__name__} object (str failed: {type(e).__name__})>"
