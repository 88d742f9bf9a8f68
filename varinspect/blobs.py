"""
Binary blob helpers: detection, byte length and a short hex preview.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

BLOB_TYPES = (bytes, bytearray, memoryview)

MAX_PREVIEW_BYTES = 50


# Methods --------------------------------------------------------------------------------------------------------------


def is_blob(value: Any) -> bool:
    """Check whether value is a binary byte sequence (bytes, bytearray, memoryview)."""
    return isinstance(value, BLOB_TYPES)


def blob_length(value: bytes | bytearray | memoryview) -> int:
    """
    Size of the blob in bytes.

    For memoryview this is nbytes, so a view over wide items still reports bytes.
    A released memoryview reports 0.
    """
    if isinstance(value, memoryview):
        try:
            return value.nbytes
        except ValueError:
            return 0
    return len(value)


def blob_preview(value: bytes | bytearray | memoryview, max_bytes: int = MAX_PREVIEW_BYTES) -> str:
    """
    Short printable preview of a blob, as space-separated hex bytes.

    Blobs longer than max_bytes show only their head followed by ' ... '.
    A released memoryview has no readable content and previews as '<Buffer released>'.

    Examples:
        >>> blob_preview(b"abc")
        '<Buffer 61 62 63>'
        >>> blob_preview(bytes(range(5)), max_bytes=2)
        '<Buffer 00 01 ... >'
        >>> blob_preview(b"")
        '<Buffer >'
    """
    if isinstance(value, memoryview):
        try:
            data = value.tobytes()
        except ValueError:
            return "<Buffer released>"
    else:
        data = value

    more = len(data) > max_bytes
    head = bytes(data[:max(max_bytes, 0)])

    return "<Buffer " + " ".join(f"{b:02x}" for b in head) + (" ... " if more else "") + ">"
