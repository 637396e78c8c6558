"""Whitespace normalization for text node payloads."""

import re

# Parents whose text keeps its interior formatting.
PRESERVE_SPACE_TAGS = frozenset({"pre", "script", "style", "textarea"})

# HTML whitespace only; U+00A0 and other Unicode spaces are content.
HTML_SPACE = " \t\n\f\r"

_TRAILING_NEWLINE_RUN = re.compile(r"[ \t\n\f\r]*\n[ \t\n\f\r]*\Z")
_NEWLINE_RUN = re.compile(r"[ \t\n\f\r]*\n+[ \t\n\f\r]*")
_HORIZONTAL_RUN = re.compile(r"[ \t]{2,}")
_LEADING_NEWLINE_RUN = re.compile(r"\A[ \t\n\f\r]*\n")


def collapse_text(data: str, preserve: bool = False) -> str:
    """Collapse insignificant whitespace in a text payload.

    Args:
        data: Text to normalize.
        preserve: True when the parent is a formatting-sensitive element;
            only a trailing run containing a newline is reduced to "\\n".

    Returns:
        The normalized text.
    """
    if preserve:
        return _TRAILING_NEWLINE_RUN.sub("\n", data)
    data = _NEWLINE_RUN.sub("\n", data)
    return _HORIZONTAL_RUN.sub(" ", data)


def strip_leading_newline(data: str) -> str:
    """Drop the leading whitespace run up to its last newline."""
    return _LEADING_NEWLINE_RUN.sub("", data)


def is_blank(data: str) -> bool:
    return not data.strip(HTML_SPACE)


def preserves_space(tag_name: str | None) -> bool:
    return tag_name in PRESERVE_SPACE_TAGS
