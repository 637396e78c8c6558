"""Parser adapter: raw HTML text to a mutable BeautifulSoup tree.

The html.parser builder is lenient (unclosed tags are closed at the end of
the document, stray closing tags are ignored) and never adds the implied
<html>/<head>/<body> wrappers, so the tree mirrors the markup that was given.

Tag and attribute names come out lower-cased.
"""

from bs4 import BeautifulSoup, Comment, Doctype, NavigableString, Tag
from bs4.element import PreformattedString

PARSER = "html.parser"


class SlimDoctype(Doctype):
    """Doctype that renders as ``<!DOCTYPE ...>`` with no newline added after it."""

    SUFFIX = ">"


def parse_document(html: str) -> BeautifulSoup:
    """Parse an HTML string into a document tree.

    Args:
        html: HTML source. Malformed markup is accepted as-is.

    Returns:
        The document root.
    """
    return BeautifulSoup(
        html,
        PARSER,
        # Keep attribute values as plain strings ("class" is not split).
        multi_valued_attributes=None,
        # First occurrence of a duplicated attribute wins.
        on_duplicate_attribute="ignore",
        # Registering the root keeps whitespace-only strings byte-exact;
        # otherwise bs4 squashes them to a single space or newline.
        preserve_whitespace_tags={BeautifulSoup.ROOT_TAG_NAME},
        element_classes={Doctype: SlimDoctype},
    )


def is_document(node) -> bool:
    return isinstance(node, BeautifulSoup)


def is_element(node) -> bool:
    """True for tags, excluding the document root."""
    return isinstance(node, Tag) and not isinstance(node, BeautifulSoup)


def is_text(node) -> bool:
    """True for character data (comments, doctypes and CDATA excluded)."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def is_comment(node) -> bool:
    return isinstance(node, Comment)


def set_text(node: NavigableString, data: str) -> NavigableString | None:
    """Replace a text node's payload in place.

    bs4 strings are immutable, so a new string of the same class (which keeps
    script/style raw-text handling) is swapped into the same position. An
    empty payload drops the node instead.

    Args:
        node: Text node attached to a parent.
        data: New payload.

    Returns:
        The node now in the tree, or None if it was dropped.
    """
    if not data:
        node.extract()
        return None
    if data == node:
        return node
    replacement = type(node)(data)
    node.replace_with(replacement)
    return replacement
