"""Element classifiers.

Pure functions over parsed nodes. Tag names are already lower-cased by the
parser; attribute values are compared case-insensitively.
"""

from bs4 import Tag

from htmlslim.parser import is_comment

__all__ = [
    "is_comment",
    "is_ld_json_script",
    "is_link_preload_as",
    "is_link_stylesheet",
    "is_script_element",
    "is_style_element",
    "is_template_element",
]

LD_JSON_TYPE = "application/ld+json"


def _attr(node: Tag, name: str) -> str:
    value = node.attrs.get(name)
    return value.lower() if isinstance(value, str) else ""


def is_link(node: Tag) -> bool:
    return node.name == "link"


def is_preload(node: Tag) -> bool:
    return is_link(node) and _attr(node, "rel") == "preload"


def is_script_element(node: Tag) -> bool:
    return node.name == "script"


def is_ld_json_script(node: Tag) -> bool:
    """True for <script type="application/ld+json">, parameters ignored."""
    return is_script_element(node) and _attr(node, "type").split(";")[0] == LD_JSON_TYPE


def is_style_element(node: Tag) -> bool:
    return node.name == "style"


def is_template_element(node: Tag) -> bool:
    return node.name == "template"


def is_link_stylesheet(node: Tag) -> bool:
    return is_link(node) and _attr(node, "rel") == "stylesheet"


def is_link_preload_as(node: Tag, kind: str) -> bool:
    """True for <link rel="preload" as="{kind}">.

    Args:
        node: Element to test.
        kind: Preload destination, e.g. "script" or "style".
    """
    return is_preload(node) and _attr(node, "as") == kind.lower()
