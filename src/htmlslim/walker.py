"""Tree walker and removal engine.

One recursive descent over the parsed tree. For every container (the
document or an element) the children are visited last-to-first:

1. A child matching any removal rule is extracted together with its subtree;
   nothing below it is visited.
2. A surviving element is descended into.
3. With whitespace collapsing on, a text child absorbs the text sibling that
   now follows it and is normalized.

After its children, an element has its attributes filtered. Visiting in
reverse keeps the indices of not-yet-visited children stable while later
ones are extracted.
"""

import logging

from bs4 import BeautifulSoup, NavigableString, Tag

from htmlslim.config import SlimConfig
from htmlslim.models import SlimStats
from htmlslim.parser import is_comment, is_document, is_element, is_text, set_text
from htmlslim.patterns import pattern_matches
from htmlslim.predicates import (
    is_ld_json_script,
    is_link_preload_as,
    is_link_stylesheet,
    is_script_element,
    is_style_element,
    is_template_element,
)
from htmlslim.whitespace import collapse_text, is_blank, preserves_space, strip_leading_newline

LOGGER = logging.getLogger(__name__)


class Slimmer:
    """Apply a SlimConfig to one parsed document.

    A Slimmer is created per document; it owns the statistics for that pass
    and nothing else.

    Usage:
        doc = parse_document(html)
        stats = Slimmer(config).run(doc)
        html = render_document(doc)
    """

    def __init__(self, config: SlimConfig) -> None:
        self.config = config
        self.stats = SlimStats()
        self._removed_attributes = config.removed_attributes
        self._event_pattern = config.event_pattern

    def run(self, doc: BeautifulSoup) -> SlimStats:
        """Slim the document in place and return the pass statistics."""
        if self.config.root is not None:
            self.config.root(doc)

        self._slim_children(doc)

        if self.config.collapse_space and doc.contents and is_text(doc.contents[0]):
            first = doc.contents[0]
            set_text(first, strip_leading_newline(first))

        LOGGER.debug(
            f"Removed {self.stats.elements_removed} elements, {self.stats.comments_removed} comments, "
            f"{self.stats.attributes_removed} attributes; merged {self.stats.texts_merged} text nodes"
        )
        return self.stats

    # -------------------------------------------------------------------------
    # Removal decisions
    # -------------------------------------------------------------------------

    def should_remove(self, node) -> bool:
        """Decide whether a child node is removed along with its subtree."""
        if is_comment(node):
            return self.config.remove_comment
        if not is_element(node):
            return False
        return self._element_matches(node)

    def _element_matches(self, el: Tag) -> bool:
        config = self.config

        # walk must see every visited element exactly once
        if config.walk is not None and config.walk(el):
            return True
        if config.selector is not None and config.selector(el):
            return True
        if pattern_matches(config.tag_pattern, el.name):
            return True

        if is_script_element(el):
            if is_ld_json_script(el):
                return config.remove_ld_json
            return config.remove_script

        if config.remove_script and is_link_preload_as(el, "script"):
            return True
        if config.remove_style and (
            is_style_element(el) or is_link_stylesheet(el) or is_link_preload_as(el, "style")
        ):
            return True
        return config.remove_template and is_template_element(el)

    def should_remove_attribute(self, name: str) -> bool:
        return (
            name in self._removed_attributes
            or pattern_matches(self._event_pattern, name)
            or pattern_matches(self.config.attr_pattern, name)
        )

    # -------------------------------------------------------------------------
    # Traversal
    # -------------------------------------------------------------------------

    def _slim_children(self, node: Tag) -> None:
        children = node.contents
        collapse = self.config.collapse_space
        preserve = preserves_space(node.name)

        for i in range(len(children) - 1, -1, -1):
            child = children[i]

            if self.should_remove(child):
                if is_comment(child):
                    self.stats.comments_removed += 1
                else:
                    self.stats.elements_removed += 1
                child.extract()
            elif is_element(child):
                self._slim_children(child)
            elif collapse and is_text(child):
                self._normalize_text(child, i, preserve)

        if collapse and len(children) == 1 and is_text(children[0]) and is_blank(children[0]):
            children[0].extract()

        if not is_document(node):
            self._slim_attributes(node)

    def _normalize_text(self, child: NavigableString, index: int, preserve: bool) -> None:
        """Merge the following text sibling into ``child`` and collapse spaces."""
        children = child.parent.contents
        data = str(child)

        if index + 1 < len(children) and is_text(children[index + 1]):
            following = children[index + 1]
            data += following
            following.extract()
            self.stats.texts_merged += 1

        set_text(child, collapse_text(data, preserve=preserve))

    def _slim_attributes(self, el: Tag) -> None:
        for name in list(el.attrs):
            if self.should_remove_attribute(name):
                del el.attrs[name]
                self.stats.attributes_removed += 1
