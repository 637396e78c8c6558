"""Serializer adapter: render a (mutated) BeautifulSoup tree back to HTML."""

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

NBSP = "\xa0"


def substitute_entities(text: str) -> str:
    """Escape &, < and > and write non-breaking spaces as &nbsp;."""
    return EntitySubstitution.substitute_xml(text).replace(NBSP, "&nbsp;")


class SlimFormatter(HTMLFormatter):
    """HTML output formatter.

    Differs from bs4's "minimal" formatter in four ways:
    - attributes are emitted in parse order instead of sorted by name
    - void elements render as <br>, not <br/>
    - empty attribute values render as bare boolean attributes
    - U+00A0 is written back as &nbsp; so it stays visible in the markup

    Other character references (&copy;, &#8212;) were decoded by the parser
    and come out as the characters themselves. Script/style contents stay raw.
    """

    def __init__(self) -> None:
        super().__init__(
            entity_substitution=substitute_entities,
            void_element_close_prefix="",
            empty_attributes_are_booleans=True,
        )

    def attributes(self, tag):
        if tag.attrs is None:
            return []
        return [(key, None if value == "" else value) for key, value in tag.attrs.items()]


FORMATTER = SlimFormatter()


def render_document(doc: BeautifulSoup) -> str:
    """Render the whole document tree as an HTML string."""
    return doc.decode(eventual_encoding=None, formatter=FORMATTER)
