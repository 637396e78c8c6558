"""Public entry points.

The configuration step is separate from the transform so options are
validated and compiled once:

    strip = slim(script=True, style=True)
    for page in pages:
        page.html = strip(page.html)

Each call parses its own tree; nothing is shared between calls.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from htmlslim.config import SlimConfig, build_options, resolve_options
from htmlslim.models import SlimOptions, SlimResult
from htmlslim.parser import parse_document
from htmlslim.serializer import render_document
from htmlslim.walker import Slimmer

LOGGER = logging.getLogger(__name__)


def slim_document(html: str, config: SlimConfig) -> SlimResult:
    """
    Parse, slim and re-serialize one HTML document.

    Args:
        html: HTML source. Malformed markup never raises.
        config: Resolved configuration.

    Returns:
        SlimResult with the output HTML and removal statistics.
    """
    doc = parse_document(html)
    stats = Slimmer(config).run(doc)
    output = render_document(doc)
    LOGGER.debug(f"Slimmed {len(html)} -> {len(output)} characters")
    return SlimResult(html=output, input_length=len(html), stats=stats)


def slim(
    options: SlimOptions | Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> Callable[[str], str]:
    """
    Build an HTML-to-HTML transform.

    Args:
        options: SlimOptions or a mapping of option names (camel-case aliases
            such as ``ldJson`` and ``select`` accepted).
        **kwargs: Individual options; override values in ``options``.

    Returns:
        A function taking an HTML string and returning the slimmed HTML.

    Raises:
        ConfigurationError: If an option has an invalid value.
        InvalidPatternError: If ``tag`` or ``attr`` is not a valid regex.
        InvalidSelectorError: If ``selector`` is not a valid CSS selector.
    """
    config = resolve_options(build_options(options, **kwargs))

    def transform(html: str) -> str:
        return slim_document(html, config).html

    return transform


def slim_html(
    html: str,
    options: SlimOptions | Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> str:
    """One-shot form of :func:`slim`."""
    return slim(options, **kwargs)(html)
