"""htmlslim - strip scripts, styles, comments and other noise from HTML.

Usage:
    from htmlslim import slim

    strip = slim(script=True, style=True, attr=r"^data-v-")
    html = strip(source)
"""

from htmlslim.config import SlimConfig, build_options, options_from_env, resolve_options
from htmlslim.core import slim, slim_document, slim_html
from htmlslim.exceptions import (
    ConfigurationError,
    HtmlSlimError,
    InputError,
    InvalidPatternError,
    InvalidSelectorError,
)
from htmlslim.models import SlimOptions, SlimResult, SlimStats

__version__ = "0.3.0"

__all__ = [
    "ConfigurationError",
    "HtmlSlimError",
    "InputError",
    "InvalidPatternError",
    "InvalidSelectorError",
    "SlimConfig",
    "SlimOptions",
    "SlimResult",
    "SlimStats",
    "build_options",
    "options_from_env",
    "resolve_options",
    "slim",
    "slim_document",
    "slim_html",
]
