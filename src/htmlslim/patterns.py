"""Tag/attribute pattern and CSS selector compilation.

Both are compiled once, when options are resolved, so a bad pattern fails
before any markup is parsed.
"""

import logging
import re
from collections.abc import Callable

import soupsieve
from bs4 import Tag

from htmlslim.exceptions import InvalidPatternError, InvalidSelectorError

LOGGER = logging.getLogger(__name__)

type PatternSource = str | re.Pattern[str]
type ElementMatcher = Callable[[Tag], bool]


def compile_pattern(source: PatternSource | None, option: str) -> re.Pattern[str] | None:
    """Resolve a tag/attribute pattern into a compiled regular expression.

    A plain string is treated as case-insensitive regex source. A compiled
    pattern is used as given, flags included.

    Args:
        source: Regex source, compiled pattern, or None/empty for "not set".
        option: Option name, used in error messages.

    Returns:
        Compiled pattern, or None when not set.

    Raises:
        InvalidPatternError: If the string is not a valid regular expression.
    """
    if source is None:
        return None
    if isinstance(source, re.Pattern):
        return source
    if not source:
        return None

    try:
        return re.compile(source, re.IGNORECASE)
    except re.error as e:
        error = InvalidPatternError(
            f"Invalid {option} pattern {source!r}: {e}",
            option=option,
            pattern=source,
        )
        LOGGER.warning(f"{error.message} [correlation_id={error.correlation_id}]")
        raise error from e


def pattern_matches(pattern: re.Pattern[str] | None, name: str) -> bool:
    """Test a name against a compiled pattern (search semantics)."""
    return pattern is not None and pattern.search(name) is not None


def compile_selector(selector: str | None) -> ElementMatcher | None:
    """Compile a CSS selector into a predicate over elements.

    Supports what soupsieve supports: type, class, id and attribute
    selectors, descendant/child/sibling combinators and pseudo-classes.

    Args:
        selector: Selector text, or None/empty for "not set".

    Returns:
        A callable returning True for matching elements, or None when not set.

    Raises:
        InvalidSelectorError: If the selector cannot be parsed.
    """
    if not selector:
        return None

    try:
        compiled = soupsieve.compile(selector)
    except soupsieve.SelectorSyntaxError as e:
        error = InvalidSelectorError(f"Invalid selector {selector!r}: {e}", selector=selector)
        LOGGER.warning(f"{error.message} [correlation_id={error.correlation_id}]")
        raise error from e

    return compiled.match
