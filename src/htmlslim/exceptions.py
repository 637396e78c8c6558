"""Exception hierarchy for htmlslim.

Every error carries a short correlation ID, repeated in the log line written
when it is raised, and a ``context`` dict naming the offending option.
Errors come out of option resolution and, in the CLI, reading the input;
slimming markup never raises.
"""

import uuid
from typing import Any


def generate_correlation_id() -> str:
    """Return the first 8 characters of a random UUID."""
    return str(uuid.uuid4())[:8]


class HtmlSlimError(Exception):
    """Base class for htmlslim errors."""

    def __init__(
        self,
        message: str,
        correlation_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """
        Args:
            message: Human-readable description, shown by the CLI.
            correlation_id: ID to reuse; a new one is generated when omitted.
            context: Extra details (option name, offending value).
        """
        self.message = message
        self.correlation_id = correlation_id or generate_correlation_id()
        self.context = context or {}
        super().__init__(f"{message} [correlation_id={self.correlation_id}]")


class ConfigurationError(HtmlSlimError):
    """An option (or HTMLSLIM_* variable) has an unusable value."""

    def __init__(
        self,
        message: str,
        option: str | None = None,
        correlation_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        context = dict(context or {})
        if option is not None:
            context["option"] = option
        super().__init__(message, correlation_id=correlation_id, context=context)


class InvalidPatternError(ConfigurationError):
    """A ``tag`` or ``attr`` pattern is not a valid regular expression."""

    def __init__(
        self,
        message: str,
        option: str | None = None,
        pattern: str | None = None,
        correlation_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        context = dict(context or {})
        if pattern is not None:
            context["pattern"] = pattern
        super().__init__(message, option=option, correlation_id=correlation_id, context=context)


class InvalidSelectorError(ConfigurationError):
    """The ``selector`` option is not a valid CSS selector."""

    def __init__(
        self,
        message: str,
        selector: str | None = None,
        correlation_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        context = dict(context or {})
        if selector is not None:
            context["selector"] = selector
        super().__init__(message, option="selector", correlation_id=correlation_id, context=context)


class InputError(HtmlSlimError):
    """The input document could not be read as text."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        correlation_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        context = dict(context or {})
        if source is not None:
            context["source"] = source
        super().__init__(message, correlation_id=correlation_id, context=context)
