"""Option resolution and environment configuration."""

import logging
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from bs4 import BeautifulSoup, Tag
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from htmlslim.exceptions import ConfigurationError, generate_correlation_id
from htmlslim.models import SlimOptions
from htmlslim.patterns import ElementMatcher, compile_pattern, compile_selector

LOGGER = logging.getLogger(__name__)

ENV_PREFIX = "HTMLSLIM_"
ENV_FILE = ".env"

# Attribute names always removed when the matching category is enabled
STYLE_ATTRIBUTE = "style"
EVENT_HANDLER_PATTERN = re.compile(r"^on\w+$", re.IGNORECASE)


@dataclass(frozen=True)
class SlimConfig:
    """Immutable, fully compiled configuration for one slim transform."""

    remove_script: bool = False
    remove_ld_json: bool = False
    remove_style: bool = False
    remove_comment: bool = True
    remove_template: bool = False
    collapse_space: bool = True
    tag_pattern: re.Pattern[str] | None = None
    attr_pattern: re.Pattern[str] | None = None
    selector: ElementMatcher | None = None
    walk: Callable[[Tag], Any] | None = None
    root: Callable[[BeautifulSoup], Any] | None = None

    @property
    def event_pattern(self) -> re.Pattern[str] | None:
        """on* handler attributes go together with scripts."""
        return EVENT_HANDLER_PATTERN if self.remove_script else None

    @property
    def removed_attributes(self) -> frozenset[str]:
        """Attribute names removed on every element."""
        return frozenset({STYLE_ATTRIBUTE}) if self.remove_style else frozenset()


def build_options(options: SlimOptions | Mapping[str, Any] | None = None, **overrides: Any) -> SlimOptions:
    """
    Build validated options from a model, a mapping and/or keyword overrides.

    Args:
        options: Existing options model or a plain mapping (aliases accepted).
        **overrides: Individual option values; these take precedence.

    Returns:
        Validated SlimOptions.

    Raises:
        ConfigurationError: If a value has the wrong type or a key is unknown.
    """
    if isinstance(options, SlimOptions):
        if not overrides:
            return options
        data: dict[str, Any] = {name: getattr(options, name) for name in options.model_fields_set}
    else:
        data = dict(options or {})
    data.update(overrides)

    try:
        return SlimOptions.model_validate(data)
    except ValidationError as e:
        correlation_id = generate_correlation_id()
        fields = ", ".join(".".join(str(part) for part in err["loc"]) or "options" for err in e.errors())
        raise ConfigurationError(
            f"Invalid slim options: {fields}",
            option=fields,
            correlation_id=correlation_id,
            context={"errors": str(e)},
        ) from e


def resolve_options(options: SlimOptions) -> SlimConfig:
    """
    Compile options into a SlimConfig.

    Patterns and the selector are compiled here, so configuration errors
    surface before any markup is parsed.

    Args:
        options: Validated options.

    Returns:
        SlimConfig ready for the walker.

    Raises:
        InvalidPatternError: If ``tag`` or ``attr`` is not a valid regex.
        InvalidSelectorError: If ``selector`` is not a valid CSS selector.
    """
    config = SlimConfig(
        remove_script=options.script,
        remove_ld_json=options.ld_json,
        remove_style=options.style,
        remove_comment=options.comment,
        remove_template=options.template,
        collapse_space=options.space,
        tag_pattern=compile_pattern(options.tag, "tag"),
        attr_pattern=compile_pattern(options.attr, "attr"),
        selector=compile_selector(options.selector),
        walk=options.walk,
        root=options.root,
    )
    LOGGER.debug(
        f"Resolved options: script={config.remove_script} ld_json={config.remove_ld_json} "
        f"style={config.remove_style} comment={config.remove_comment} template={config.remove_template} "
        f"space={config.collapse_space} tag={options.tag!r} attr={options.attr!r} selector={options.selector!r}"
    )
    return config


class EnvSettings(BaseSettings):
    """Option values from HTMLSLIM_* variables and the .env file.

    Every field is optional; None means the variable is not set, so the
    caller's own default (or command-line value) applies.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
    )

    script: bool | None = None
    ld_json: bool | None = None
    style: bool | None = None
    comment: bool | None = None
    template: bool | None = None
    space: bool | None = None
    tag: str | None = None
    attr: str | None = None
    selector: str | None = None


def env_var_name(option: str) -> str:
    """Environment variable for an option, e.g. ld_json -> HTMLSLIM_LD_JSON."""
    return f"{ENV_PREFIX}{option.upper()}"


def options_from_env(env_file: Path | str | None = ENV_FILE) -> dict[str, Any]:
    """
    Collect option values from HTMLSLIM_* environment variables.

    Values from the .env file are used only where the environment does not
    set the same variable. Empty values count as unset.

    Args:
        env_file: .env path, relative to the working directory. None skips it.

    Returns:
        Mapping of option names to values, containing only the options set.

    Raises:
        ConfigurationError: If a variable cannot be converted (e.g. a boolean
            variable holding unrecognised text).
    """
    try:
        settings = EnvSettings(_env_file=env_file)
    except ValidationError as e:
        names = [env_var_name(str(err["loc"][0])) for err in e.errors() if err["loc"]]
        error = ConfigurationError(
            f"Invalid value for {', '.join(names) or 'environment'}",
            option=", ".join(names) or None,
            context={"errors": str(e)},
        )
        LOGGER.warning(f"{error.message} [correlation_id={error.correlation_id}]")
        raise error from e

    values = {name: value for name, value in settings.model_dump().items() if value is not None}
    if values:
        LOGGER.debug(f"Options from environment: {sorted(values)}")
    return values
