"""Data models for htmlslim."""

import re
from collections.abc import Callable
from typing import Any

from bs4 import BeautifulSoup, Tag
from pydantic import BaseModel, ConfigDict, Field, model_validator

# =============================================================================
# Options
# =============================================================================


class SlimOptions(BaseModel):
    """What to strip from a document.

    Usage:
        # Defaults: drop comments and collapse whitespace, keep everything else
        options = SlimOptions()

        # Drop scripts (but not JSON-LD), styles and Vue scoped-style attributes
        options = SlimOptions(script=True, style=True, attr=r"^data-v-")

        # Camel-case names from JavaScript-style configs are accepted too
        options = SlimOptions.model_validate({"ldJson": True, "select": "nav"})
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    # <script> (except JSON-LD), on* event handler attributes, <link rel=preload as=script>
    script: bool = False

    # <script type="application/ld+json">
    ld_json: bool = Field(default=False, alias="ldJson")

    # <style>, style="" attributes, <link rel=stylesheet>, <link rel=preload as=style>
    style: bool = False

    # <!-- ... -->
    comment: bool = True

    # <template>
    template: bool = False

    # Elements whose tag name matches are removed
    tag: str | re.Pattern[str] | None = None

    # Attributes whose name matches are removed
    attr: str | re.Pattern[str] | None = None

    # Elements matching this CSS selector are removed
    selector: str | None = None

    # Collapse insignificant whitespace
    space: bool = True

    # Called once per visited element; a truthy return removes it
    walk: Callable[[Tag], Any] | None = None

    # Called once with the parsed document before anything is removed
    root: Callable[[BeautifulSoup], Any] | None = None

    @model_validator(mode="before")
    @classmethod
    def _split_select(cls, data: Any) -> Any:
        """Map the ``select`` alias onto ``selector`` (text) or ``walk`` (callable)."""
        if not isinstance(data, dict) or "select" not in data:
            return data
        data = dict(data)
        select = data.pop("select")
        if callable(select):
            data.setdefault("walk", select)
        elif select is not None:
            data.setdefault("selector", select)
        return data


# =============================================================================
# Results
# =============================================================================


class SlimStats(BaseModel):
    """Counters collected during one slim pass."""

    elements_removed: int = 0
    comments_removed: int = 0
    attributes_removed: int = 0
    texts_merged: int = 0

    @property
    def total_removed(self) -> int:
        return self.elements_removed + self.comments_removed + self.attributes_removed


class SlimResult(BaseModel):
    """Result of slimming one document."""

    html: str
    input_length: int
    stats: SlimStats = Field(default_factory=SlimStats)

    @property
    def output_length(self) -> int:
        return len(self.html)
