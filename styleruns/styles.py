"""Style resolution for a single level of the node tree.

Style is modeled as two independent axes, bold and italic, giving four possible `StyleState`
values. This module decides what one inline `style` declaration contributes on each axis. Combining
that with whatever ancestors contributed is the run extractor's job.
"""

from __future__ import annotations

import enum
import re
from typing import NamedTuple

from styleruns.constants import BOLD_WEIGHT_KEYWORDS, BOLD_WEIGHT_THRESHOLD

# -- value of the first `font-weight` declaration, up to the next `;` or end of string --
_FONT_WEIGHT_VALUE_RE = re.compile(r"font-weight\s*:([^;]*)")
_INTEGER_RE = re.compile(r"[+-]?\d+")


class StyleState(enum.Enum):
    """Effective visual style of a text run.

    The value is the form used in serialized output.
    """

    NORMAL = "normal"
    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold-italic"

    @classmethod
    def from_axes(cls, is_bold: bool, is_italic: bool) -> StyleState:
        """The style having exactly the axes specified."""
        if is_bold and is_italic:
            return cls.BOLD_ITALIC
        if is_bold:
            return cls.BOLD
        if is_italic:
            return cls.ITALIC
        return cls.NORMAL

    @property
    def is_bold(self) -> bool:
        return self in (StyleState.BOLD, StyleState.BOLD_ITALIC)

    @property
    def is_italic(self) -> bool:
        return self in (StyleState.ITALIC, StyleState.BOLD_ITALIC)

    def combine(self, other: StyleState) -> StyleState:
        """Axis-wise OR of this style and `other`.

        An axis set on either side stays set; combining never clears an axis.
        """
        return StyleState.from_axes(
            self.is_bold or other.is_bold, self.is_italic or other.is_italic
        )


class StyleVerdict(NamedTuple):
    """What an inline style declaration says about each style axis."""

    is_bold: bool
    is_italic: bool

    @property
    def style(self) -> StyleState:
        return StyleState.from_axes(self.is_bold, self.is_italic)


def resolve_style_declaration(style_declaration: str) -> StyleVerdict:
    """Decide the bold and italic axes from an inline CSS declaration string.

    Italic is detected by the substring "italic" appearing anywhere in the declaration. This is
    deliberately loose and also matches unrelated values that happen to contain that word.

    Bold is decided by the first `font-weight` declaration only. A numeric weight is bold when
    above 400; otherwise the keywords "bold" and "bolder" (any case) are bold. Any other value,
    including a `font-weight` with no value at all, is not bold.
    """
    return StyleVerdict(
        is_bold=_is_bold(style_declaration), is_italic="italic" in style_declaration
    )


def _is_bold(style_declaration: str) -> bool:
    """True when the first `font-weight` in `style_declaration` renders text bold."""
    if "font-weight" not in style_declaration:
        return False

    match = _FONT_WEIGHT_VALUE_RE.search(style_declaration)
    if match is None:
        return False

    value = match.group(1).strip()
    if _INTEGER_RE.fullmatch(value):
        return int(value) > BOLD_WEIGHT_THRESHOLD

    return value.lower() in BOLD_WEIGHT_KEYWORDS
