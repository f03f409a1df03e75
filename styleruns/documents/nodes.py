"""Generic HTML node tree walked by the run extractor.

The tree parser produces these; the extractor only reads them. Optional fields are normalized once,
here at construction, so the walker never has to check for a missing `attributes` mapping, missing
`children`, or undefined text.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from typing_extensions import TypeAlias

Attributes: TypeAlias = Mapping[str, str]
"""Raw attribute values by attribute name. Read-only once on a node."""

_EMPTY_ATTRIBUTES: Attributes = MappingProxyType({})


class NodeKind(enum.Enum):
    """The two shapes a node can take."""

    ELEMENT = "element"
    TEXT = "text"


@dataclass(frozen=True)
class Node:
    """One element or text node of a parsed HTML fragment.

    Use `Node.element()` and `Node.text_node()` rather than calling the constructor directly.
    Those enforce that a text node never has children and an element never has text. The
    constructor itself replaces any `None` collection with an empty one so no reader has to check.
    """

    kind: NodeKind
    tag_name: Optional[str] = None
    attributes: Attributes = field(default_factory=lambda: _EMPTY_ATTRIBUTES)
    children: tuple[Node, ...] = ()
    text: Optional[str] = None

    def __post_init__(self):
        if self.attributes is None:
            object.__setattr__(self, "attributes", _EMPTY_ATTRIBUTES)
        if self.children is None:
            object.__setattr__(self, "children", ())
        elif not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))
        if self.kind is NodeKind.TEXT and self.text is None:
            object.__setattr__(self, "text", "")

    @classmethod
    def element(
        cls,
        tag_name: str,
        attributes: Optional[Mapping[str, str]] = None,
        children: Optional[Iterable[Node]] = None,
    ) -> Node:
        """An element node. Absent `attributes` or `children` become empty."""
        return cls(
            kind=NodeKind.ELEMENT,
            tag_name=tag_name.lower(),
            attributes=MappingProxyType(dict(attributes)) if attributes else _EMPTY_ATTRIBUTES,
            children=tuple(children) if children else (),
        )

    @classmethod
    def text_node(cls, text: Optional[str]) -> Node:
        """A text node. Undefined text becomes the empty string."""
        return cls(kind=NodeKind.TEXT, text=text or "")

    @property
    def is_element(self) -> bool:
        return self.kind is NodeKind.ELEMENT

    @property
    def is_text(self) -> bool:
        return self.kind is NodeKind.TEXT

    @property
    def style(self) -> str:
        """The raw inline `style` attribute, the empty string when there is none."""
        return self.attributes.get("style", "")
