"""Output model: styled text runs and the documents that hold them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from styleruns.styles import StyleState


@dataclass(frozen=True)
class TextRun:
    """A piece of text annotated with the one style it is rendered in.

    `content` is the raw text of the source text node, whitespace included.
    """

    style: StyleState
    content: str

    @classmethod
    def from_dict(cls, run_dict: dict[str, Any]) -> TextRun:
        """Restore a run from its `.to_dict()` form.

        Raises `ValueError` when the style is not one of the four known style names.
        """
        return cls(style=StyleState(run_dict["style"]), content=run_dict["content"])

    def to_dict(self) -> dict[str, str]:
        return {"style": self.style.value, "content": self.content}


@dataclass(frozen=True)
class Document:
    """The runs extracted from one top-level container, in document order.

    A document is never empty; a container that produces no runs produces no document.
    """

    content: tuple[TextRun, ...]

    @classmethod
    def from_runs(cls, runs: Iterable[TextRun]) -> Document:
        return cls(content=tuple(runs))

    @classmethod
    def from_dict(cls, document_dict: dict[str, Any]) -> Document:
        return cls.from_runs(TextRun.from_dict(r) for r in document_dict.get("content", []))

    @property
    def text(self) -> str:
        """Concatenated content of all runs."""
        return "".join(run.content for run in self.content)

    def to_dict(self) -> dict[str, Any]:
        return {"content": [run.to_dict() for run in self.content]}
