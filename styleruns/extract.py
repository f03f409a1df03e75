"""Flattens a node tree into an ordered list of styled text runs.

PRINCIPLES

- _Every text node is visited._ The walk is depth-first and left-to-right and descends into every
  child of every element, so the runs appear in document order no matter what came before them.

- _Whitespace-only text is not a run._ Text made only of spaces, tabs, and line-breaks is
  formatting in the HTML source and contributes nothing. Text that does contribute is emitted
  exactly as it appears, its leading and trailing whitespace included.

- _Tags accumulate, CSS replaces._ Style reaches a text node two different ways:
  - A `<b>` or `<i>` element adds its axis to whatever style it is nested in. `<b><i>X</i></b>` is
    bold-italic. Any `style` attribute on the `<b>` or `<i>` itself is ignored.
  - Every other element (`<span>`, `<p>`, `<div>`, `<li>`, `<foobar>`, ...) decides the style of
    its contents from its own `style` attribute alone, discarding what it is nested in. So
    `<b><span style="font-style: italic">X</span></b>` is italic, not bold-italic, and a `<span>`
    with no style at all inside a `<b>` makes its contents normal again.

  These two policies are kept as separate named functions below so the difference stays visible.
  Note that a tag-driven child of a CSS-driven element still adds to whatever that element
  decided, so in `<p><b>X</b></p>` the `X` is bold.
"""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

from styleruns.config import env_config
from styleruns.constants import BOLD_TAG, HTML_WHITESPACE, ITALIC_TAG
from styleruns.documents.nodes import Node
from styleruns.documents.runs import Document, TextRun
from styleruns.errors import UnrecognizedNodeError
from styleruns.logger import trace_logger
from styleruns.styles import StyleState, resolve_style_declaration

# -- style a tag-driven element adds to the style it is nested in --
_TAG_STYLES = {
    BOLD_TAG: StyleState.BOLD,
    ITALIC_TAG: StyleState.ITALIC,
}

# -- end-of-siblings marker; `None` is a value to reject, not an end --
_EXHAUSTED = object()


# ------------------------------------------------------------------------------------------------
# COMBINATION POLICIES
# ------------------------------------------------------------------------------------------------


def accumulate_tag_style(inherited_style: StyleState, tag_style: StyleState) -> StyleState:
    """Style inside a `<b>` or `<i>` element: the inherited style plus the tag's axis."""
    return inherited_style.combine(tag_style)


def replace_with_css_style(inherited_style: StyleState, css_style: StyleState) -> StyleState:
    """Style inside any other element: the element's own CSS verdict, inherited style dropped."""
    return css_style


# ------------------------------------------------------------------------------------------------
# RUN EXTRACTOR
# ------------------------------------------------------------------------------------------------


def extract_runs(
    nodes: Sequence[Node], inherited_style: StyleState = StyleState.NORMAL
) -> list[TextRun]:
    """Text runs for `nodes` and all their descendants, in document order.

    `inherited_style` is the style of the context `nodes` appear in, normal at the top of a tree.
    """
    return list(_iter_runs(nodes, inherited_style))


def _iter_runs(nodes: Sequence[Node], inherited_style: StyleState) -> Iterator[TextRun]:
    # -- (remaining siblings, style) for each open element, so depth never grows the call stack --
    stack: list[tuple[Iterator[Node], StyleState]] = [(iter(nodes), inherited_style)]

    while stack:
        siblings, style = stack[-1]
        node = next(siblings, _EXHAUSTED)

        if node is _EXHAUSTED:
            stack.pop()
        elif not isinstance(node, Node):
            raise UnrecognizedNodeError(node)
        elif node.is_text:
            if run := _text_run(node, style):
                yield run
        elif node.is_element:
            stack.append((iter(node.children), _inside_style(node, style)))
        else:
            raise UnrecognizedNodeError(node)


def _inside_style(element: Node, inherited_style: StyleState) -> StyleState:
    """Style that applies to the children of `element`."""
    tag_style = _TAG_STYLES.get(element.tag_name or "")
    if tag_style is not None:
        return accumulate_tag_style(inherited_style, tag_style)

    css_style = resolve_style_declaration(element.style).style
    trace_logger.detail(  # type: ignore
        "<%s style=%r> resolves to %s", element.tag_name, element.style, css_style.value
    )
    return replace_with_css_style(inherited_style, css_style)


def _text_run(text_node: Node, style: StyleState) -> Optional[TextRun]:
    """Run for `text_node` or None when its text is empty or whitespace-only."""
    text = text_node.text or ""
    if not text.strip(HTML_WHITESPACE):
        return None
    return TextRun(style=style, content=text)


# ------------------------------------------------------------------------------------------------
# DOCUMENT DRIVER
# ------------------------------------------------------------------------------------------------


def extract_documents(
    nodes: Sequence[Node], container_tag: Optional[str] = None
) -> list[Document]:
    """One document for each top-level container in `nodes` that contains any text.

    `nodes` is the top-level node sequence of a fragment, so none of them has a parent. Only
    elements with `container_tag` (default from `STYLERUNS_CONTAINER_TAG`, normally "div") are
    containers; any other top-level node is ignored. The container's own `style` attribute applies
    to its contents like any other CSS-driven element.
    """
    container_tag = (container_tag or env_config.CONTAINER_TAG).lower()
    return list(_iter_documents(nodes, container_tag))


def _iter_documents(nodes: Sequence[Node], container_tag: str) -> Iterator[Document]:
    for node in nodes:
        if not isinstance(node, Node):
            raise UnrecognizedNodeError(node)
        if not node.is_element or node.tag_name != container_tag:
            continue
        if runs := extract_runs([node]):
            yield Document.from_runs(runs)
