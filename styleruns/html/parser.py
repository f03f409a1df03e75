# pyright: reportPrivateUsage=false

"""Provides the tree parser that turns an HTML fragment into `Node` objects.

`lxml` does the actual parsing. Its tree does not have text nodes though; text lives on the element
it follows. Consider:

    <div>Text <b>bold child</b> tail of child</div>

- The text of the `<div>` element (`div.text`) is "Text ".
- `b.text` is "bold child".
- `b.tail` is " tail of child". Tail text is _accessed_ via the element that precedes it but
  does not belong to it; it is not bold here.

This module converts that shape into the generic one the run extractor walks, where each piece of
text is a separate text node in document order:

    div
      "Text "
      b
        "bold child"
      " tail of child"

Text is exposed exactly as `lxml` provides it, whitespace included. Character references like
`&amp;` are already decoded by then.
"""

from __future__ import annotations

from typing import Iterator, Optional, cast

from lxml import etree

from styleruns.constants import STRIPPED_TAGS
from styleruns.documents.nodes import Node
from styleruns.logger import trace_logger

# -- `huge_tree` lifts the libxml2 nesting-depth limit, which otherwise drops deeper content --
html_parser = etree.HTMLParser(remove_comments=True, huge_tree=True)


def parse_html_fragment(html_text: str) -> list[Node]:
    """Top-level nodes of `html_text`, in document order.

    None of the returned nodes has a parent. An empty or whitespace-only fragment produces no
    nodes.
    """
    # -- parser rejects an empty str, nip that edge-case in the bud here --
    if not html_text.strip():
        return []

    return _child_nodes(_fragment_root(html_text))


def _fragment_root(html_text: str) -> etree._Element:
    """The element whose children are the top-level nodes of the fragment.

    `lxml` wraps a fragment in `<html><body>` so that is normally the `<body>` element.
    """
    # NOTE - `lxml` will not parse a `str` that includes an XML encoding declaration and raises:
    #     ValueError: Unicode strings with encoding declaration are not supported. ...
    # This is not valid HTML (would be in XHTML), but browsers accept it so we work around it by
    # UTF-8 encoding the str and parsing those bytes.
    try:
        root = etree.fromstring(html_text, html_parser)
    except ValueError:
        root = etree.fromstring(html_text.encode("utf-8"), html_parser)

    # -- a parse of something like a lone comment produces no tree at all --
    if root is None:
        return etree.Element("body")

    etree.strip_elements(root, *STRIPPED_TAGS, with_tail=False)

    if (body := root.find(".//body")) is not None:
        return cast(etree._Element, body)
    return root


def _child_nodes(element: etree._Element) -> list[Node]:
    """Nodes for the text, each child, and each child tail of `element`, descendants included.

    A `Node` is immutable, so an element node can only be built once all of its children are.
    Each open element is kept on an explicit stack with the child nodes collected so far, and
    becomes a node in its parent's list when its last child is done.
    """
    stack: list[tuple[etree._Element, Iterator[etree._Element], list[Node]]] = [
        (element, iter(element), _text_nodes(element.text))
    ]

    while True:
        current, children, nodes = stack[-1]
        child = next(children, None)

        if child is None:
            stack.pop()
            if not stack:
                return nodes
            enclosing_nodes = stack[-1][2]
            enclosing_nodes.append(_element_node(current, nodes))
            enclosing_nodes.extend(_text_nodes(current.tail))
        # -- a processing instruction or entity is not an element but can still have a tail --
        elif not isinstance(child.tag, str):
            trace_logger.detail("skipping non-element node %r", child)  # type: ignore
            nodes.extend(_text_nodes(child.tail))
        else:
            stack.append((child, iter(child), _text_nodes(child.text)))


def _element_node(element: etree._Element, children: list[Node]) -> Node:
    """Element node for `element` having the already-built `children`."""
    return Node.element(
        tag_name=cast(str, element.tag),
        attributes={str(k): str(v) for k, v in element.attrib.items()},
        children=children,
    )


def _text_nodes(text: Optional[str]) -> list[Node]:
    """A single text node for `text`, or none when there is no text."""
    return [Node.text_node(text)] if text else []
