from typing import Any


class UnrecognizedNodeError(TypeError):
    """Error raised when the node tree contains a node that is neither an element nor text."""

    def __init__(self, node: Any):
        self.node = node
        self.message = (
            f"Expected an element or text node from the tree parser, got {type(node).__name__}: "
            f"{node!r:.80}"
        )
        super().__init__(self.message)
