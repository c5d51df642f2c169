"""Visitor base class for the generic syntax tree (mirrors ``ast.NodeVisitor``)."""

from __future__ import annotations

from typing import Any

from guardlint.syntax.nodes import Node, iter_children


class NodeVisitor:
    """Walk a syntax tree, dispatching to ``visit_<ClassName>`` methods.
    Subclasses override the methods for the node classes they care about and
    call ``generic_visit`` to continue into the children.
    """

    def visit(self, node: Node) -> Any:
        method = getattr(self, "visit_" + type(node).__name__, self.generic_visit)
        return method(node)

    def generic_visit(self, node: Node) -> None:
        for child in iter_children(node):
            self.visit(child)


__all__ = ["NodeVisitor"]
