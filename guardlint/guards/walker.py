"""The guarded walker: one traversal shared by every flow-sensitive rule.
The walker owns a ``GuardScope`` and keeps it in step with the position in
the tree. Subclasses override ``on_binary`` and ``on_index``, which run
before the node's operands are visited, and query ``self.scope`` there.
"""

from __future__ import annotations

from collections.abc import Iterable

from guardlint.guards.extract import extract
from guardlint.guards.facts import Fact, LengthAlias
from guardlint.guards.normalize import length_receiver, normalize
from guardlint.guards.scope import GuardScope
from guardlint.logging import LogLevel, get_logger
from guardlint.syntax.nodes import (
    Binary,
    Block,
    Function,
    If,
    Index,
    Let,
    Module,
)
from guardlint.syntax.visitor import NodeVisitor


class GuardedWalker(NodeVisitor):
    """Visit a tree with the facts of the enclosing checks active."""

    def __init__(self) -> None:
        self.scope = GuardScope()
        self._logger = get_logger()

    def on_binary(self, node: Binary) -> None:
        pass

    def on_index(self, node: Index) -> None:
        pass

    def _active(self, facts: Iterable[Fact], reason: str):
        facts = tuple(facts)
        if facts and self._logger.enabled_for(LogLevel.TRACE):
            for fact in facts:
                self._logger.trace(f"{reason}: {fact.describe()}", category="scope")
        return self.scope.active(facts)

    def visit_If(self, node: If) -> None:
        facts = extract(node.condition)
        with self._active(facts.then_facts, "condition"):
            self.visit(node.condition)
        with self._active(facts.then_facts, "then"):
            self.visit(node.then)
        if node.orelse is not None:
            with self._active(facts.else_facts, "else"):
                self.visit(node.orelse)

    def visit_Binary(self, node: Binary) -> None:
        self.on_binary(node)
        if node.op == "&&":
            self.visit(node.left)
            with self._active(extract(node.left).then_facts, "&&"):
                self.visit(node.right)
        elif node.op == "||":
            self.visit(node.left)
            with self._active(extract(node.left).else_facts, "||"):
                self.visit(node.right)
        else:
            self.generic_visit(node)

    def visit_Index(self, node: Index) -> None:
        self.on_index(node)
        self.generic_visit(node)

    def visit_Block(self, node: Block) -> None:
        with self.scope.frame():
            self.generic_visit(node)

    def visit_Module(self, node: Module) -> None:
        with self.scope.frame():
            self.generic_visit(node)

    def visit_Let(self, node: Let) -> None:
        self.generic_visit(node)
        if node.value is None:
            return
        receiver = length_receiver(node.value)
        if receiver is None:
            return
        alias = Fact(LengthAlias(node.target, normalize(receiver)), node.span)
        if self._logger.enabled_for(LogLevel.TRACE):
            self._logger.trace(f"let: {alias.describe()}", category="scope")
        # Popped by the enclosing block's frame.
        self.scope.push((alias,))

    def visit_Function(self, node: Function) -> None:
        outer, self.scope = self.scope, GuardScope()
        try:
            self.visit(node.body)
        finally:
            self.scope = outer


__all__ = ["GuardedWalker"]
