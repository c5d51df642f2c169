"""Generic syntax tree consumed by the guard analysis.
Frontends lower language-specific parse trees into this closed set of node
classes. The analysis never looks at source text directly; it only matches
on these classes and on their rendered form (see ``render.py``).
Every node is a frozen dataclass so trees can be shared between checkers.
Spans are excluded from equality: two subtrees with the same shape compare
equal regardless of where they appear.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto


@dataclass(frozen=True)
class Span:
    """Source position of a node (both fields 1-indexed)."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class LiteralKind(Enum):
    """Kinds of literal values."""

    INT = auto()
    FLOAT = auto()
    STR = auto()
    BOOL = auto()
    OTHER = auto()


class Node:
    """Base class of every syntax tree node."""

    span: Span | None


class Expr(Node):
    """Base class of expression nodes."""


@dataclass(frozen=True)
class Name(Expr):
    ident: str
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Literal(Expr):
    """A literal. ``text`` is the source spelling, ``value`` the parsed value."""

    kind: LiteralKind
    value: int | float | str | bool | None
    text: str
    span: Span | None = field(default=None, compare=False, repr=False)

    @property
    def is_numeric(self) -> bool:
        return self.kind in (LiteralKind.INT, LiteralKind.FLOAT) and self.value is not None


@dataclass(frozen=True)
class Paren(Expr):
    inner: Expr
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Unary(Expr):
    op: str
    operand: Expr
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Binary(Expr):
    op: str
    left: Expr
    right: Expr
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class MethodCall(Expr):
    receiver: Expr
    method: str
    args: tuple[Expr, ...] = ()
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Call(Expr):
    func: Expr
    args: tuple[Expr, ...] = ()
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class FieldAccess(Expr):
    value: Expr
    name: str
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Index(Expr):
    value: Expr
    index: Expr
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Range(Expr):
    """A range such as ``1..``, ``..n`` or ``a..=b``; both bounds optional."""

    start: Expr | None = None
    end: Expr | None = None
    inclusive: bool = False
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Cast(Expr):
    value: Expr
    type_name: str
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Block(Expr):
    body: tuple[Node, ...] = ()
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class If(Expr):
    """A conditional. ``orelse`` is a block, a nested ``If`` (else-if) or None."""

    condition: Expr
    then: Block
    orelse: Block | If | None = None
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Opaque(Expr):
    """Any construct the analysis has no rule for.
    The children are still walked, so risky operations nested inside
    closures, macros, loops or returns are reported.
    """

    kind: str
    text: str
    children: tuple[Node, ...] = ()
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Truthy(Expr):
    """A bare value used as a condition (Python ``if items:``)."""

    operand: Expr
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Let(Node):
    """A local binding of a single name (``let n = v.len();`` / ``n = len(v)``)."""

    target: str
    value: Expr | None = None
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Function(Node):
    name: str
    body: Block
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Module(Node):
    items: tuple[Node, ...] = ()
    span: Span | None = field(default=None, compare=False, repr=False)


def iter_children(node: Node) -> Iterator[Node]:
    """Yield the direct children of ``node`` in evaluation order."""
    if isinstance(node, (Name, Literal)):
        return
    if isinstance(node, Paren):
        yield node.inner
    elif isinstance(node, Unary):
        yield node.operand
    elif isinstance(node, Binary):
        yield node.left
        yield node.right
    elif isinstance(node, MethodCall):
        yield node.receiver
        yield from node.args
    elif isinstance(node, Call):
        yield node.func
        yield from node.args
    elif isinstance(node, FieldAccess):
        yield node.value
    elif isinstance(node, Index):
        yield node.value
        yield node.index
    elif isinstance(node, Range):
        if node.start is not None:
            yield node.start
        if node.end is not None:
            yield node.end
    elif isinstance(node, Cast):
        yield node.value
    elif isinstance(node, Block):
        yield from node.body
    elif isinstance(node, If):
        yield node.condition
        yield node.then
        if node.orelse is not None:
            yield node.orelse
    elif isinstance(node, Truthy):
        yield node.operand
    elif isinstance(node, Opaque):
        yield from node.children
    elif isinstance(node, Let):
        if node.value is not None:
            yield node.value
    elif isinstance(node, Function):
        yield node.body
    elif isinstance(node, Module):
        yield from node.items


def walk(node: Node) -> Iterator[Node]:
    """Yield ``node`` and all of its descendants, depth first."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(list(iter_children(current))))


__all__ = [
    "Span",
    "LiteralKind",
    "Node",
    "Expr",
    "Name",
    "Literal",
    "Paren",
    "Unary",
    "Binary",
    "MethodCall",
    "Call",
    "FieldAccess",
    "Index",
    "Range",
    "Cast",
    "Block",
    "If",
    "Opaque",
    "Truthy",
    "Let",
    "Function",
    "Module",
    "iter_children",
    "walk",
]
