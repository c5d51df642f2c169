"""Generic syntax tree shared by all frontends and checkers."""

from guardlint.syntax.nodes import (
    Binary,
    Block,
    Call,
    Cast,
    Expr,
    FieldAccess,
    Function,
    If,
    Index,
    Let,
    Literal,
    LiteralKind,
    MethodCall,
    Module,
    Name,
    Node,
    Opaque,
    Truthy,
    Paren,
    Range,
    Span,
    Unary,
    iter_children,
    walk,
)
from guardlint.syntax.render import render
from guardlint.syntax.visitor import NodeVisitor

__all__ = [
    "Binary",
    "Block",
    "Call",
    "Cast",
    "Expr",
    "FieldAccess",
    "Function",
    "If",
    "Index",
    "Let",
    "Literal",
    "LiteralKind",
    "MethodCall",
    "Module",
    "Name",
    "Node",
    "NodeVisitor",
    "Opaque",
    "Truthy",
    "Paren",
    "Range",
    "Span",
    "Unary",
    "iter_children",
    "render",
    "walk",
]
