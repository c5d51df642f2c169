"""Textual rendering of syntax tree nodes.
The output is Rust-flavoured regardless of the frontend that built the tree
(``len(v)`` from Python renders as ``v.len()``) so normalized keys from both
frontends share one vocabulary.
"""

from __future__ import annotations

from guardlint.syntax.nodes import (
    Binary,
    Block,
    Call,
    Cast,
    FieldAccess,
    Function,
    If,
    Index,
    Let,
    Literal,
    MethodCall,
    Module,
    Name,
    Node,
    Opaque,
    Paren,
    Range,
    Truthy,
    Unary,
)


def _args(args) -> str:
    return ", ".join(render(arg) for arg in args)


def render(node: Node | None) -> str:
    """Render ``node`` back to source-like text."""
    if node is None:
        return ""
    if isinstance(node, Name):
        return node.ident
    if isinstance(node, Literal):
        return node.text
    if isinstance(node, Paren):
        return f"({render(node.inner)})"
    if isinstance(node, Unary):
        return f"{node.op}{render(node.operand)}"
    if isinstance(node, Binary):
        return f"{render(node.left)} {node.op} {render(node.right)}"
    if isinstance(node, MethodCall):
        return f"{render(node.receiver)}.{node.method}({_args(node.args)})"
    if isinstance(node, Call):
        return f"{render(node.func)}({_args(node.args)})"
    if isinstance(node, FieldAccess):
        return f"{render(node.value)}.{node.name}"
    if isinstance(node, Index):
        return f"{render(node.value)}[{render(node.index)}]"
    if isinstance(node, Range):
        op = "..=" if node.inclusive else ".."
        return f"{render(node.start)}{op}{render(node.end)}"
    if isinstance(node, Cast):
        return f"{render(node.value)} as {node.type_name}"
    if isinstance(node, Block):
        inner = " ".join(render(stmt) for stmt in node.body)
        return f"{{ {inner} }}" if inner else "{}"
    if isinstance(node, If):
        text = f"if {render(node.condition)} {render(node.then)}"
        if node.orelse is not None:
            text += f" else {render(node.orelse)}"
        return text
    if isinstance(node, Let):
        if node.value is None:
            return f"let {node.target};"
        return f"let {node.target} = {render(node.value)};"
    if isinstance(node, Function):
        return f"fn {node.name}() {render(node.body)}"
    if isinstance(node, Module):
        return "\n".join(render(item) for item in node.items)
    if isinstance(node, Truthy):
        return render(node.operand)
    if isinstance(node, Opaque):
        return node.text
    return ""


__all__ = ["render"]
