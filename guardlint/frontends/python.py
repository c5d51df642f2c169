"""Python frontend: ``ast`` to the generic syntax tree.
Python spellings are lowered onto the Rust-flavoured vocabulary of the tree
so the same guard shapes are recognized: ``len(v)`` becomes ``v.len()``,
``and``/``or``/``not`` become ``&&``/``||``/``!`` and ``elif`` chains become
nested ``If`` nodes.
"""

from __future__ import annotations

import ast

from guardlint.errors import SourceParseError
from guardlint.syntax.nodes import (
    Binary,
    Block,
    Call,
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
    Span,
    Truthy,
    Unary,
)

BINARY_OPS = {
    ast.Add: "+",
    ast.Sub: "-",
    ast.Mult: "*",
    ast.Div: "/",
    ast.FloorDiv: "//",
    ast.Mod: "%",
    ast.Pow: "**",
    ast.LShift: "<<",
    ast.RShift: ">>",
    ast.BitOr: "|",
    ast.BitXor: "^",
    ast.BitAnd: "&",
    ast.MatMult: "@",
}

COMPARE_OPS = {
    ast.Eq: "==",
    ast.NotEq: "!=",
    ast.Lt: "<",
    ast.LtE: "<=",
    ast.Gt: ">",
    ast.GtE: ">=",
    ast.Is: "is",
    ast.IsNot: "is not",
    ast.In: "in",
    ast.NotIn: "not in",
}

UNARY_OPS = {
    ast.Not: "!",
    ast.USub: "-",
    ast.UAdd: "+",
    ast.Invert: "~",
}

# Operator and context nodes carry no children worth lowering.
_LEAF_TYPES = (ast.expr_context, ast.operator, ast.unaryop, ast.cmpop, ast.boolop)


def _span(node: ast.AST) -> Span | None:
    if not hasattr(node, "lineno"):
        return None
    return Span(node.lineno, node.col_offset + 1)


def _is_text(node: ast.AST) -> bool:
    return isinstance(node, ast.JoinedStr) or (
        isinstance(node, ast.Constant) and isinstance(node.value, (str, bytes))
    )


def _is_len_call(node: ast.AST) -> bool:
    return (
        isinstance(node, ast.Call)
        and isinstance(node.func, ast.Name)
        and node.func.id == "len"
        and len(node.args) == 1
        and not node.keywords
    )


class PythonLowering(ast.NodeVisitor):
    """Lower a Python ``ast`` tree; every ``visit_*`` returns a syntax node."""

    def expr(self, node: ast.AST) -> Expr:
        lowered = self.visit(node)
        if isinstance(lowered, Expr):
            return lowered
        return Opaque(type(node).__name__, "", (lowered,), span=_span(node))

    def test(self, node: ast.expr) -> Expr:
        """Lower an expression in a condition position.
        A bare name, attribute or ``len(x)`` is tested for truthiness.
        """
        lowered = self.expr(node)
        if isinstance(node, (ast.Name, ast.Attribute)) or _is_len_call(node):
            return Truthy(lowered, span=_span(node))
        return lowered

    def block(self, statements: list[ast.stmt]) -> Block:
        span = _span(statements[0]) if statements else None
        return Block(tuple(self.visit(stmt) for stmt in statements), span=span)

    def generic_visit(self, node: ast.AST) -> Opaque:
        children = tuple(
            self.visit(child)
            for child in ast.iter_child_nodes(node)
            if not isinstance(child, _LEAF_TYPES)
        )
        text = ast.unparse(node) if isinstance(node, ast.expr) else type(node).__name__
        return Opaque(type(node).__name__, text, children, span=_span(node))

    def visit_Module(self, node: ast.Module) -> Module:
        return Module(tuple(self.visit(stmt) for stmt in node.body))

    def visit_FunctionDef(self, node: ast.FunctionDef) -> Function:
        return Function(node.name, self.block(node.body), span=_span(node))

    visit_AsyncFunctionDef = visit_FunctionDef

    def visit_If(self, node: ast.If) -> If:
        orelse: Block | If | None = None
        if len(node.orelse) == 1 and isinstance(node.orelse[0], ast.If):
            orelse = self.visit_If(node.orelse[0])
        elif node.orelse:
            orelse = self.block(node.orelse)
        return If(self.test(node.test), self.block(node.body), orelse, span=_span(node))

    def visit_IfExp(self, node: ast.IfExp) -> If:
        return If(
            self.test(node.test),
            Block((self.expr(node.body),), span=_span(node.body)),
            Block((self.expr(node.orelse),), span=_span(node.orelse)),
            span=_span(node),
        )

    def visit_Expr(self, node: ast.Expr) -> Node:
        return self.visit(node.value)

    def visit_Assign(self, node: ast.Assign) -> Node:
        if len(node.targets) == 1 and isinstance(node.targets[0], ast.Name):
            return Let(node.targets[0].id, self.expr(node.value), span=_span(node))
        # The value is evaluated before any subscript target.
        children = (self.expr(node.value),) + tuple(self.expr(t) for t in node.targets)
        return Opaque("Assign", "Assign", children, span=_span(node))

    def visit_AnnAssign(self, node: ast.AnnAssign) -> Node:
        if isinstance(node.target, ast.Name):
            value = self.expr(node.value) if node.value is not None else None
            return Let(node.target.id, value, span=_span(node))
        return self.generic_visit(node)

    def visit_AugAssign(self, node: ast.AugAssign) -> Binary:
        op = BINARY_OPS.get(type(node.op), "?")
        return Binary(op, self.expr(node.target), self.expr(node.value), span=_span(node))

    def visit_BoolOp(self, node: ast.BoolOp) -> Expr:
        op = "&&" if isinstance(node.op, ast.And) else "||"
        result = self.test(node.values[0])
        for value in node.values[1:]:
            result = Binary(op, result, self.test(value), span=_span(node))
        return result

    def visit_Compare(self, node: ast.Compare) -> Expr:
        pairs = []
        left = node.left
        for op, right in zip(node.ops, node.comparators):
            pairs.append(
                Binary(COMPARE_OPS[type(op)], self.expr(left), self.expr(right), span=_span(left))
            )
            left = right
        result = pairs[0]
        for pair in pairs[1:]:
            result = Binary("&&", result, pair, span=_span(node))
        return result

    def visit_BinOp(self, node: ast.BinOp) -> Expr:
        if isinstance(node.op, ast.Mod) and _is_text(node.left):
            # printf-style formatting, not a remainder
            return self.generic_visit(node)
        op = BINARY_OPS.get(type(node.op), "?")
        return Binary(op, self.expr(node.left), self.expr(node.right), span=_span(node))

    def visit_UnaryOp(self, node: ast.UnaryOp) -> Unary:
        if isinstance(node.op, ast.Not):
            return Unary("!", self.test(node.operand), span=_span(node))
        return Unary(UNARY_OPS[type(node.op)], self.expr(node.operand), span=_span(node))

    def visit_Call(self, node: ast.Call) -> Expr:
        args = tuple(self.expr(arg) for arg in node.args)
        args += tuple(self.expr(kw.value) for kw in node.keywords)
        func = node.func
        if _is_len_call(node):
            return MethodCall(args[0], "len", span=_span(node))
        if isinstance(func, ast.Attribute):
            return MethodCall(self.expr(func.value), func.attr, args, span=_span(node))
        return Call(self.expr(func), args, span=_span(node))

    def visit_Attribute(self, node: ast.Attribute) -> FieldAccess:
        return FieldAccess(self.expr(node.value), node.attr, span=_span(node))

    def visit_Subscript(self, node: ast.Subscript) -> Expr:
        if _is_text(node.slice):
            # mapping lookup by key, not sequence indexing
            return self.generic_visit(node)
        if isinstance(node.slice, ast.Slice):
            # slicing clamps to the sequence and never raises
            return self.generic_visit(node)
        return Index(self.expr(node.value), self.expr(node.slice), span=_span(node))

    def visit_Name(self, node: ast.Name) -> Name:
        return Name(node.id, span=_span(node))

    def visit_Constant(self, node: ast.Constant) -> Literal:
        value = node.value
        span = _span(node)
        if isinstance(value, bool):
            return Literal(LiteralKind.BOOL, value, repr(value), span=span)
        if isinstance(value, int):
            return Literal(LiteralKind.INT, value, repr(value), span=span)
        if isinstance(value, float):
            return Literal(LiteralKind.FLOAT, value, repr(value), span=span)
        if isinstance(value, (str, bytes)):
            return Literal(LiteralKind.STR, value, repr(value), span=span)
        return Literal(LiteralKind.OTHER, None, repr(value), span=span)


def parse_python(source: str, path: str | None = None) -> Module:
    """Parse Python source text into a ``Module``.
    Raises:
        SourceParseError: the source has a syntax error
    """
    try:
        tree = ast.parse(source, filename=path or "<source>")
    except SyntaxError as e:
        column = e.offset if e.offset is not None else None
        raise SourceParseError(e.msg, path, e.lineno, column) from e
    return PythonLowering().visit(tree)


__all__ = ["PythonLowering", "parse_python"]
