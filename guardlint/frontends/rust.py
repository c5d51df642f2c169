"""Rust frontend: tree-sitter CST to the generic syntax tree.
Only the constructs the guard analysis reasons about get their own node
class. Everything else (loops, matches, closures, macros, items other than
functions) becomes an ``Opaque`` node whose named children are still
lowered, so risky operations inside them are still visited.
"""

from __future__ import annotations

import re

import tree_sitter_rust as tsrust
from tree_sitter import Language, Node, Parser

from guardlint.errors import SourceParseError
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
    Opaque,
    Paren,
    Range,
    Span,
    Unary,
)
from guardlint.syntax.nodes import Node as SyntaxNode

RUST_LANGUAGE = Language(tsrust.language())

SKIPPED = frozenset({"line_comment", "block_comment", "attribute_item", "inner_attribute_item"})

NAME_NODES = frozenset(
    {"identifier", "self", "field_identifier", "scoped_identifier", "metavariable", "super", "crate"}
)

RANGE_OPERATORS = ("..=", "...", "..")

_INT_PATTERN = re.compile(
    r"^(0x[0-9a-f]+|0o[0-7]+|0b[01]+|[0-9]+)(?:[iu](?:8|16|32|64|128|size))?$"
)
_FLOAT_SUFFIX = re.compile(r"f(?:32|64)$")


def _text(node: Node) -> str:
    return node.text.decode("utf8", errors="replace")


def _span(node: Node) -> Span:
    row, column = node.start_point
    return Span(row + 1, column + 1)


def _parse_int(text: str) -> int | None:
    match = _INT_PATTERN.match(text.replace("_", "").lower())
    if match is None:
        return None
    digits = match.group(1)
    base = {"0x": 16, "0o": 8, "0b": 2}.get(digits[:2], 10)
    return int(digits[2:] if base != 10 else digits, base)


def _parse_float(text: str) -> float | None:
    cleaned = _FLOAT_SUFFIX.sub("", text.replace("_", ""))
    try:
        return float(cleaned)
    except ValueError:
        return None


def _first_error(node: Node) -> Node | None:
    if node.is_error or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error(child)
            if found is not None:
                return found
    return None


class RustLowering:
    """Lower one tree-sitter Rust tree; dispatches on ``node.type``."""

    def lower(self, node: Node) -> SyntaxNode:
        handler = getattr(self, "lower_" + node.type, None)
        if handler is None:
            if node.type in NAME_NODES:
                return Name(_text(node), span=_span(node))
            return self.opaque(node)
        return handler(node)

    def children(self, node: Node) -> tuple[SyntaxNode, ...]:
        return tuple(self.lower(child) for child in node.named_children if child.type not in SKIPPED)

    def expr(self, node: Node | None) -> Expr:
        if node is None:
            return Opaque("missing", "")
        lowered = self.lower(node)
        if isinstance(lowered, Expr):
            return lowered
        return Opaque(node.type, _text(node), (lowered,), span=_span(node))

    def opaque(self, node: Node) -> Opaque:
        return Opaque(node.type, _text(node), self.children(node), span=_span(node))

    def lower_source_file(self, node: Node) -> Module:
        return Module(self.children(node), span=_span(node))

    def lower_function_item(self, node: Node) -> SyntaxNode:
        body = node.child_by_field_name("body")
        name = node.child_by_field_name("name")
        if body is None or name is None:
            return self.opaque(node)
        return Function(_text(name), self.lower_block(body), span=_span(node))

    def lower_block(self, node: Node) -> Block:
        return Block(self.children(node), span=_span(node))

    def lower_expression_statement(self, node: Node) -> SyntaxNode:
        inner = [child for child in node.named_children if child.type not in SKIPPED]
        if len(inner) == 1:
            return self.lower(inner[0])
        return self.opaque(node)

    def lower_let_declaration(self, node: Node) -> SyntaxNode:
        pattern = node.child_by_field_name("pattern")
        value = node.child_by_field_name("value")
        if pattern is not None and pattern.type == "mut_pattern":
            names = [c for c in pattern.named_children if c.type == "identifier"]
            pattern = names[0] if names else pattern
        if (
            pattern is None
            or pattern.type != "identifier"
            or node.child_by_field_name("alternative") is not None
        ):
            return self.opaque(node)
        return Let(
            _text(pattern),
            self.expr(value) if value is not None else None,
            span=_span(node),
        )

    def lower_if_expression(self, node: Node) -> If:
        condition = node.child_by_field_name("condition")
        consequence = node.child_by_field_name("consequence")
        alternative = node.child_by_field_name("alternative")
        orelse = None
        if alternative is not None:
            branch = [c for c in alternative.named_children if c.type not in SKIPPED]
            if branch and branch[0].type == "if_expression":
                orelse = self.lower_if_expression(branch[0])
            elif branch and branch[0].type == "block":
                orelse = self.lower_block(branch[0])
        then = self.lower_block(consequence) if consequence is not None else Block()
        return If(self.expr(condition), then, orelse, span=_span(node))

    def lower_binary_expression(self, node: Node) -> Binary:
        operator = node.child_by_field_name("operator")
        return Binary(
            _text(operator) if operator is not None else "?",
            self.expr(node.child_by_field_name("left")),
            self.expr(node.child_by_field_name("right")),
            span=_span(node),
        )

    def lower_unary_expression(self, node: Node) -> Expr:
        operands = [c for c in node.named_children if c.type not in SKIPPED]
        if not node.children or not operands:
            return self.opaque(node)
        return Unary(_text(node.children[0]), self.expr(operands[-1]), span=_span(node))

    def lower_reference_expression(self, node: Node) -> Expr:
        value = node.child_by_field_name("value")
        if value is None:
            return self.opaque(node)
        mutable = any(c.type == "mutable_specifier" for c in node.children)
        return Unary("&mut " if mutable else "&", self.expr(value), span=_span(node))

    def lower_call_expression(self, node: Node) -> Expr:
        function = node.child_by_field_name("function")
        arguments = node.child_by_field_name("arguments")
        args = self.children(arguments) if arguments is not None else ()
        args = tuple(arg if isinstance(arg, Expr) else Opaque("argument", "", (arg,)) for arg in args)
        target = function
        if target is not None and target.type == "generic_function":
            target = target.child_by_field_name("function") or target
        if target is not None and target.type == "field_expression":
            receiver = target.child_by_field_name("value")
            method = target.child_by_field_name("field")
            if receiver is not None and method is not None:
                return MethodCall(self.expr(receiver), _text(method), args, span=_span(node))
        return Call(self.expr(function), args, span=_span(node))

    def lower_field_expression(self, node: Node) -> Expr:
        value = node.child_by_field_name("value")
        field = node.child_by_field_name("field")
        if value is None or field is None:
            return self.opaque(node)
        return FieldAccess(self.expr(value), _text(field), span=_span(node))

    def lower_index_expression(self, node: Node) -> Expr:
        operands = [c for c in node.named_children if c.type not in SKIPPED]
        if len(operands) != 2:
            return self.opaque(node)
        return Index(self.expr(operands[0]), self.expr(operands[1]), span=_span(node))

    def lower_range_expression(self, node: Node) -> Range:
        start = end = None
        inclusive = False
        seen_operator = False
        for child in node.children:
            if not child.is_named and child.type in RANGE_OPERATORS:
                seen_operator = True
                inclusive = child.type != ".."
            elif child.is_named and child.type not in SKIPPED:
                if seen_operator:
                    end = self.expr(child)
                else:
                    start = self.expr(child)
        return Range(start, end, inclusive, span=_span(node))

    def lower_parenthesized_expression(self, node: Node) -> Expr:
        inner = [c for c in node.named_children if c.type not in SKIPPED]
        if len(inner) != 1:
            return self.opaque(node)
        return Paren(self.expr(inner[0]), span=_span(node))

    def lower_type_cast_expression(self, node: Node) -> Expr:
        value = node.child_by_field_name("value")
        type_node = node.child_by_field_name("type")
        if value is None or type_node is None:
            return self.opaque(node)
        return Cast(self.expr(value), _text(type_node), span=_span(node))

    def lower_integer_literal(self, node: Node) -> Literal:
        text = _text(node)
        value = _parse_int(text)
        if value is not None:
            return Literal(LiteralKind.INT, value, text, span=_span(node))
        # `1f64` is an integer literal with a float suffix.
        real = _parse_float(text)
        if real is not None:
            return Literal(LiteralKind.FLOAT, real, text, span=_span(node))
        return Literal(LiteralKind.OTHER, None, text, span=_span(node))

    def lower_float_literal(self, node: Node) -> Literal:
        text = _text(node)
        value = _parse_float(text)
        kind = LiteralKind.FLOAT if value is not None else LiteralKind.OTHER
        return Literal(kind, value, text, span=_span(node))

    def lower_boolean_literal(self, node: Node) -> Literal:
        text = _text(node)
        return Literal(LiteralKind.BOOL, text == "true", text, span=_span(node))

    def lower_string_literal(self, node: Node) -> Literal:
        return Literal(LiteralKind.STR, _text(node), _text(node), span=_span(node))

    lower_raw_string_literal = lower_string_literal
    lower_char_literal = lower_string_literal


def parse_rust(source: str, path: str | None = None) -> Module:
    """Parse Rust source text into a ``Module``.
    Raises:
        SourceParseError: the source has a syntax error
    """
    parser = Parser(RUST_LANGUAGE)
    tree = parser.parse(bytes(source, "utf8"))
    root = tree.root_node
    if root.has_error:
        error = _first_error(root) or root
        line, column = error.start_point
        if error.is_missing:
            message = f"missing {error.type}"
        else:
            message = f"syntax error near {_text(error)[:40]!r}"
        raise SourceParseError(message, path, line + 1, column + 1)
    module = RustLowering().lower(root)
    if not isinstance(module, Module):
        return Module((module,))
    return module


__all__ = ["RUST_LANGUAGE", "RustLowering", "parse_rust"]
