"""Helpers for building syntax trees by hand in tests."""

from __future__ import annotations

from guardlint.syntax import (
    Binary,
    Block,
    If,
    Index,
    Literal,
    LiteralKind,
    MethodCall,
    Name,
    Range,
    Unary,
)


def name(ident):
    return Name(ident)


def num(value):
    kind = LiteralKind.FLOAT if isinstance(value, float) else LiteralKind.INT
    return Literal(kind, value, repr(value))


def length(receiver):
    return MethodCall(name(receiver) if isinstance(receiver, str) else receiver, "len")


def is_empty(receiver):
    return MethodCall(name(receiver), "is_empty")


def cmp(op, left, right):
    return Binary(op, left, right)


def div(left, right):
    return Binary("/", left, right)


def index(receiver, idx):
    return Index(name(receiver), idx)


def slice_from(receiver, start):
    return Index(name(receiver), Range(num(start)))


def not_(expr):
    return Unary("!", expr)


def if_(condition, then, orelse=None):
    then_block = Block(tuple(then))
    else_block = Block(tuple(orelse)) if orelse is not None else None
    return If(condition, then_block, else_block)
