"""Expression AST nodes for zk."""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass
from typing import ClassVar

from zklib.diagnostics.location import SourceLocation


class ExprNode(ABC):
    """Base type for expression nodes. All concrete subclasses are frozen dataclasses."""

    node_type: ClassVar[str]


@dataclass(frozen=True)
class IntegerLiteral(ExprNode):
    """Integer literal: 42, 0, 1000000. Always non-negative; ``-1`` is a unary expression."""

    node_type: ClassVar[str] = "integer"

    value: int
    location: SourceLocation | None = None


@dataclass(frozen=True)
class Variable(ExprNode):
    """Reference to a declared variable or parameter."""

    node_type: ClassVar[str] = "variable"

    name: str
    location: SourceLocation | None = None


@dataclass(frozen=True)
class FunctionCall(ExprNode):
    """Call of a declared function: ``name(arg, arg, ...)``."""

    node_type: ClassVar[str] = "function_call"

    name: str
    args: tuple[ExprNode, ...] = ()
    location: SourceLocation | None = None


@dataclass(frozen=True)
class BinaryExpression(ExprNode):
    """Binary operation: left op right. Op is one of +, -, *, /."""

    node_type: ClassVar[str] = "binary_expression"

    op: str
    left: ExprNode
    right: ExprNode
    location: SourceLocation | None = None


@dataclass(frozen=True)
class UnaryExpression(ExprNode):
    """Unary operation: +operand or -operand."""

    node_type: ClassVar[str] = "unary_expression"

    op: str
    operand: ExprNode
    location: SourceLocation | None = None
