"""AST node types for the zk parser.

Expression nodes are defined in ``zklib.core.expressions`` and re-exported
here for convenience.  This module adds statement- and program-level nodes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from zklib.core.expressions import (
    BinaryExpression,
    ExprNode,
    FunctionCall,
    IntegerLiteral,
    UnaryExpression,
    Variable,
)
from zklib.diagnostics.location import SourceLocation

# Re-export expression nodes so consumers can import everything from
# ``zklib.parser.ast_nodes``.
__all__ = [
    # Expression nodes (re-exported from core)
    "ExprNode",
    "IntegerLiteral",
    "Variable",
    "FunctionCall",
    "BinaryExpression",
    "UnaryExpression",
    # Declarations
    "Parameter",
    "FunctionDeclaration",
    "MutableVariableAssignment",
    "ImmutableVariableAssignment",
    "FunctionReturn",
    # Statement union
    "StmtNode",
    # Program node
    "ProgramNode",
]


@dataclass(frozen=True)
class Parameter:
    """One ``name: type`` entry of a function's parameter list."""

    name: str
    type: str
    location: SourceLocation | None = None


@dataclass(frozen=True)
class FunctionDeclaration:
    """``fn NAME(params): TYPE { body };``."""

    node_type: ClassVar[str] = "function_declaration"

    name: str
    params: tuple[Parameter, ...]
    return_type: str
    body: tuple[StmtNode, ...]
    location: SourceLocation | None = None


@dataclass(frozen=True)
class MutableVariableAssignment:
    """``let NAME = expr;``."""

    node_type: ClassVar[str] = "mutable_variable_assignment"

    name: str
    expr: ExprNode
    location: SourceLocation | None = None

    @property
    def mutable(self) -> bool:
        return True


@dataclass(frozen=True)
class ImmutableVariableAssignment:
    """``const NAME = expr;``."""

    node_type: ClassVar[str] = "immutable_variable_assignment"

    name: str
    expr: ExprNode
    location: SourceLocation | None = None

    @property
    def mutable(self) -> bool:
        return False


@dataclass(frozen=True)
class FunctionReturn:
    """``return expr;``."""

    node_type: ClassVar[str] = "function_return"

    expr: ExprNode
    location: SourceLocation | None = None


# Statement union: declarations, returns and bare expression statements.
StmtNode = Union[
    FunctionDeclaration,
    MutableVariableAssignment,
    ImmutableVariableAssignment,
    FunctionReturn,
    ExprNode,
]


@dataclass(frozen=True)
class ProgramNode:
    """Root node: the ordered top-level statements of one source file."""

    statements: tuple[StmtNode, ...]
    filename: str = "<string>"
