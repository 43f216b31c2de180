"""zk core subpackage (Layer 1, depends only on diagnostics)."""

from zklib.core.expressions import (
    BinaryExpression,
    ExprNode,
    FunctionCall,
    IntegerLiteral,
    UnaryExpression,
    Variable,
)
from zklib.core.scope import Scope, ScopeError, ScopeTable
from zklib.core.types import ValueType

__all__ = [
    "ValueType",
    "ExprNode",
    "IntegerLiteral",
    "Variable",
    "FunctionCall",
    "BinaryExpression",
    "UnaryExpression",
    "Scope",
    "ScopeTable",
    "ScopeError",
]
