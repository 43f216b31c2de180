"""zk parser subpackage (Layer 2 -- depends on core, diagnostics)."""

from zklib.parser.ast_nodes import (
    FunctionDeclaration,
    FunctionReturn,
    ImmutableVariableAssignment,
    MutableVariableAssignment,
    Parameter,
    ProgramNode,
    StmtNode,
)
from zklib.parser.dump import dump_yaml, node_to_dict, program_to_dict
from zklib.parser.errors import (
    CompileError,
    LexError,
    ParseError,
    SemanticError,
    TypeAnnotationError,
)
from zklib.parser.lexer import Lexer
from zklib.parser.parser import BUILTIN_FUNCTIONS, Parser, parse
from zklib.parser.tokens import Token, TokenKind

__all__ = [
    "TokenKind",
    "Token",
    "Lexer",
    "ProgramNode",
    "Parameter",
    "FunctionDeclaration",
    "MutableVariableAssignment",
    "ImmutableVariableAssignment",
    "FunctionReturn",
    "StmtNode",
    "Parser",
    "parse",
    "BUILTIN_FUNCTIONS",
    "CompileError",
    "LexError",
    "ParseError",
    "SemanticError",
    "TypeAnnotationError",
    "node_to_dict",
    "program_to_dict",
    "dump_yaml",
]
