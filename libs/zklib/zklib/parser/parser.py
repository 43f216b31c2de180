"""Recursive-descent parser for zk source code.

Handles:
- ``fn NAME(a: int, ...): TYPE { body };``  function declarations
- ``let NAME = expr;`` / ``const NAME = expr;``  variable bindings
- ``return expr;``
- bare expression statements (usually calls, e.g. ``echo(x);``)
- Expressions with standard arithmetic precedence

Declarations and uses are checked against a :class:`ScopeTable` while
parsing.  The first error aborts the parse.
"""

from __future__ import annotations

from zklib.core.expressions import (
    BinaryExpression,
    ExprNode,
    FunctionCall,
    IntegerLiteral,
    UnaryExpression,
    Variable,
)
from zklib.core.scope import ScopeTable
from zklib.core.types import ValueType
from zklib.diagnostics.collector import DiagnosticCollector
from zklib.diagnostics.location import SourceLocation
from zklib.parser.ast_nodes import (
    FunctionDeclaration,
    FunctionReturn,
    ImmutableVariableAssignment,
    MutableVariableAssignment,
    Parameter,
    ProgramNode,
    StmtNode,
)
from zklib.parser.errors import (
    CompileError,
    ParseError,
    SemanticError,
    TypeAnnotationError,
)
from zklib.parser.lexer import Lexer
from zklib.parser.tokens import KEYWORDS, Token, TokenKind

# Functions visible in the global scope without a declaration.
BUILTIN_FUNCTIONS: tuple[str, ...] = ("echo",)


class Parser:
    """Recursive-descent parser for zk programs."""

    def __init__(
        self,
        tokens: list[Token],
        filename: str = "<string>",
        diagnostics: DiagnosticCollector | None = None,
    ) -> None:
        self._tokens = tokens
        self._filename = filename
        self._diag = diagnostics or DiagnosticCollector()
        self._pos = 0
        self._scopes = ScopeTable()

    # ------------------------------------------------------------------
    # Error reporting
    # ------------------------------------------------------------------

    def _fail(
        self,
        error_cls: type[CompileError],
        message: str,
        location: SourceLocation | None,
    ) -> CompileError:
        """Record *message* as the terminal diagnostic and return the error to raise."""
        error = error_cls(message, location)
        self._diag.error(message, location, code=error_cls.kind)
        return error

    def _end_location(self) -> SourceLocation:
        if self._tokens:
            return self._tokens[-1].location
        return SourceLocation(file=self._filename, line=1)

    # ------------------------------------------------------------------
    # Token stream helpers
    # ------------------------------------------------------------------

    def _skip_newlines(self) -> None:
        """Skip any NEWLINE tokens."""
        while self._pos < len(self._tokens) and self._tokens[self._pos].kind == TokenKind.NEWLINE:
            self._pos += 1

    def _at_end(self) -> bool:
        self._skip_newlines()
        return self._pos >= len(self._tokens)

    def _peek(self) -> Token | None:
        """Return the next non-newline token without consuming it."""
        if self._at_end():
            return None
        return self._tokens[self._pos]

    def _peek_raw(self) -> Token | None:
        """Return the token at the cursor, newlines included."""
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def _advance(self) -> Token:
        """Consume and return the next non-newline token."""
        tok = self._peek()
        if tok is None:
            raise self._fail(ParseError, "unexpected end of input", self._end_location())
        self._pos += 1
        return tok

    def _check(self, kind: TokenKind, lexeme: str | None = None) -> bool:
        """Return True if the next token is *kind* (and *lexeme*, when given)."""
        tok = self._peek()
        return tok is not None and tok.is_(kind, lexeme)

    def _match(self, kind: TokenKind, *lexemes: str) -> Token | None:
        """Consume the next token if it is *kind* with one of *lexemes*."""
        tok = self._peek()
        if tok is not None and tok.kind == kind and (not lexemes or tok.lexeme in lexemes):
            self._pos += 1
            return tok
        return None

    def _match_same_line(self, kind: TokenKind, *lexemes: str) -> Token | None:
        """Like :meth:`_match`, but a pending newline ends the match."""
        tok = self._peek_raw()
        if tok is not None and tok.kind == kind and tok.lexeme in lexemes:
            self._pos += 1
            return tok
        return None

    def _expect(self, kind: TokenKind, lexeme: str | None = None) -> Token:
        """Consume a token of *kind* (and *lexeme*) or raise ParseError."""
        want = repr(lexeme) if lexeme is not None else str(kind)
        tok = self._peek()
        if tok is None:
            raise self._fail(
                ParseError,
                f"expected {want}, found end of input",
                self._end_location(),
            )
        if not tok.is_(kind, lexeme):
            raise self._fail(
                ParseError,
                f"expected {want}, found {tok.kind} {tok.lexeme!r}",
                tok.location,
            )
        self._pos += 1
        return tok

    def _expect_name(self) -> Token:
        """Consume an identifier usable as a declared name."""
        tok = self._expect(TokenKind.IDENTIFIER)
        if tok.lexeme in KEYWORDS:
            raise self._fail(
                ParseError,
                f"expected identifier, found keyword {tok.lexeme!r}",
                tok.location,
            )
        return tok

    # ------------------------------------------------------------------
    # Top-level program parsing
    # ------------------------------------------------------------------

    def parse_program(self) -> ProgramNode:
        """Parse a complete zk program."""
        self._pos = 0
        self._scopes = ScopeTable()
        self._scopes.enter()
        for name in BUILTIN_FUNCTIONS:
            self._scopes.declare_function(name)

        stmts: list[StmtNode] = []
        try:
            while not self._at_end():
                tok = self._peek()
                if tok.is_(TokenKind.PARENTHESIS, "}"):
                    raise self._fail(ParseError, "unexpected token '}'", tok.location)
                stmt = self.parse_statement()
                if stmt is not None:
                    stmts.append(stmt)
        except RecursionError:
            # Parentheses, call arguments and function bodies recurse.
            tok = self._peek_raw()
            location = tok.location if tok is not None else self._end_location()
            raise self._fail(ParseError, "program nested too deeply", location) from None

        self._scopes.exit()
        return ProgramNode(statements=tuple(stmts), filename=self._filename)

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def parse_statement(self) -> StmtNode | None:
        """Parse one statement.

        Returns None for a stray ``;`` (consumed) and for ``}`` (left in
        place for the enclosing body to close).
        """
        tok = self._peek()
        if tok is None:
            raise self._fail(ParseError, "unexpected end of input", self._end_location())

        if tok.kind == TokenKind.IDENTIFIER:
            if tok.lexeme == "fn":
                return self.parse_function_declaration()
            if tok.lexeme == "let":
                return self.parse_variable_binding(mutable=True)
            if tok.lexeme == "const":
                return self.parse_variable_binding(mutable=False)
            if tok.lexeme == "return":
                return self.parse_return()
            return self.parse_expression()

        if tok.is_(TokenKind.PARENTHESIS, "}"):
            return None
        if tok.is_(TokenKind.PUNCTUATION, ";"):
            self._advance()
            return None

        raise self._fail(ParseError, f"unexpected token {tok.lexeme!r}", tok.location)

    def _parse_body(self) -> list[StmtNode]:
        """Parse statements up to (not including) the closing ``}``."""
        body: list[StmtNode] = []
        while True:
            if self._at_end():
                raise self._fail(
                    ParseError,
                    "expected '}', found end of input",
                    self._end_location(),
                )
            if self._check(TokenKind.PARENTHESIS, "}"):
                return body
            stmt = self.parse_statement()
            if stmt is not None:
                body.append(stmt)

    # ------------------------------------------------------------------
    # fn declaration
    # ------------------------------------------------------------------

    def parse_function_declaration(self) -> FunctionDeclaration:
        """Parse ``fn NAME(params): TYPE { body };``."""
        fn_tok = self._expect(TokenKind.IDENTIFIER, "fn")
        name_tok = self._expect_name()
        name = name_tok.lexeme
        if self._scopes.declared_function_here(name):
            raise self._fail(
                SemanticError,
                f"function already declared in current scope: {name!r}",
                name_tok.location,
            )

        # Registered before the body scope exists: visible to itself, not to
        # anything earlier in the file.
        self._scopes.declare_function(name)
        self._scopes.enter()

        self._expect(TokenKind.PARENTHESIS, "(")
        params = self._parse_params()
        self._expect(TokenKind.PARENTHESIS, ")")
        self._expect(TokenKind.PUNCTUATION, ":")
        type_tok = self._expect(TokenKind.IDENTIFIER)
        self._expect(TokenKind.PARENTHESIS, "{")

        if ValueType.from_name(type_tok.lexeme) is None:
            raise self._fail(
                TypeAnnotationError,
                f"unrecognized return type: {type_tok.lexeme!r} "
                f"(expected one of: {', '.join(ValueType.names())})",
                type_tok.location,
            )

        body = self._parse_body()
        self._expect(TokenKind.PARENTHESIS, "}")
        self._expect(TokenKind.PUNCTUATION, ";")
        self._scopes.exit()

        return FunctionDeclaration(
            name=name,
            params=tuple(params),
            return_type=type_tok.lexeme,
            body=tuple(body),
            location=fn_tok.location,
        )

    def _parse_params(self) -> list[Parameter]:
        """Parse ``name: type, ...`` and declare each name as immutable."""
        params: list[Parameter] = []
        if self._check(TokenKind.PARENTHESIS, ")"):
            return params

        seen: set[str] = set()
        while True:
            name_tok = self._expect_name()
            if name_tok.lexeme in seen:
                raise self._fail(
                    SemanticError,
                    f"parameter already declared: {name_tok.lexeme!r}",
                    name_tok.location,
                )
            self._expect(TokenKind.PUNCTUATION, ":")
            type_tok = self._expect(TokenKind.IDENTIFIER)
            if ValueType.from_name(type_tok.lexeme) is None:
                raise self._fail(
                    TypeAnnotationError,
                    f"unrecognized parameter type: {type_tok.lexeme!r} "
                    f"(expected one of: {', '.join(ValueType.names())})",
                    type_tok.location,
                )

            seen.add(name_tok.lexeme)
            self._scopes.declare_variable(name_tok.lexeme, mutable=False)
            params.append(
                Parameter(name=name_tok.lexeme, type=type_tok.lexeme, location=name_tok.location)
            )
            if self._match(TokenKind.PUNCTUATION, ",") is None:
                return params

    # ------------------------------------------------------------------
    # let / const
    # ------------------------------------------------------------------

    def parse_variable_binding(
        self, mutable: bool
    ) -> MutableVariableAssignment | ImmutableVariableAssignment:
        """Parse ``let NAME = expr;`` or ``const NAME = expr;``."""
        kw_tok = self._expect(TokenKind.IDENTIFIER, "let" if mutable else "const")
        name_tok = self._expect_name()
        name = name_tok.lexeme
        if self._scopes.declared_variable_here(name):
            raise self._fail(
                SemanticError,
                f"variable already defined in current scope: {name!r}",
                name_tok.location,
            )
        self._expect(TokenKind.OPERATOR, "=")

        # The initializer is parsed before the name exists.
        expr = self.parse_expression()
        self._expect(TokenKind.PUNCTUATION, ";")
        self._scopes.declare_variable(name, mutable)

        node_cls = MutableVariableAssignment if mutable else ImmutableVariableAssignment
        return node_cls(name=name, expr=expr, location=kw_tok.location)

    # ------------------------------------------------------------------
    # return
    # ------------------------------------------------------------------

    def parse_return(self) -> FunctionReturn:
        """Parse ``return expr;``."""
        ret_tok = self._expect(TokenKind.IDENTIFIER, "return")
        expr = self.parse_expression()
        self._expect(TokenKind.PUNCTUATION, ";")
        return FunctionReturn(expr=expr, location=ret_tok.location)

    # ------------------------------------------------------------------
    # Expression parsing (precedence climbing)
    # ------------------------------------------------------------------

    def parse_expression(self) -> ExprNode:
        """Parse an expression with operator precedence."""
        return self._parse_sum()

    def _parse_sum(self) -> ExprNode:
        """Left-associative ``+`` and ``-``."""
        left = self._parse_term()
        while True:
            tok = self._match_same_line(TokenKind.OPERATOR, "+", "-")
            if tok is None:
                break
            right = self._parse_term()
            left = BinaryExpression(op=tok.lexeme, left=left, right=right, location=tok.location)
        return left

    def _parse_term(self) -> ExprNode:
        """Left-associative ``*`` and ``/``."""
        left = self._parse_unary()
        while True:
            tok = self._match_same_line(TokenKind.OPERATOR, "*", "/")
            if tok is None:
                break
            right = self._parse_unary()
            left = BinaryExpression(op=tok.lexeme, left=left, right=right, location=tok.location)
        return left

    def _parse_unary(self) -> ExprNode:
        """Prefix ``+`` and ``-``, folded right to left (``--x`` is ``-(-x)``)."""
        ops: list[Token] = []
        while True:
            tok = self._match(TokenKind.OPERATOR, "+", "-")
            if tok is None:
                break
            ops.append(tok)
        expr = self._parse_primary()
        for tok in reversed(ops):
            expr = UnaryExpression(op=tok.lexeme, operand=expr, location=tok.location)
        return expr

    def _parse_primary(self) -> ExprNode:
        """Parse a call, variable reference, integer, or parenthesized expression."""
        tok = self._peek()
        if tok is None:
            raise self._fail(
                ParseError,
                "expected expression, found end of input",
                self._end_location(),
            )

        if tok.kind == TokenKind.IDENTIFIER:
            self._advance()
            # A call only when '(' follows directly, with no line break between.
            nxt = self._peek_raw()
            if nxt is not None and nxt.is_(TokenKind.PARENTHESIS, "("):
                if not self._scopes.has_function(tok.lexeme):
                    raise self._fail(
                        SemanticError,
                        f"function not defined in current scope: {tok.lexeme!r}",
                        tok.location,
                    )
                return self._parse_call_args(tok)
            if not self._scopes.has_variable(tok.lexeme):
                raise self._fail(
                    SemanticError,
                    f"variable not defined in current scope: {tok.lexeme!r}",
                    tok.location,
                )
            return Variable(name=tok.lexeme, location=tok.location)

        if tok.kind == TokenKind.INTEGER:
            self._advance()
            try:
                value = tok.value
            except ValueError:
                # Past the interpreter's int/str conversion limit.
                raise self._fail(
                    ParseError,
                    f"integer literal too long ({len(tok.lexeme)} digits)",
                    tok.location,
                ) from None
            return IntegerLiteral(value=value, location=tok.location)

        if tok.is_(TokenKind.PARENTHESIS, "("):
            self._advance()
            expr = self.parse_expression()
            self._expect(TokenKind.PARENTHESIS, ")")
            return expr

        raise self._fail(
            ParseError,
            f"unexpected token in expression: {tok.lexeme!r}",
            tok.location,
        )

    def _parse_call_args(self, name_tok: Token) -> FunctionCall:
        """Parse ``(expr, expr, ...)`` after a function name."""
        self._expect(TokenKind.PARENTHESIS, "(")
        args: list[ExprNode] = []
        if not self._check(TokenKind.PARENTHESIS, ")"):
            args.append(self.parse_expression())
            while self._match(TokenKind.PUNCTUATION, ","):
                args.append(self.parse_expression())
        self._expect(TokenKind.PARENTHESIS, ")")
        return FunctionCall(name=name_tok.lexeme, args=tuple(args), location=name_tok.location)


# ------------------------------------------------------------------
# Convenience function
# ------------------------------------------------------------------


def parse(source: str, filename: str = "<string>") -> tuple[ProgramNode | None, DiagnosticCollector]:
    """Tokenize and parse zk source code.

    Returns:
        A ``(program_ast, diagnostics)`` tuple.  On the first error the AST is
        None and the collector holds that single error.
    """
    diag = DiagnosticCollector()
    try:
        tokens = Lexer(source, filename, diag).tokenize()
        program = Parser(tokens, filename, diag).parse_program()
    except CompileError:
        return None, diag
    return program, diag
