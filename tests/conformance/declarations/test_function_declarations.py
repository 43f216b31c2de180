"""
Conformance: fn declarations
"""
import pytest

from tests.conformance.runner import assert_outcome


CASES = [
    ("add", "fn add(a: int, b: int): int { return a + b; };", "valid"),
    ("void_no_params", "fn main(): void { echo(1); };", "valid"),
    ("empty_body", "fn noop(): void {};", "valid"),
    ("void_param", "fn f(v: void): void {};", "valid"),
    ("bool_return", "fn f(): bool { return 1; };", "error: TypeError: unrecognized return type: 'bool'"),
    ("float_param", "fn f(x: float): int { return 1; };", "error: TypeError: unrecognized parameter type: 'float'"),
    ("duplicate", "fn f(): void {};\nfn f(): int { return 0; };", "error: SemanticError: function already declared"),
    ("redeclare_builtin", "fn echo(): void {};", "error: SemanticError: function already declared in current scope: 'echo'"),
    ("duplicate_param", "fn f(a: int, a: int): void {};", "error: SemanticError: parameter already declared: 'a'"),
    ("no_trailing_semicolon", "fn f(): void {}\n", "error: SyntaxError: expected ';'"),
    ("no_return_type", "fn f() { };", "error: SyntaxError: expected ':'"),
    ("no_param_type", "fn f(a): void {};", "error: SyntaxError: expected ':'"),
    ("unterminated", "fn f(): void {\n", "error: SyntaxError: expected '}'"),
    ("leading_comma", "fn f(, a: int): void {};", "error: SyntaxError: expected identifier"),
]


@pytest.mark.parametrize("description,source,expected", CASES, ids=[c[0] for c in CASES])
def test_function_declarations(runner, description, source, expected):
    """Function headers, return types and bodies."""
    result = runner.validate(source)
    assert_outcome(result, expected)
