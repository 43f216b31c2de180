"""
Conformance: let/const bindings
"""
import pytest

from tests.conformance.runner import assert_outcome


# Each test case is a tuple: (description, zk_source, expected_outcome)
# expected_outcome is either "valid" or "error: <Kind>: <message fragment>"

CASES = [
    ("const_sum", "const x = 1 + 2;", "valid"),
    ("let_literal", "let y = 0;", "valid"),
    ("chain", "let a = 1;\nlet b = a;\nconst c = a + b;", "valid"),
    ("self_reference", "let y = y;", "error: SemanticError: variable not defined in current scope: 'y'"),
    ("self_reference_nested", "const z = (z);", "error: SemanticError: variable not defined"),
    ("redeclare_let", "let x = 1;\nlet x = 2;", "error: SemanticError: variable already defined in current scope: 'x'"),
    ("redeclare_const_as_let", "const x = 1;\nlet x = 2;", "error: SemanticError: variable already defined"),
    ("missing_semicolon", "let x = 1\nlet y = 2;", "error: SyntaxError: expected ';'"),
    ("missing_name", "let = 1;", "error: SyntaxError: expected identifier"),
    ("keyword_name", "const return = 1;", "error: SyntaxError: keyword 'return'"),
    ("missing_initializer", "let x = ;", "error: SyntaxError: unexpected token in expression"),
]


@pytest.mark.parametrize("description,source,expected", CASES, ids=[c[0] for c in CASES])
def test_variable_bindings(runner, description, source, expected):
    """Bindings declare a name after their initializer, once per scope."""
    result = runner.validate(source)
    assert_outcome(result, expected)


def test_mutability_is_part_of_node_type(runner):
    result = runner.validate("let m = 1;\nconst i = 2;")
    assert [s["type"] for s in result.ast["statements"]] == [
        "mutable_variable_assignment",
        "immutable_variable_assignment",
    ]
