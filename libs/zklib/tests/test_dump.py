"""Tests for AST serialization."""

from __future__ import annotations

import yaml

from zklib.parser import dump_yaml, node_to_dict, parse, program_to_dict


def parse_ok(source: str):
    ast, diag = parse(source, "dump.zk")
    assert not diag.has_errors(), diag.format_all()
    return ast


class TestNodeToDict:
    def test_variable_assignment(self) -> None:
        ast = parse_ok("const x = 1 + 2;")
        assert node_to_dict(ast.statements[0]) == {
            "type": "immutable_variable_assignment",
            "name": "x",
            "expr": {
                "type": "binary_expression",
                "op": "+",
                "left": {"type": "integer", "value": 1},
                "right": {"type": "integer", "value": 2},
            },
        }

    def test_function_declaration(self) -> None:
        ast = parse_ok("fn add(a: int, b: int): int { return a + b; };")
        d = node_to_dict(ast.statements[0])
        assert list(d) == ["type", "name", "params", "return_type", "body"]
        assert d["params"] == [{"name": "a", "type": "int"}, {"name": "b", "type": "int"}]
        assert d["body"] == [
            {
                "type": "function_return",
                "expr": {
                    "type": "binary_expression",
                    "op": "+",
                    "left": {"type": "variable", "name": "a"},
                    "right": {"type": "variable", "name": "b"},
                },
            }
        ]

    def test_call_and_unary(self) -> None:
        ast = parse_ok("echo(-1);")
        assert node_to_dict(ast.statements[0]) == {
            "type": "function_call",
            "name": "echo",
            "args": [{"type": "unary_expression", "op": "-", "operand": {"type": "integer", "value": 1}}],
        }

    def test_locations_omitted(self) -> None:
        ast = parse_ok("let a = 1;")
        assert "location" not in node_to_dict(ast.statements[0])


class TestDumpYaml:
    def test_round_trips_through_yaml(self) -> None:
        ast = parse_ok("let a = 1;\necho(a);")
        assert yaml.safe_load(dump_yaml(ast)) == program_to_dict(ast)

    def test_file_key_first(self) -> None:
        text = dump_yaml(parse_ok(""))
        assert text.splitlines()[0] == "file: dump.zk"
        assert yaml.safe_load(text) == {"file": "dump.zk", "statements": []}

    def test_keys_keep_field_order(self) -> None:
        text = dump_yaml(parse_ok("let a = 1;"))
        assert text.index("type: mutable_variable_assignment") < text.index("name: a")
