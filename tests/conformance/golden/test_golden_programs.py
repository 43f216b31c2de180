"""
Conformance: golden programs (programs.yaml)
"""
from pathlib import Path

import pytest
import yaml

GOLDEN_PATH = Path(__file__).resolve().parent / "programs.yaml"

with open(GOLDEN_PATH) as f:
    PROGRAMS = yaml.safe_load(f)


def test_golden_file_is_well_formed():
    names = [p["name"] for p in PROGRAMS]
    assert len(names) == len(set(names)), "duplicate golden program names"
    for program in PROGRAMS:
        assert "source" in program
        assert ("statements" in program) != ("error" in program), program["name"]


@pytest.mark.parametrize("program", PROGRAMS, ids=[p["name"] for p in PROGRAMS])
def test_golden_program(runner, program):
    result = runner.validate(program["source"], "golden.zk")
    if "error" in program:
        assert not result.valid, "Expected error but got valid"
        assert result.error_kind == program["error"]["kind"], result.diagnostics
        assert result.error_line == program["error"]["line"], result.diagnostics
    else:
        assert result.valid, f"Expected valid but got errors: {result.diagnostics}"
        assert result.ast["file"] == "golden.zk"
        assert result.ast["statements"] == program["statements"]
