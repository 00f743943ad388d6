"""Deterministic tree generators for performance benchmarks.

All generators produce fixed, reproducible trees. No random values.
Three tiers shaped like parser output: a small statement list, a
1000-statement program, and a deeply nested expression chain.
Each tier provides a conforming pair and a pair failing at the last leaf.
"""

from __future__ import annotations

import copy
from typing import Any

import pytest


def _statement(i: int) -> dict[str, Any]:
    return {
        "type": "ExpressionStatement",
        "expression": {
            "type": "BinaryExpression",
            "operator": "+",
            "left": {"type": "Identifier", "name": f"a{i}"},
            "right": {"type": "Literal", "value": i, "raw": str(i)},
        },
        "range": [i * 10, i * 10 + 9],
        "loc": {
            "start": {"line": i + 1, "column": 0},
            "end": {"line": i + 1, "column": 9},
        },
    }


def generate_program(num_statements: int) -> dict[str, Any]:
    """Generate a Program node with ``num_statements`` expression statements."""
    return {
        "type": "Program",
        "sourceType": "module",
        "body": [_statement(i) for i in range(num_statements)],
    }


def generate_chain(depth: int) -> dict[str, Any]:
    """Generate a left-leaning member-expression chain ``depth`` levels deep."""
    node: dict[str, Any] = {"type": "Identifier", "name": "root"}
    for i in range(depth):
        node = {
            "type": "MemberExpression",
            "object": node,
            "property": {"type": "Identifier", "name": f"p{i}"},
        }
    return node


def _with_extras(tree: Any) -> Any:
    """Add extra keys everywhere, as a richer candidate producer would."""
    if isinstance(tree, dict):
        out = {k: _with_extras(v) for k, v in tree.items()}
        out["start"] = 0
        out["extra"] = {"parenthesized": False}
        return out
    if isinstance(tree, list):
        return [_with_extras(v) for v in tree]
    return tree


def _last_statement_broken(program: dict[str, Any]) -> dict[str, Any]:
    candidate = copy.deepcopy(program)
    candidate["body"][-1]["loc"]["end"]["column"] = -1
    return candidate


@pytest.fixture
def pair_small_conforming() -> tuple[dict[str, Any], dict[str, Any]]:
    program = generate_program(10)
    return program, _with_extras(program)


@pytest.fixture
def pair_small_failing() -> tuple[dict[str, Any], dict[str, Any]]:
    program = generate_program(10)
    return program, _last_statement_broken(program)


@pytest.fixture
def pair_large_conforming() -> tuple[dict[str, Any], dict[str, Any]]:
    program = generate_program(1000)
    return program, _with_extras(program)


@pytest.fixture
def pair_large_failing() -> tuple[dict[str, Any], dict[str, Any]]:
    program = generate_program(1000)
    return program, _last_statement_broken(program)


@pytest.fixture
def pair_deep_conforming() -> tuple[dict[str, Any], dict[str, Any]]:
    return generate_chain(5000), generate_chain(5000)
