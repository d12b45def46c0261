"""Repository conventions enforced on the ``vimtheme`` package."""

from __future__ import annotations

import ast
from pathlib import Path

import pytest

MAX_LINE_LENGTH = 79
PACKAGE_ROOT = Path(__file__).resolve().parents[1] / "vimtheme"
SOURCES = sorted(PACKAGE_ROOT.glob("*.py"))


def _public_definitions(tree: ast.Module):
    for node in tree.body:
        if not isinstance(
            node,
            (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef),
        ):
            continue
        if node.name.startswith("_"):
            continue
        yield node
        if not isinstance(node, ast.ClassDef):
            continue
        for member in node.body:
            if isinstance(member, ast.FunctionDef) and any(
                isinstance(item, ast.Name) and item.id == "property"
                for item in member.decorator_list
            ):
                yield member


def test_package_has_sources():
    assert SOURCES


@pytest.mark.parametrize("path", SOURCES, ids=lambda path: path.name)
def test_lines_fit_limit(path: Path) -> None:
    lines = path.read_text(encoding="utf-8").splitlines()
    too_long = [
        number
        for number, line in enumerate(lines, 1)
        if len(line) > MAX_LINE_LENGTH
    ]

    assert not too_long, f"{path.name}: lines {too_long} exceed the limit"


@pytest.mark.parametrize("path", SOURCES, ids=lambda path: path.name)
def test_public_api_is_documented(path: Path) -> None:
    tree = ast.parse(path.read_text(encoding="utf-8"))

    assert ast.get_docstring(tree), f"{path.name} has no module docstring"
    missing = [
        f"{node.name} (line {node.lineno})"
        for node in _public_definitions(tree)
        if ast.get_docstring(node) is None
    ]
    assert not missing, f"{path.name}: undocumented {missing}"


@pytest.mark.parametrize("path", SOURCES, ids=lambda path: path.name)
def test_builtin_generics_are_used(path: Path) -> None:
    tree = ast.parse(path.read_text(encoding="utf-8"))
    legacy = sorted(
        alias.name
        for node in ast.walk(tree)
        if isinstance(node, ast.ImportFrom) and node.module == "typing"
        for alias in node.names
        if alias.name in {"Dict", "FrozenSet", "List", "Set", "Tuple"}
    )

    assert not legacy, f"{path.name}: use built-in generics for {legacy}"
