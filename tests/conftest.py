# tests/conftest.py
# Put the repository root (the folder holding grammar.py, names.py, ...) on
# sys.path so the flat modules import by bare name during collection.

import sys
import pathlib

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)

if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)

from grammar import Rule, Call, Cons, Elem, Seq  # noqa: E402


@pytest.fixture
def binary_trees():
    return [Rule("T", [Cons(1, [Elem("T"), Elem("T")]), Cons(0, [])])]


@pytest.fixture
def open_grammar():
    # A and S mention B, L, M; only A and S are defined.
    return [
        Rule("A", [Call("B")]),
        Rule("S", [Cons(1, [Seq("L"), Elem("A"), Elem("M")]), Call("S")]),
    ]
