import copy

from grammar import Rule, Call, Cons, Elem, Seq
from names import leaves_of_grammar
from completion import complete


def test_single_call_scenario():
    grammar = [("A", [Call("B")])]
    assert complete(grammar) == [("A", [Call("B")]), ("B", [Cons(0, [])])]


def test_closed_grammar_unchanged(binary_trees):
    assert complete(binary_trees) == binary_trees


def test_empty_grammar():
    assert complete([]) == []


def test_sequence_leaf():
    closed = complete([Rule("S", [Cons(1, [Seq("L")])])])
    assert closed[1] == Rule("L", [Cons(0, [])])


def test_closure_and_append_only(open_grammar):
    closed = complete(open_grammar)
    assert leaves_of_grammar(closed) == set()
    assert closed[:len(open_grammar)] == open_grammar
    added = closed[len(open_grammar):]
    assert [name for name, _ in added] == ["B", "L", "M"]
    assert all(alts == [Cons(0, [])] for _, alts in added)


def test_idempotent(open_grammar):
    once = complete(open_grammar)
    assert complete(once) == once


def test_input_not_mutated(open_grammar):
    before = copy.deepcopy(open_grammar)
    closed = complete(open_grammar)
    assert open_grammar == before
    assert closed is not open_grammar


def test_tuple_input_gives_list():
    closed = complete((Rule("A", [Call("B")]),))
    assert closed == [Rule("A", [Call("B")]), Rule("B", [Cons(0, [])])]


def test_verbose_reports_leaves(open_grammar, capsys):
    complete(open_grammar, verbose=True)
    out = capsys.readouterr().out
    assert "B L M" in out


def test_verbose_silent_when_closed(binary_trees, capsys):
    complete(binary_trees, verbose=True)
    assert capsys.readouterr().out == ""


def test_tuple_factors_close_like_lists():
    grammar = [Rule("T", [Cons(1, (Elem("T"), Seq("U"))), Cons(0, ())])]
    closed = complete(grammar)
    assert closed == [
        Rule("T", [Cons(1, [Elem("T"), Seq("U")]), Cons(0, [])]),
        Rule("U", [Cons(0, [])]),
    ]
    assert complete(closed) == closed
