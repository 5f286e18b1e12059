import io

import pytest

from minicomp.grammar import (
    END_MARKER,
    EPSILON,
    GrammarRule,
    main,
    parse_grammar,
    run_task,
)

SIMPLE = "S -> a B * B -> b * #"
EPS = "S -> A b * A -> * #"
LL1 = "S -> a S * S -> b * #"
COMMON_PREFIX = "S -> a * S -> a b * #"
EPS_CONFLICT = "S -> A a * A -> a * A -> * #"
UNREACHABLE = "S -> a * C -> c * #"
NON_GENERATING = "S -> a * S -> A * A -> A a * #"

ALL = [SIMPLE, EPS, LL1, COMMON_PREFIX, EPS_CONFLICT, UNREACHABLE, NON_GENERATING]


def test_symbols_task_output():
    assert run_task(1, SIMPLE) == "a b S B"


def test_symbols_terminals_precede_nonterminals():
    g = parse_grammar(UNREACHABLE)
    symbols = g.symbols()
    nonterminals = {g.names[r.lhs] for r in g.rules}
    split = g.terminal_count
    assert not set(symbols[:split]) & nonterminals
    assert set(symbols[split:]) == nonterminals


def test_reserved_names_come_first():
    g = parse_grammar(SIMPLE)
    assert g.names[EPSILON] == "#"
    assert g.names[END_MARKER] == "$"


def test_rules_reference_names():
    g = parse_grammar(SIMPLE)
    assert g.rules[0] == GrammarRule(g.names.index("S"), (g.names.index("a"), g.names.index("B")))
    assert g.format_rules(g.rules).splitlines() == ["S -> a B", "B -> b"]


def test_epsilon_rule_uses_hash():
    g = parse_grammar(EPS)
    eps_rule = g.rules[1]
    assert eps_rule.rhs == (EPSILON,)
    assert g.format_rules([eps_rule]).split(" -> ")[1].strip() == "#"


@pytest.mark.parametrize("text", ["S -> #", ""])
def test_syntax_error(text):
    with pytest.raises(ValueError, match="Syntax error!"):
        parse_grammar(text)


def test_useful_rules_drop_unreachable():
    g = parse_grammar(UNREACHABLE)
    useful = g.useful_rules()
    assert useful == [g.rules[0]]
    output = run_task(2, UNREACHABLE)
    assert "C" not in output
    assert output.splitlines() == ["S -> a"]


def test_useful_rules_drop_non_generating():
    g = parse_grammar(NON_GENERATING)
    useful = g.useful_rules()
    assert useful == [g.rules[0]]
    assert all(g.names.index("A") not in (r.lhs, *r.rhs) for r in useful)


@pytest.mark.parametrize("text", ALL)
def test_useful_rules_are_ordered_subsequence(text):
    g = parse_grammar(text)
    useful = g.useful_rules()
    positions = [g.rules.index(r) for r in useful]
    assert positions == sorted(positions)


def test_clean_grammar_keeps_all_rules():
    g = parse_grammar(SIMPLE)
    assert g.useful_rules() == list(g.rules)
    assert len(run_task(2, SIMPLE).splitlines()) == len(g.rules)


def test_first_task_output():
    assert run_task(3, SIMPLE) == "FIRST(S) = { a }\nFIRST(B) = { b }\n"


@pytest.mark.parametrize("text", ALL)
def test_terminal_first_sets_are_themselves(text):
    g = parse_grammar(text)
    first = g.first_sets()
    for terminal in g.terminals:
        assert first[terminal] == {terminal}
    assert first[EPSILON] == {EPSILON}


def test_first_with_nullable_prefix():
    g = parse_grammar(EPS)
    first = g.first_sets()
    a = g.names.index("A")
    s = g.names.index("S")
    b = g.names.index("b")
    assert first[a] == {EPSILON}
    assert first[s] == {b}
    assert "FIRST(A) = { # }" in run_task(3, EPS)


def test_first_of_non_generating_is_empty():
    g = parse_grammar(NON_GENERATING)
    assert not g.first_sets()[g.names.index("A")]


def test_follow_task_output():
    assert run_task(4, SIMPLE) == "FOLLOW(S) = { $ }\nFOLLOW(B) = { $ }\n"


@pytest.mark.parametrize("text", ALL)
def test_follow_invariants(text):
    g = parse_grammar(text)
    follow = g.follow_sets()
    assert END_MARKER in follow[g.start]
    assert all(EPSILON not in members for members in follow.values())


def test_follow_includes_next_first():
    g = parse_grammar(EPS_CONFLICT)
    follow = g.follow_sets()
    assert g.names.index("a") in follow[g.names.index("A")]


@pytest.mark.parametrize("text", ALL)
def test_format_sets_lists_nonterminals_in_order(text):
    g = parse_grammar(text)
    lines = g.format_sets(g.first_sets(), "FIRST").splitlines()
    expected = [f"FIRST({name})" for name in g.names[g.start:]]
    assert [line.split(" = ")[0] for line in lines] == expected


def test_predictive_yes():
    assert run_task(5, LL1) == "YES"
    assert run_task(5, SIMPLE) == "YES"


@pytest.mark.parametrize("text", [COMMON_PREFIX, EPS_CONFLICT, UNREACHABLE, NON_GENERATING])
def test_predictive_no(text):
    assert run_task(5, text) == "NO"
    assert not parse_grammar(text).is_predictive()


def test_unknown_task():
    with pytest.raises(ValueError, match="unrecognized task number 9"):
        run_task(9, SIMPLE)


def test_main_runs_task(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(SIMPLE))
    assert main(["1"]) == 0
    assert capsys.readouterr().out == run_task(1, SIMPLE)


def test_main_parses_leading_digits(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(SIMPLE))
    assert main(["3x"]) == 0
    assert capsys.readouterr().out == run_task(3, SIMPLE)


def test_main_missing_argument(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Error: missing argument\n"


def test_main_unknown_task(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(SIMPLE))
    assert main(["9"]) == 1
    assert capsys.readouterr().out == "Error: unrecognized task number 9\n"


def test_main_syntax_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("S -> #"))
    assert main(["1"]) == 1
    assert capsys.readouterr().out == "Syntax error!\n"