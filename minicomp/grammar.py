"""Context-free grammar analysis: useless symbols, FIRST and FOLLOW sets, predictive parsing."""

from __future__ import annotations

import re
import sys
from collections import defaultdict
from dataclasses import dataclass
from itertools import combinations
from typing import Iterable, Mapping

from .grammar_lexer import LexicalAnalyzer, TokenType

EPSILON = 0
"""Index of the empty string symbol ``#``."""

END_MARKER = 1
"""Index of the end-of-input symbol ``$``."""

SYNTAX_ERROR = "Syntax error!"

_RESERVED = ("#", "$")


class _UnknownTaskError(ValueError):
    """Raised for a task number that has no meaning."""


@dataclass(frozen=True)
class GrammarRule:
    """A production: symbol indices of its left-hand side and right-hand side."""

    lhs: int
    rhs: tuple[int, ...]


def _add_without_epsilon(dest: set[int], source: Iterable[int]) -> bool:
    new = set(source) - dest - {EPSILON}
    dest |= new
    return bool(new)


@dataclass(frozen=True)
class Grammar:
    """A grammar whose symbols are indices into ``names``.

    ``names`` starts with ``#`` and ``$``, followed by the terminals in order
    of appearance and then the non-terminals; the first non-terminal is the
    start symbol.
    """

    names: tuple[str, ...]
    terminal_count: int
    rules: tuple[GrammarRule, ...]

    @property
    def start(self) -> int:
        """Index of the start symbol."""
        return len(_RESERVED) + self.terminal_count

    @property
    def terminals(self) -> range:
        return range(len(_RESERVED), self.start)

    def symbols(self) -> list[str]:
        """Terminals followed by non-terminals, in order of first appearance."""
        return list(self.names[len(_RESERVED):])

    def _generating_rules(self) -> list[GrammarRule]:
        generating = {EPSILON, *self.terminals}
        changed = True
        while changed:
            changed = False
            for rule in self.rules:
                if rule.lhs not in generating and all(s in generating for s in rule.rhs):
                    generating.add(rule.lhs)
                    changed = True
        return [
            rule
            for rule in self.rules
            if rule.lhs in generating and all(s in generating for s in rule.rhs)
        ]

    def useful_rules(self) -> list[GrammarRule]:
        """Rules left after removing non-generating and then unreachable symbols."""
        generating_rules = self._generating_rules()
        reachable = {EPSILON, self.start}
        changed = True
        while changed:
            changed = False
            for rule in generating_rules:
                if rule.lhs not in reachable:
                    continue
                new = set(rule.rhs) - reachable
                if new:
                    reachable |= new
                    changed = True
        return [
            rule
            for rule in generating_rules
            if rule.lhs in reachable and all(s in reachable for s in rule.rhs)
        ]

    def _compute_first(self) -> defaultdict[int, set[int]]:
        first: defaultdict[int, set[int]] = defaultdict(set)
        for rule in self.rules:
            first[rule.lhs] = set()
        first[EPSILON].add(EPSILON)
        for terminal in self.terminals:
            first[terminal].add(terminal)

        changed = True
        while changed:
            changed = False
            for rule in self.rules:
                last = len(rule.rhs) - 1
                for i, symbol in enumerate(rule.rhs):
                    all_previous_nullable = all(EPSILON in first[s] for s in rule.rhs[:i])
                    if all_previous_nullable:
                        if _add_without_epsilon(first[rule.lhs], first[symbol]):
                            changed = True
                        if i == last and EPSILON in first[symbol] and EPSILON not in first[rule.lhs]:
                            first[rule.lhs].add(EPSILON)
                            changed = True
        return first

    def _compute_follow(self, first: defaultdict[int, set[int]]) -> defaultdict[int, set[int]]:
        follow: defaultdict[int, set[int]] = defaultdict(set)
        for rule in self.rules:
            follow[rule.lhs] = set()
        follow[self.start].add(END_MARKER)

        changed = True
        while changed:
            changed = False
            for rule in self.rules:
                for i in reversed(range(len(rule.rhs))):
                    symbol = rule.rhs[i]
                    rest = rule.rhs[i + 1:]
                    if all(EPSILON in first[s] for s in rest):
                        if _add_without_epsilon(follow[symbol], follow[rule.lhs]):
                            changed = True
                    if rest:
                        if _add_without_epsilon(follow[symbol], first[rest[0]]):
                            changed = True
                        blocker = next((s for s in rest if EPSILON not in first[s]), rest[0])
                        if _add_without_epsilon(follow[symbol], first[blocker]):
                            changed = True
        return follow

    def first_sets(self) -> dict[int, frozenset[int]]:
        """FIRST set of every symbol, keyed by symbol index."""
        return {k: frozenset(v) for k, v in self._compute_first().items()}

    def follow_sets(self) -> dict[int, frozenset[int]]:
        """FOLLOW set of every symbol that occurs in a rule, keyed by symbol index."""
        follow = self._compute_follow(self._compute_first())
        return {k: frozenset(v) for k, v in follow.items()}

    def is_predictive(self) -> bool:
        """Whether the grammar admits a predictive (LL(1)) parser."""
        first = self._compute_first()
        follow = self._compute_follow(first)
        useful = self.useful_rules()
        if useful != list(self.rules):
            return False
        if not useful:
            return True
        for a, b in combinations(self.rules, 2):
            if a.lhs == b.lhs and first[a.rhs[0]] & first[b.rhs[0]]:
                return False
        for lhs in {rule.lhs for rule in self.rules}:
            if EPSILON in first[lhs] and first[lhs] & follow[lhs]:
                return False
        return True

    def format_rules(self, rules: Iterable[GrammarRule]) -> str:
        """One ``LHS -> RHS`` line per rule."""
        return "".join(
            f"{self.names[rule.lhs]} -> {' '.join(self.names[s] for s in rule.rhs)}\n"
            for rule in rules
        )

    def format_sets(self, sets: Mapping[int, Iterable[int]], label: str) -> str:
        """One ``LABEL(X) = { ... }`` line per non-terminal, in symbol order."""
        lines = []
        for key in sorted(k for k in sets if k >= self.start):
            members = ", ".join(self.names[v] for v in sorted(sets[key]))
            lines.append(f"{label}({self.names[key]}) = {{ {members} }}\n")
        return "".join(lines)


def parse_grammar(text: str) -> Grammar:
    """Read rules ``A -> x y *`` ending with ``#``; an empty right side means epsilon."""
    lexer = LexicalAnalyzer(text)
    token = lexer.get_token()
    lhs_names = [token.lexeme]
    bodies: list[list[str]] = []

    while token.token_type is not TokenType.END_OF_FILE:
        token = lexer.get_token()
        if lexer.peek(1).token_type is TokenType.ARROW:
            lhs_names.append(token.lexeme)
            continue
        if token.token_type is TokenType.ARROW:
            if lexer.peek(1).token_type is TokenType.STAR:
                bodies.append(["#"])
            continue
        if token.token_type not in (TokenType.STAR, TokenType.END_OF_FILE, TokenType.HASH):
            body = [token.lexeme]
            while lexer.peek(1).token_type not in (TokenType.STAR, TokenType.END_OF_FILE):
                body.append(lexer.get_token().lexeme)
            bodies.append(body)

    lhs_set = set(lhs_names)
    terminals = list(
        dict.fromkeys(s for body in bodies for s in body if s not in lhs_set and s != "#")
    )
    if len(lhs_names) > len(bodies):
        raise ValueError(SYNTAX_ERROR)
    nonterminals = list(
        dict.fromkeys(
            name
            for lhs, body in zip(lhs_names, bodies)
            for name in (lhs, *(s for s in body if s in lhs_set))
        )
    )

    names = (*_RESERVED, *terminals, *nonterminals)
    index: dict[str, int] = {}
    for i, name in enumerate(names):
        index.setdefault(name, i)
    rules = tuple(
        GrammarRule(index[lhs], tuple(index[s] for s in body))
        for lhs, body in zip(lhs_names, bodies)
    )
    return Grammar(names=names, terminal_count=len(terminals), rules=rules)


def run_task(task: int, text: str) -> str:
    """Parse ``text`` and return the output of the numbered analysis task (1 to 5)."""
    grammar = parse_grammar(text)
    if task == 1:
        return " ".join(grammar.symbols())
    if task == 2:
        return grammar.format_rules(grammar.useful_rules())
    if task == 3:
        return grammar.format_sets(grammar.first_sets(), "FIRST")
    if task == 4:
        return grammar.format_sets(grammar.follow_sets(), "FOLLOW")
    if task == 5:
        return "YES" if grammar.is_predictive() else "NO"
    raise _UnknownTaskError(f"unrecognized task number {task}")


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: list[str] | None = None) -> int:
    """Run the task named by the first argument on the grammar read from standard input."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Error: missing argument")
        return 1
    task = _atoi(args[0])
    text = sys.stdin.read()
    try:
        output = run_task(task, text)
    except _UnknownTaskError as exc:
        print(f"Error: {exc}")
        return 1
    except ValueError as exc:
        print(exc)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())