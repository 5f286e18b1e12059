# minicomp

A small compiler toolkit made of three parts:

- **Lexers** for three small languages: a number-aware lexer that tells
  apart plain numbers, real numbers and base-8 / base-16 literals
  (`minicomp.number_lexer`), a lexer for grammar descriptions
  (`minicomp.grammar_lexer`) and a lexer for a small imperative
  language with `VAR`, `IF`, `WHILE`, `SWITCH`, `input` and `output`
  (`minicomp.program_lexer`).
- **Grammar analysis** (`minicomp.grammar`): reads a context-free
  grammar and lists its symbols, removes useless symbols, computes
  FIRST and FOLLOW sets and decides whether the grammar has a
  predictive parser.
- **An intermediate-code machine** (`minicomp.machine`): runs a linked
  program of assignment, input, output, conditional-jump and jump
  instructions over a flat integer memory.

It needs nothing outside the Python standard library (Python 3.10 or later).

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command-line use

### Tokenizing

`minicomp-lex` reads text from standard input and prints one token per
line as `{lexeme , TYPE , line}`, finishing with the end-of-file token:

```
$ echo "x = 12.5 + 0x08 + 1Fx16" | minicomp-lex
```

Recognised token types include `NUM`, `REALNUM`, `BASE08NUM`,
`BASE16NUM`, `ID`, the keywords `IF WHILE DO THEN PRINT`, operators
and punctuation.

### Analysing a grammar

`minicomp-grammar TASK` reads a grammar from standard input and
performs one task:

| task | output |
|------|--------|
| 1 | terminals then non-terminals, in order of appearance |
| 2 | the grammar with useless symbols removed |
| 3 | FIRST sets of the non-terminals |
| 4 | FOLLOW sets of the non-terminals |
| 5 | `YES` if the grammar has a predictive parser, otherwise `NO` |

A grammar is a list of rules, each written as a left-hand side, `->`,
the right-hand side symbols and a closing `*`; the whole list ends with
`#`. An empty right-hand side stands for epsilon.

```
S -> A B *
A -> a A *
A -> *
B -> b *
#
```

```
$ minicomp-grammar 3 < grammar.txt
FIRST(S) = { a, b }
FIRST(A) = { #, a }
FIRST(B) = { b }
```

### Running the demonstration program

`minicomp-demo` builds a fixed intermediate-code program (inputs,
assignments, nested `IF`s and a `WHILE` loop), runs it on the inputs
`1 2 3 4 5 6` and prints what it outputs.

```
$ minicomp-demo
```

## Library use

```python
from minicomp.grammar import parse_grammar

grammar = parse_grammar("S -> a S * S -> * #")
print(grammar.symbols())
print(grammar.format_sets(grammar.first_sets(), "FIRST"))
print(grammar.is_predictive())
```

```python
from minicomp.number_lexer import tokenize

for token in tokenize("IF x > 3.14 THEN PRINT y"):
    print(token)
```

```python
from minicomp.machine import Machine
from minicomp.demo import build_demo
```

`Machine(inputs)` holds memory and the input queue; `allocate(value)`
reserves a memory cell and returns its address, and `execute(program)`
runs a program starting from its first instruction, raising
`MachineError` on a malformed program. `build_demo()` gives a ready-made
program to try it on.