# thompsonfa

This package provides nondeterministic finite automata that you compose the
way Thompson's construction does. It also has a lexer and a recursive-descent
parser for a small regular-expression language.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Automata (`thompsonfa.nfa`)

You build an `Nfa` from five parts:

- a set of states
- a start state
- an alphabet of single characters
- a transition table
- a set of accepting states

The transition table maps each state to a mapping from a symbol to a set of
next states. A symbol is either a single character or `EPSILON`, the empty
move.

States are `State` objects. Each one gets a fresh identifier when it is
created and shows as `q<id>`.

The constructor checks its arguments and raises `ValueError` in these cases:

- the start state is not one of the states
- an alphabet entry is not a single character
- a transition uses a state that is not one of the states
- a transition uses a symbol that is outside the alphabet
- an accepting state is not one of the states

```python
from thompsonfa.nfa import EPSILON, Nfa, State

q0, q1 = State(), State()
as_ = Nfa({q0}, q0, {"a", "b"}, {q0: {"a": {q0}}}, {q0})
bs = Nfa({q1}, q1, {"a", "b"}, {q1: {"b": {q1}}}, {q1})

as_.accepts("aaa")               # True
(as_ + bs).accepts("aabb")       # concatenation: True
(as_ | bs).accepts("bb")         # union: True
(as_ + bs).star().accepts("ba")  # Kleene star: True
```

The operations and methods:

- `+` is concatenation and `|` is union. The two automata must have disjoint
  state sets; if they share a state, `ValueError` is raised.
- `star()` is the Kleene star. Union and star each add one new start state.
- `accepts(text)` raises `ValueError` ("illegal character ...") if the text
  contains a character outside the alphabet.
- `reachable(states)` returns the epsilon closure of a set of states as a
  `frozenset`.
- Iterating over an `Nfa` yields its five parts in order, so you can unpack
  it:

  ```python
  states, start, alphabet, transitions, accepting = as_
  ```

- `repr()` of an `Nfa` lists the transition table, one block per state.
  Accepting states are shown in square brackets.

## Regular expressions (`thompsonfa.syntax`)

`lex(source)` turns a string into a `TokenStream` and skips whitespace. Each
`Token` has a `kind`, a `char` and its `position` in the source. The kind is
a `TokenKind`: `PIPE` (`|`), `ASTERISK` (`*`), `LPAREN` (`(`), `RPAREN` (`)`)
or `CHAR` (any other character).

`parse(token_stream)`, or `Parser(token_stream).parse()`, reads this grammar:

```
Regex      -> UnionExpr
UnionExpr  -> ConcatExpr "|" UnionExpr | ConcatExpr
ConcatExpr -> RepeatExpr ConcatExpr | RepeatExpr
RepeatExpr -> BaseExpr "*" | BaseExpr
BaseExpr   -> "(" Regex ")" | char
```

The result is a tree of frozen dataclasses:

- `Regex(expr)`
- `UnionExpr(first, rest)`
- `ConcatExpr(first, rest)`
- `RepeatExpr(expr)`

Plain characters are leaves, stored as one-character strings. A single
branch is not wrapped in a node; for example, `a` parses to `Regex('a')`.

If parsing fails, `ParseError` is raised. Its `source`, `position` and
`message` attributes describe the failure. `str()` of the error gives the
message, then the source, then a caret under the failing position.

```python
from thompsonfa.syntax import ParseError, lex, parse

tree = parse(lex("(a*b*)|(ab*)"))

try:
    parse(lex("a)"))
except ParseError as error:
    print(error)   # parse error: did not parse to end, the source, and a caret
```

## Command line

```
thompsonfa "(a*b*)|(ab*)"
```

The command prints the token stream, then the parse tree. If the pattern is
left out, it uses `(a*b*)|(ab*)`. If the pattern does not parse, the command
prints the parse error to standard error and exits with status 1.

## What it does not do

The parser and the automata are separate. Nothing turns a parsed `Regex` into
an `Nfa`, and there is no matching of text against a pattern. To match text
against an expression, build the automaton yourself from `Nfa`, `+`, `|` and
`star()`.