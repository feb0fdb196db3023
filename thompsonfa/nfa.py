"""Nondeterministic finite automata with epsilon moves and Thompson-style combinators."""

from __future__ import annotations

import itertools
from collections import deque
from collections.abc import Iterable, Iterator, Mapping
from functools import total_ordering
from typing import Union


class _Epsilon:
    """The empty-move symbol."""

    _instance: _Epsilon | None = None

    def __new__(cls) -> _Epsilon:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ε"


EPSILON = _Epsilon()

Symbol = Union[_Epsilon, str]


@total_ordering
class State:
    """An automaton state with a process-wide unique identifier."""

    __slots__ = ("id",)
    _ids = itertools.count()

    def __init__(self) -> None:
        self.id = next(State._ids)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return self.id == other.id

    def __lt__(self, other: State) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return self.id < other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"q{self.id}"


_Table = dict[State, dict[Symbol, set[State]]]


def _symbol_key(symbol: Symbol) -> tuple[int, str]:
    return (0, "") if symbol is EPSILON else (1, symbol)


def _symbol_repr(symbol: Symbol) -> str:
    return repr(symbol)


def _states_repr(states: Iterable[State]) -> str:
    return "{" + ", ".join(repr(s) for s in sorted(states)) + "}"


def _block(body: str) -> str:
    if not body:
        return "{}"
    indented = "\n".join("  " + line for line in body.split("\n"))
    return "{\n" + indented + "\n}"


def _mutable_copy(transitions: Mapping[State, Mapping[Symbol, Iterable[State]]]) -> _Table:
    return {
        state: {symbol: set(targets) for symbol, targets in moves.items()}
        for state, moves in transitions.items()
    }


class Nfa:
    """An NFA given by its states, start state, alphabet, transitions and accepting states."""

    def __init__(
        self,
        states: Iterable[State],
        start: State,
        alphabet: Iterable[str],
        transitions: Mapping[State, Mapping[Symbol, Iterable[State]]],
        accepting: Iterable[State],
    ) -> None:
        self._states = frozenset(states)
        self._start = start
        self._alphabet = frozenset(alphabet)
        self._accepting = frozenset(accepting)

        if start not in self._states:
            raise ValueError(f"start state {start!r} is not a state of the automaton")
        for char in self._alphabet:
            if not isinstance(char, str) or len(char) != 1:
                raise ValueError(f"alphabet entry {char!r} is not a single character")

        table: dict[State, dict[Symbol, frozenset[State]]] = {s: {} for s in self._states}
        for state, moves in transitions.items():
            if state not in self._states:
                raise ValueError(f"transition from unknown state {state!r}")
            for symbol, targets in moves.items():
                if symbol is not EPSILON and symbol not in self._alphabet:
                    raise ValueError(f"transition on symbol {symbol!r} outside the alphabet")
                targets = frozenset(targets)
                unknown = targets - self._states
                if unknown:
                    raise ValueError(f"transition to unknown states {_states_repr(unknown)}")
                table[state][symbol] = targets
        self._transitions = table

        unknown = self._accepting - self._states
        if unknown:
            raise ValueError(f"unknown accepting states {_states_repr(unknown)}")

    def accepts(self, text: str) -> bool:
        """Return whether the automaton accepts ``text``."""
        current = self.reachable({self._start})
        for char in text:
            if char not in self._alphabet:
                raise ValueError(f"illegal character '{char}'")
            following: set[State] = set()
            for state in current:
                following |= self._transitions[state].get(char, frozenset())
            current = self.reachable(following)
        return not current.isdisjoint(self._accepting)

    def __iter__(self) -> Iterator:
        """Yield states, start, alphabet, transitions and accepting states, in that order."""
        yield self._states
        yield self._start
        yield self._alphabet
        yield {state: dict(moves) for state, moves in self._transitions.items()}
        yield self._accepting

    def __add__(self, other: Nfa) -> Nfa:
        """Concatenation: words of ``self`` followed by words of ``other``."""
        if not isinstance(other, Nfa):
            return NotImplemented
        states, start, alphabet, transitions, accepting = other
        if not self._states.isdisjoint(states):
            raise ValueError("automata to combine must have disjoint states")

        table = _mutable_copy(self._transitions)
        table.update(_mutable_copy(transitions))
        for state in self._accepting:
            table[state].setdefault(EPSILON, set()).add(start)

        return Nfa(self._states | states, self._start, self._alphabet | alphabet, table, accepting)

    def __or__(self, other: Nfa) -> Nfa:
        """Union: words of either automaton."""
        if not isinstance(other, Nfa):
            return NotImplemented
        states, start, alphabet, transitions, accepting = other
        if not self._states.isdisjoint(states):
            raise ValueError("automata to combine must have disjoint states")

        new_start = State()
        table = _mutable_copy(self._transitions)
        table.update(_mutable_copy(transitions))
        table[new_start] = {EPSILON: {self._start, start}}

        return Nfa(
            self._states | states | {new_start},
            new_start,
            self._alphabet | alphabet,
            table,
            self._accepting | accepting,
        )

    def star(self) -> Nfa:
        """Kleene star: any number of repetitions, including none."""
        new_start = State()
        table = _mutable_copy(self._transitions)
        table[new_start] = {EPSILON: {self._start}}
        for state in self._accepting:
            table[state].setdefault(EPSILON, set()).add(self._start)

        return Nfa(
            self._states | {new_start},
            new_start,
            self._alphabet,
            table,
            self._accepting | {new_start},
        )

    def reachable(self, states: Iterable[State]) -> frozenset[State]:
        """Return the epsilon closure of ``states``."""
        seen = set(states)
        queue = deque(seen)
        while queue:
            state = queue.popleft()
            for target in self._transitions[state].get(EPSILON, frozenset()):
                if target not in seen:
                    seen.add(target)
                    queue.append(target)
        return frozenset(seen)

    def __repr__(self) -> str:
        if not self._transitions:
            return "{}"
        entries = []
        for state in sorted(self._transitions):
            moves = self._transitions[state]
            label = f"[{state!r}]" if state in self._accepting else repr(state)
            body = ",\n".join(
                f"{_symbol_repr(symbol)} -> {_states_repr(moves[symbol])}"
                for symbol in sorted(moves, key=_symbol_key)
            )
            entries.append(f"{label}: {_block(body)},")
        return _block("\n".join(entries))