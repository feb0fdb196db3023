import pytest

from thompsonfa.nfa import EPSILON, Nfa, State

STRINGS = ["", "a", "aa", "ab", "bb", "aabb", "ba", "baa"]


def make_n1():
    q0 = State()
    return Nfa({q0}, q0, {"a", "b"}, {q0: {"a": {q0}}}, {q0})


def make_n2():
    q1 = State()
    return Nfa({q1}, q1, {"a", "b"}, {q1: {"b": {q1}}}, {q1})


def build(name):
    if name == "n1":
        return make_n1()
    if name == "n2":
        return make_n2()
    if name == "n3":
        return make_n1() + make_n2()
    if name == "n4":
        return make_n1() | make_n2()
    return (make_n1() + make_n2()).star()


EXPECTED = {
    "n1": [True, True, True, False, False, False, False, False],
    "n2": [True, False, False, False, True, False, False, False],
    "n3": [True, True, True, True, True, True, False, False],
    "n4": [True, True, True, False, True, False, False, False],
    "n5": [True, True, True, True, True, True, True, True],
}

CASES = [
    (name, text, expected)
    for name, results in EXPECTED.items()
    for text, expected in zip(STRINGS, results)
]


@pytest.mark.parametrize("name,text,expected", CASES)
def test_accepts_table(name, text, expected):
    assert build(name).accepts(text) is expected


def test_illegal_character():
    with pytest.raises(ValueError, match="illegal character 'c'"):
        make_n1().accepts("ac")


def test_start_must_be_a_state():
    q0, q1 = State(), State()
    with pytest.raises(ValueError):
        Nfa({q0}, q1, {"a"}, {}, set())


def test_transition_symbol_must_be_in_alphabet():
    q0 = State()
    with pytest.raises(ValueError):
        Nfa({q0}, q0, {"a"}, {q0: {"b": {q0}}}, set())


def test_transition_target_must_be_a_state():
    q0, q1 = State(), State()
    with pytest.raises(ValueError):
        Nfa({q0}, q0, {"a"}, {q0: {"a": {q1}}}, set())


def test_accepting_must_be_states():
    q0, q1 = State(), State()
    with pytest.raises(ValueError):
        Nfa({q0}, q0, {"a"}, {}, {q1})


def test_unpacking_gives_components():
    q0, q1 = State(), State()
    nfa = Nfa({q0, q1}, q0, {"a"}, {q0: {"a": {q1}}}, {q1})
    states, start, alphabet, transitions, accepting = nfa
    assert states == {q0, q1}
    assert start == q0
    assert alphabet == {"a"}
    assert transitions[q0]["a"] == {q1}
    assert transitions[q1] == {}
    assert accepting == {q1}


def test_reachable_follows_epsilon_chain():
    q0, q1, q2, q3 = State(), State(), State(), State()
    nfa = Nfa(
        {q0, q1, q2, q3},
        q0,
        {"a"},
        {q0: {EPSILON: {q1}}, q1: {EPSILON: {q2}}, q2: {"a": {q3}}},
        {q3},
    )
    assert nfa.reachable({q0}) == {q0, q1, q2}
    assert nfa.reachable({q3}) == {q3}
    assert nfa.accepts("a")
    assert not nfa.accepts("")


def test_star_of_concatenation_accepts_repeats():
    n = (make_n1() + make_n2()).star()
    assert n.accepts("abab" * 3)
    assert n.accepts("bbaab")


def test_operands_are_unchanged_by_combination():
    n1 = make_n1()
    n2 = make_n2()
    n1 + n2
    n1.star()
    assert not n1.accepts("b")
    assert not n2.accepts("a")


def test_state_ordering_and_repr():
    first, second = State(), State()
    assert first < second
    assert repr(first) == f"q{first.id}"


def test_repr_marks_accepting_states():
    q0, q1 = State(), State()
    nfa = Nfa({q0, q1}, q0, {"a"}, {q0: {"a": {q1}}}, {q1})
    text = repr(nfa)
    assert f"[{q1!r}]" in text
    assert f"[{q0!r}]" not in text
    assert f"'a' -> {{{q1!r}}}" in text
    assert text.startswith("{\n") and text.endswith("\n}")