"""Composable nondeterministic finite automata, a small regular-expression lexer and parser, and a command line for them."""

__version__ = "0.1.0"
__all__ = ["cli", "nfa", "syntax"]