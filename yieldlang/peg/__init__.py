# yieldlang/peg/__init__.py
"""Backtracking combinator submodule for yieldlang.

This package provides:
- Node types for composable parsers (literal, regex run, lookahead,
  repetition, separated lists, sequence, ordered choice, value mapping)
- Constructor helpers to assemble grammars from those nodes
- A Packrat (memoizing) engine/runtime that returns Success/Failure values

It is intentionally independent from yieldlang.grammar.
"""

from .ast import (
    Literal, Pattern, Ref, Not, Repeat, SepBy, Seq, Choice, Map, Convert,
    Recognize, Context, Eof, RuleDef, PegGrammar,
)
from .result import (
    Success, Failure, Frame, Result, MISMATCH, MALFORMED, INCOMPLETE, TOO_DEEP,
)
from .engine import Packrat, DEFAULT_MAX_DEPTH
from .runtime import PegProgram, PegRunner
