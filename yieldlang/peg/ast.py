# yieldlang/peg/ast.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple, Union
import regex as re

# ---- Combinator node definitions ----
#
# A grammar is plain data: frozen nodes wired together, with named rules
# referenced through `Ref`. The engine (engine.py) walks these nodes.

@dataclass(frozen=True)
class Literal:
    text: str  # exact text to match

@dataclass(frozen=True)
class Pattern:
    """Anchored regex match at the cursor; the value is the matched text."""
    source: str
    label: str
    regex: Any = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "regex", re.compile(self.source))

@dataclass(frozen=True)
class Ref:
    name: str

@dataclass(frozen=True)
class Not:
    node: "Node"  # negative lookahead (!)
    label: str

@dataclass(frozen=True)
class Repeat:
    node: "Node"
    kind: str  # '?', '*', '+'

@dataclass(frozen=True)
class SepBy:
    """One or more `item`s separated by `sep`; separator values are dropped."""
    item: "Node"
    sep: "Node"

@dataclass(frozen=True)
class Seq:
    items: Tuple["Node", ...]

@dataclass(frozen=True)
class Choice:
    alts: Tuple["Node", ...]

@dataclass(frozen=True)
class Map:
    node: "Node"
    fn: Callable[[Any], Any]

@dataclass(frozen=True)
class Convert:
    """Like Map, but `fn` may reject the value by raising ValueError.

    A rejection is a malformed literal: the failure is committed, so no
    other alternative is tried.
    """
    node: "Node"
    fn: Callable[[Any], Any]
    label: str

@dataclass(frozen=True)
class Recognize:
    node: "Node"  # value is the consumed slice, not the inner value

@dataclass(frozen=True)
class Context:
    name: str
    node: "Node"

@dataclass(frozen=True)
class Eof:
    pass

Node = Union[Literal, Pattern, Ref, Not, Repeat, SepBy, Seq, Choice,
             Map, Convert, Recognize, Context, Eof]

@dataclass
class RuleDef:
    name: str
    expr: Node
    # applications of a guarded rule count toward the engine's nesting limit
    guard: bool = False

@dataclass
class PegGrammar:
    rules: Dict[str, RuleDef]
    start: str

    @classmethod
    def from_rules(cls, rules, start: Optional[str] = None) -> "PegGrammar":
        table: Dict[str, RuleDef] = {}
        for r in rules:
            if r.name in table:
                raise SyntaxError(f"PEG: duplicate rule '{r.name}'")
            table[r.name] = r
        if not table:
            raise SyntaxError("PEG: empty grammar")
        return cls(rules=table, start=start or next(iter(table)))

    def require_rule(self, name: str) -> RuleDef:
        try:
            return self.rules[name]
        except KeyError:
            raise SyntaxError(f"PEG: undefined rule '{name}'")
