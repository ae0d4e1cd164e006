# yieldlang/peg/runtime.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional
from .ast import PegGrammar, RuleDef
from .engine import Packrat, DEFAULT_MAX_DEPTH
from .result import Result

@dataclass
class PegProgram:
    """Compiled PEG program."""
    grammar: PegGrammar

    @classmethod
    def from_rules(cls, rules: Iterable[RuleDef], start: Optional[str] = None) -> "PegProgram":
        return cls(PegGrammar.from_rules(rules, start))

class PegRunner:
    """Execute PEG program on input text at a given position."""
    def __init__(self, program: PegProgram, max_depth: int = DEFAULT_MAX_DEPTH):
        self.program = program
        self.max_depth = max_depth

    def run(self, rule_name: Optional[str], text: str, pos: int = 0) -> Result:
        engine = Packrat(self.program.grammar, self.max_depth)
        return engine.parse(rule_name or self.program.grammar.start, text, pos)
