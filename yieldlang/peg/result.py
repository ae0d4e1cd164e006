# yieldlang/peg/result.py
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Optional, Tuple, Union

# failure kinds
MISMATCH = "syntax mismatch"
MALFORMED = "malformed literal"
INCOMPLETE = "incomplete parse"
TOO_DEEP = "nesting too deep"


@dataclass(frozen=True)
class Frame:
    """One named rule that was active when a failure propagated through it."""
    rule: str
    pos: int


@dataclass(frozen=True)
class Failure:
    pos: int                        # offset where the mismatch was detected
    expected: Tuple[str, ...] = ()  # labels of what would have matched there
    kind: str = MISMATCH
    message: str = ""
    trail: Tuple[Frame, ...] = ()   # innermost first
    committed: bool = False         # alternation/repetition must not recover

    def push(self, rule: str, pos: int) -> "Failure":
        return replace(self, trail=self.trail + (Frame(rule, pos),))

    def merge(self, other: Optional["Failure"]) -> "Failure":
        """Keep the failure that got furthest into the input.

        On a tie the expected labels are merged; a specific kind beats a
        plain mismatch, and the deeper context trail wins.
        """
        if other is None:
            return self
        if other.pos != self.pos:
            return self if self.pos > other.pos else other
        if self.committed != other.committed:
            return self if self.committed else other
        first, second = self, other
        if (first.kind == MISMATCH and second.kind != MISMATCH) or (
            first.kind == second.kind and len(second.trail) > len(first.trail)
        ):
            first, second = second, first
        expected = first.expected + tuple(e for e in second.expected if e not in first.expected)
        return replace(first, expected=expected)


@dataclass(frozen=True)
class Success:
    value: Any
    pos: int
    # furthest failure seen while producing this value (diagnostics only)
    hint: Optional[Failure] = None


Result = Union[Success, Failure]


def furthest(a: Optional[Failure], b: Optional[Failure]) -> Optional[Failure]:
    if a is None:
        return b
    return a.merge(b)
