# yieldlang/peg/engine.py
from __future__ import annotations
from typing import Dict, List, Tuple, Optional
from .ast import (
    Literal, Pattern, Ref, Not, Repeat, SepBy, Seq, Choice, Map, Convert,
    Recognize, Context, Eof, PegGrammar, Node
)
from .result import (
    Success, Failure, Result, furthest, MALFORMED, INCOMPLETE, TOO_DEEP
)

# Packrat engine:
# - Memoize only rule applications (rule_name, pos) -> Result
# - Left recursion is not supported (typical PEG restriction).
# - Every evaluation returns a fresh Success/Failure; a failure never moves the
#   caller's cursor, so backtracking is just retrying from the old offset.

DEFAULT_MAX_DEPTH = 32

# memo marker for a rule application that is still being evaluated
_IN_PROGRESS = object()


class Packrat:
    def __init__(self, g: PegGrammar, max_depth: int = DEFAULT_MAX_DEPTH):
        self.g = g
        self.max_depth = max_depth
        self.memo: Dict[Tuple[str, int], object] = {}
        self.depth = 0

    # ---- Public entrypoint for one rule ----
    def parse(self, rule_name: str, text: str, pos: int = 0) -> Result:
        # Clear memo per top-level run
        self.memo.clear()
        self.depth = 0
        return self._apply_rule(rule_name, text, pos)

    # ---- Rule application with memoization ----
    def _apply_rule(self, name: str, text: str, pos: int) -> Result:
        key = (name, pos)
        m = self.memo.get(key)
        if m is _IN_PROGRESS:
            # left recursion or re-entry -> fail (PEG disallows left recursion)
            return Failure(pos, (name,), message=f"left-recursive application of '{name}'")
        if m is not None:
            return m  # type: ignore[return-value]

        rule = self.g.require_rule(name)
        if rule.guard and self.depth >= self.max_depth:
            return Failure(
                pos, (name,), kind=TOO_DEEP, committed=True,
                message=f"expressions nested deeper than {self.max_depth} levels",
            )

        self.memo[key] = _IN_PROGRESS
        if rule.guard:
            self.depth += 1
        try:
            res = self._eval(rule.expr, text, pos)
        finally:
            if rule.guard:
                self.depth -= 1
        self.memo[key] = res
        return res

    # ---- Evaluator for expressions ----
    def _eval(self, node: Node, text: str, pos: int) -> Result:
        if isinstance(node, Literal):
            if text.startswith(node.text, pos):
                return Success(node.text, pos + len(node.text))
            return Failure(pos, (repr(node.text),))

        if isinstance(node, Pattern):
            m = node.regex.match(text, pos)
            if m is not None:
                return Success(m.group(0), m.end())
            return Failure(pos, (node.label,))

        if isinstance(node, Ref):
            return self._apply_rule(node.name, text, pos)

        if isinstance(node, Not):
            r = self._eval(node.node, text, pos)
            if isinstance(r, Success):
                return Failure(pos, (node.label,))
            if r.committed:
                return r
            return Success(None, pos)

        if isinstance(node, Repeat):
            if node.kind == "?":
                r = self._eval(node.node, text, pos)
                if isinstance(r, Success) or r.committed:
                    return r
                return Success(None, pos, r)
            elif node.kind in ("*", "+"):
                return self._repeat(node, text, pos)
            else:
                raise AssertionError(f"unknown repeat kind {node.kind!r}")

        if isinstance(node, SepBy):
            return self._sep_by(node, text, pos)

        if isinstance(node, Seq):
            cur = pos
            values = []
            hint: Optional[Failure] = None
            for it in node.items:
                r = self._eval(it, text, cur)
                if isinstance(r, Failure):
                    return r if r.committed else r.merge(hint)
                values.append(r.value)
                hint = furthest(hint, r.hint)
                cur = r.pos
            return Success(tuple(values), cur, hint)

        if isinstance(node, Choice):
            failed: Optional[Failure] = None
            for it in node.alts:
                r = self._eval(it, text, pos)
                if isinstance(r, Success):
                    return Success(r.value, r.pos, furthest(r.hint, failed))
                if r.committed:
                    return r
                failed = furthest(failed, r)
            if failed is None:
                return Failure(pos)
            return failed

        if isinstance(node, Map):
            r = self._eval(node.node, text, pos)
            if isinstance(r, Failure):
                return r
            return Success(node.fn(r.value), r.pos, r.hint)

        if isinstance(node, Convert):
            r = self._eval(node.node, text, pos)
            if isinstance(r, Failure):
                return r
            try:
                value = node.fn(r.value)
            except ValueError as e:
                return Failure(pos, (node.label,), kind=MALFORMED, message=str(e), committed=True)
            return Success(value, r.pos, r.hint)

        if isinstance(node, Recognize):
            r = self._eval(node.node, text, pos)
            if isinstance(r, Failure):
                return r
            return Success(text[pos:r.pos], r.pos, r.hint)

        if isinstance(node, Context):
            r = self._eval(node.node, text, pos)
            if isinstance(r, Failure):
                return r.push(node.name, pos)
            if r.hint is not None:
                return Success(r.value, r.pos, r.hint.push(node.name, pos))
            return r

        if isinstance(node, Eof):
            if pos >= len(text):
                return Success(None, pos)
            return Failure(pos, ("end of input",), kind=INCOMPLETE)

        raise AssertionError(f"unknown node: {node!r}")

    def _repeat(self, node: Repeat, text: str, pos: int) -> Result:
        cur = pos
        values: List[object] = []
        hint: Optional[Failure] = None
        while True:
            r = self._eval(node.node, text, cur)
            if isinstance(r, Failure):
                if r.committed:
                    return r
                hint = furthest(hint, r)
                break
            hint = furthest(hint, r.hint)
            if r.pos == cur:
                # zero-width match; stop instead of looping forever
                values.append(r.value)
                break
            values.append(r.value)
            cur = r.pos
        if node.kind == "+" and not values:
            return hint if hint is not None else Failure(pos)
        return Success(values, cur, hint)

    def _sep_by(self, node: SepBy, text: str, pos: int) -> Result:
        first = self._eval(node.item, text, pos)
        if isinstance(first, Failure):
            return first
        values = [first.value]
        cur = first.pos
        hint = first.hint
        while True:
            s = self._eval(node.sep, text, cur)
            if isinstance(s, Failure):
                if s.committed:
                    return s
                hint = furthest(hint, s)
                break
            r = self._eval(node.item, text, s.pos)
            if isinstance(r, Failure):
                if r.committed:
                    return r
                # element missing after the separator: give the separator back
                hint = furthest(hint, furthest(s.hint, r))
                break
            if r.pos == cur:
                break
            values.append(r.value)
            hint = furthest(hint, furthest(s.hint, r.hint))
            cur = r.pos
        return Success(values, cur, hint)
