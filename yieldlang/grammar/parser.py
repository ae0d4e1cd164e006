# yieldlang/grammar/parser.py
"""yieldlang 파서 진입점.

- `parse_program(text)` : 전체 소스 → `Block` (실패 시 ParseError 계열 예외)
- `parse_expr(text)`    : 식 하나(앞뒤 공백 허용) → `Expr`

파싱은 all-or-nothing 이다. 실패 값(Failure)은 엔진 안에서만 오가고,
이 경계에서 단 하나의 예외로 바뀐다.
"""

from __future__ import annotations
from typing import Optional
from ..peg.engine import DEFAULT_MAX_DEPTH
from ..peg.result import Failure, Result, TOO_DEEP
from ..peg.runtime import PegProgram, PegRunner
from ..peg.combinators import eof, ref, terminated
from ..peg.ast import RuleDef
from .ast import Block, Expr
from .errors import ParseError, error_from_failure
from .rules import PROGRAM, build_rules

# 식 하나만 받는 진입 규칙(테스트/REPL 용)
EXPR_PROGRAM = PegProgram.from_rules(
    build_rules() + [RuleDef("single_expr", terminated(ref("expr"), eof()))],
    start="single_expr",
)


def _run(program: PegProgram, text: str, max_depth: int) -> Result:
    try:
        return PegRunner(program, max_depth=max_depth).run(None, text)
    except RecursionError:
        # max_depth가 인터프리터 스택보다 크게 잡힌 경우
        return Failure(0, kind=TOO_DEEP, committed=True,
                       message="expression nesting exhausted the interpreter stack")


def parse_program(text: str, *, max_depth: int = DEFAULT_MAX_DEPTH,
                  filename: Optional[str] = None) -> Block:
    """Parse a whole source file into a single `Block`.

    Raises ParseError (or one of its subclasses) when the text is not a
    complete program.
    """
    res = _run(PROGRAM, text, max_depth)
    if isinstance(res, Failure):
        raise error_from_failure(text, res, filename)
    return res.value


def parse_expr(text: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Expr:
    res = _run(EXPR_PROGRAM, text, max_depth)
    if isinstance(res, Failure):
        raise error_from_failure(text, res)
    return res.value


__all__ = ["parse_program", "parse_expr", "ParseError"]
