# yieldlang/grammar/render.py
r"""AST → 소스 텍스트.

다시 파싱하면 같은 AST가 나오도록 출력한다.
- 문자열은 다시 이스케이프(\" \\ \n \r \t \b \f, 그 밖의 출력 불가 문자는 \u{H})
- 적용의 callee 쪽 체인은 괄호 없이, 단말이 아닌 인자는 괄호로 감싼다
- 대입의 오른쪽이 대입이면 괄호로 감싼다
- Block은 최상위에서만 허용(한 줄에 한 문장)
"""

from __future__ import annotations
from .ast import (
    Boolean, Integer, String, Literal, Identifier, AssignmentExpr,
    FunctionApplication, Block, Expr, LiteralValue,
)

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
}


def escape_string(s: str) -> str:
    out = []
    for ch in s:
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif not ch.isprintable():
            out.append(f"\\u{{{ord(ch):X}}}")
        else:
            out.append(ch)
    return '"' + "".join(out) + '"'


def render_literal(lit: LiteralValue) -> str:
    if isinstance(lit, Boolean):
        return "true" if lit.value else "false"
    if isinstance(lit, Integer):
        return str(lit.value)
    if isinstance(lit, String):
        return escape_string(lit.value)
    raise TypeError(f"not a literal value: {lit!r}")


def _atom(e: Expr) -> str:
    if isinstance(e, (Literal, Identifier)):
        return render(e)
    return f"({render(e)})"


def render(e: Expr) -> str:
    if isinstance(e, Literal):
        return render_literal(e.value)
    if isinstance(e, Identifier):
        return e.name
    if isinstance(e, AssignmentExpr):
        rhs = _atom(e.value) if isinstance(e.value, AssignmentExpr) else render(e.value)
        return f"{e.name} = {rhs}"
    if isinstance(e, FunctionApplication):
        if isinstance(e.callee, FunctionApplication):
            callee = render(e.callee)
        else:
            callee = _atom(e.callee)
        return f"{callee} {_atom(e.argument)}"
    if isinstance(e, Block):
        raise ValueError("a block can only be rendered as a whole program")
    raise TypeError(f"not an expression: {e!r}")


def render_program(block: Block) -> str:
    return "".join(render(e) + "\n" for e in block.exprs)
