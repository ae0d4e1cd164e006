# yieldlang/grammar/ast.py
"""yieldlang AST
- LiteralValue: Boolean / Integer / String (이스케이프는 파싱 시점에 이미 해석됨)
- Expr: Literal / Identifier / AssignmentExpr / FunctionApplication / Block
- 모든 노드는 불변(frozen). 자식은 정확히 한 부모에만 속한다.
"""

from __future__     import annotations
from dataclasses    import dataclass
from typing         import Tuple, Union

# ---- LiteralValue ----

@dataclass(frozen=True)
class Boolean:
    value: bool

@dataclass(frozen=True)
class Integer:
    value: int      # 32비트 부호 있는 범위 (0 ..= 2**31-1, 음수 리터럴 없음)

@dataclass(frozen=True)
class String:
    value: str      # 디코딩된 텍스트

LiteralValue = Union[Boolean, Integer, String]

# ---- Expr ----

@dataclass(frozen=True)
class Literal:
    value: LiteralValue

@dataclass(frozen=True)
class Identifier:
    """해석되지 않은 이름 참조(바인딩 정보 없음)."""
    name: str

@dataclass(frozen=True)
class AssignmentExpr:
    name: str
    value: "Expr"

@dataclass(frozen=True)
class FunctionApplication:
    """이항 적용 노드. `f a b` 는 ((f a) b) 로 표현된다."""
    callee: "Expr"
    argument: "Expr"

@dataclass(frozen=True)
class Block:
    exprs: Tuple["Expr", ...]

Expr = Union[Literal, Identifier, AssignmentExpr, FunctionApplication, Block]
