# yieldlang/grammar/rules.py
"""yieldlang 문법 (우선순위 계층, 낮은 계층부터)

    terminals   := literal | identifier
    literal     := INTEGER | STRING | BOOLEAN              (이 순서로 시도)
    grouping    := "(" expr ")" | terminals
    application := grouping SP1 grouping (SP1 grouping)*   (왼쪽 접기)
                 | grouping
    assignment  := identifier SP1 "=" SP1 application
                 | application
    expr        := SP0 assignment SP0                      (개행은 소비하지 않음)
    end_of_statement := (SP0 NEWLINE)+
    program     := expr (end_of_statement expr)* end_of_statement? SP0 EOF

- 모든 계층은 실패 시 아래 계층으로 후퇴(backtrack)한다.
- 대입의 오른쪽은 application 계층이다. `a = b = 1` 은 괄호 없이는 파싱되지 않는다.
- 규칙별 context 이름은 오류 보고의 rule-context 체인에 쓰인다.
"""

from __future__ import annotations
from functools import reduce
from typing import List, Tuple
from ..peg.ast import RuleDef
from ..peg.runtime import PegProgram
from ..peg.combinators import (
    alt, context, delimited, eof, many1, opt, pattern, preceded, ref,
    separated_list1, separated_pair, seq, tag, terminated, transform, value,
)
from .ast import (
    Boolean, Integer, String, Literal, Identifier, AssignmentExpr,
    FunctionApplication, Block, Expr,
)
from .literals import INTEGER, STRING, BOOLEAN, IDENTIFIER

SPACE0 = pattern(r"[ \t]*", "whitespace")
SPACE1 = pattern(r"[ \t]+", "whitespace")
LINE_ENDING = pattern(r"\r?\n", "line terminator")


def _fold_application(parts: Tuple[Expr, List[Expr]]) -> Expr:
    head, tail = parts
    return reduce(FunctionApplication, tail, head)


def _assignment(parts: Tuple[str, Expr]) -> AssignmentExpr:
    name, body = parts
    return AssignmentExpr(name, body)


def _block(exprs: List[Expr]) -> Block:
    return Block(tuple(exprs))


def build_rules() -> List[RuleDef]:
    return [
        RuleDef("program", context("program", transform(
            terminated(
                separated_list1(ref("end_of_statement"), ref("expr")),
                seq(opt(ref("end_of_statement")), SPACE0, eof()),
            ),
            _block,
        ))),
        RuleDef("end_of_statement", context(
            "end of statement",
            value(None, many1(preceded(SPACE0, LINE_ENDING))),
        )),
        RuleDef("expr", context(
            "expr",
            delimited(SPACE0, ref("assignment"), SPACE0),
        ), guard=True),
        RuleDef("assignment", alt(
            context("assignment expr", transform(
                separated_pair(ref("identifier"), delimited(SPACE1, tag("="), SPACE1), ref("application")),
                _assignment,
            )),
            ref("application"),
        )),
        RuleDef("application", alt(
            context("function application", transform(
                separated_pair(ref("grouping"), SPACE1, separated_list1(SPACE1, ref("grouping"))),
                _fold_application,
            )),
            ref("grouping"),
        )),
        RuleDef("grouping", context("parenthesized expr", alt(
            delimited(tag("("), ref("expr"), tag(")")),
            ref("terminals"),
        ))),
        RuleDef("terminals", context("terminals", alt(
            transform(ref("literal"), Literal),
            transform(ref("identifier"), Identifier),
        ))),
        RuleDef("literal", alt(
            transform(INTEGER, Integer),
            transform(STRING, String),
            transform(BOOLEAN, Boolean),
        )),
        RuleDef("identifier", IDENTIFIER),
    ]


PROGRAM = PegProgram.from_rules(build_rules(), start="program")
