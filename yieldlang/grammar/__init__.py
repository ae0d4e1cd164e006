# yieldlang/grammar/__init__.py
"""yieldlang 언어 문법: AST, 리터럴/식 규칙, 파서 진입점, 오류 보고, 렌더러."""

from .ast import (
    Boolean, Integer, String, LiteralValue, Literal, Identifier,
    AssignmentExpr, FunctionApplication, Block, Expr,
)
from .errors import (
    ParseError, MalformedLiteralError, IncompleteParseError, NestingTooDeepError,
    format_failure,
)
from .parser import parse_program, parse_expr
from .render import render, render_program
from .loader import load_source
