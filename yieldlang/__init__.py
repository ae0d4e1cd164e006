# yieldlang/__init__.py
"""yieldlang front end: source text -> AST.

    from yieldlang import parse_program
    block = parse_program(source_text)
"""

__version__ = "0.1.0"

from .grammar import (
    Boolean, Integer, String, LiteralValue, Literal, Identifier,
    AssignmentExpr, FunctionApplication, Block, Expr,
    ParseError, MalformedLiteralError, IncompleteParseError, NestingTooDeepError,
    parse_program, parse_expr, render, render_program, load_source,
)
