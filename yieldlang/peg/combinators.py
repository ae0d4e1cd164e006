# yieldlang/peg/combinators.py
"""Constructor functions for combinator nodes.

Grammars read better as `delimited(tag("("), ref("expr"), tag(")"))` than as
raw node literals; every helper here only builds data from ast.py.
"""
from __future__ import annotations
from operator import itemgetter
from typing import Any, Callable, Optional
from .ast import (
    Literal, Pattern, Ref, Not, Repeat, SepBy, Seq, Choice, Map, Convert,
    Recognize, Context, Eof, Node
)


def tag(text: str) -> Literal:
    return Literal(text)


def pattern(source: str, label: str) -> Pattern:
    return Pattern(source, label)


def ref(name: str) -> Ref:
    return Ref(name)


def seq(*items: Node) -> Seq:
    return Seq(tuple(items))


def alt(*alts: Node) -> Choice:
    return Choice(tuple(alts))


def opt(node: Node) -> Repeat:
    return Repeat(node, "?")


def many0(node: Node) -> Repeat:
    return Repeat(node, "*")


def many1(node: Node) -> Repeat:
    return Repeat(node, "+")


def separated_list1(sep: Node, item: Node) -> SepBy:
    return SepBy(item, sep)


def not_(node: Node, label: Optional[str] = None) -> Not:
    return Not(node, label or f"not {describe(node)}")


def transform(node: Node, fn: Callable[[Any], Any]) -> Map:
    return Map(node, fn)


def convert(node: Node, fn: Callable[[Any], Any], label: str) -> Convert:
    return Convert(node, fn, label)


def value(val: Any, node: Node) -> Map:
    return Map(node, lambda _: val)


def recognize(node: Node) -> Recognize:
    return Recognize(node)


def context(name: str, node: Node) -> Context:
    return Context(name, node)


def eof() -> Eof:
    return Eof()


# ---- sequence shapes ----

def preceded(first: Node, second: Node) -> Map:
    return Map(Seq((first, second)), itemgetter(1))


def terminated(first: Node, second: Node) -> Map:
    return Map(Seq((first, second)), itemgetter(0))


def delimited(left: Node, inner: Node, right: Node) -> Map:
    return Map(Seq((left, inner, right)), itemgetter(1))


def separated_pair(first: Node, sep: Node, second: Node) -> Map:
    return Map(Seq((first, sep, second)), itemgetter(0, 2))


def describe(node: Node) -> str:
    """Short human label for a node, used in 'expected ...' lists."""
    if isinstance(node, Literal):
        return repr(node.text)
    if isinstance(node, Pattern):
        return node.label
    if isinstance(node, Ref):
        return node.name
    if isinstance(node, Context):
        return node.name
    if isinstance(node, Convert):
        return node.label
    if isinstance(node, (Map, Recognize, Not, Repeat)):
        return describe(node.node)
    if isinstance(node, Eof):
        return "end of input"
    return type(node).__name__.lower()
