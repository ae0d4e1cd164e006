import pytest

from yieldlang.peg import (
    PegProgram, PegRunner, Packrat, PegGrammar, RuleDef, Success, Failure,
    MALFORMED, INCOMPLETE, TOO_DEEP,
)
from yieldlang.peg.combinators import (
    alt, context, convert, delimited, eof, many0, many1, not_, opt, pattern,
    recognize, ref, separated_list1, seq, tag, terminated, transform,
)

NUMBER = pattern(r"[0-9]+", "digit")


def run(node, text, pos=0, extra=(), max_depth=32):
    prog = PegProgram.from_rules([RuleDef("start", node), *extra], start="start")
    return PegRunner(prog, max_depth=max_depth).run("start", text, pos)


def test_sequence_fails_on_first_failing_step():
    res = run(seq(tag("a"), tag("b")), "ac")
    assert isinstance(res, Failure)
    assert res.pos == 1
    assert res.expected == ("'b'",)


def test_sequence_failure_leaves_cursor_for_next_alternative():
    res = run(alt(seq(tag("a"), tag("b")), tag("a")), "ac")
    assert (res.value, res.pos) == ("a", 1)


def test_sequence_value_is_tuple():
    res = run(seq(tag("a"), NUMBER), "a12")
    assert res.value == ("a", "12")
    assert res.pos == 3


def test_alternation_merges_expected_labels():
    res = run(alt(tag("x"), tag("y")), "z")
    assert isinstance(res, Failure)
    assert res.pos == 0
    assert res.expected == ("'x'", "'y'")


@pytest.mark.parametrize("alts, value, end", [
    ((tag("ab"), tag("a")), "ab", 2),
    ((tag("a"), tag("ab")), "a", 1),
])
def test_alternation_prefers_earlier_alternative(alts, value, end):
    res = run(alt(*alts), "ab")
    assert (res.value, res.pos) == (value, end)


def test_many0_never_fails():
    res = run(many0(tag("a")), "bbb")
    assert isinstance(res, Success)
    assert (res.value, res.pos) == ([], 0)


def test_many1_requires_one_match():
    assert isinstance(run(many1(tag("a")), "bbb"), Failure)
    res = run(many1(tag("a")), "aab")
    assert (res.value, res.pos) == (["a", "a"], 2)


def test_separated_list_alternates_items_and_separators():
    res = run(separated_list1(tag(","), NUMBER), "1,2,3")
    assert (res.value, res.pos) == (["1", "2", "3"], 5)


def test_separated_list_gives_back_dangling_separator():
    res = run(separated_list1(tag(","), NUMBER), "1,2,")
    assert (res.value, res.pos) == (["1", "2"], 3)


def test_separated_list_needs_one_item():
    assert isinstance(run(separated_list1(tag(","), NUMBER), ""), Failure)


def test_lookahead_negation_consumes_nothing():
    res = run(not_(tag("x")), "abc")
    assert (res.value, res.pos) == (None, 0)


def test_lookahead_negation_fails_when_inner_matches():
    res = run(seq(not_(tag("1"), "no leading one"), NUMBER), "12")
    assert isinstance(res, Failure)
    assert res.expected == ("no leading one",)


def test_optional_and_recognize():
    res = run(recognize(seq(opt(tag("-")), NUMBER)), "-42x")
    assert (res.value, res.pos) == ("-42", 3)
    res = run(recognize(seq(opt(tag("-")), NUMBER)), "42")
    assert res.value == "42"


def test_delimited_keeps_inner_value():
    res = run(delimited(tag("("), NUMBER, tag(")")), "(7)")
    assert res.value == "7"


def test_context_frames_are_innermost_first():
    res = run(context("outer", seq(tag("a"), context("inner", tag("x")))), "ay")
    assert isinstance(res, Failure)
    assert [(f.rule, f.pos) for f in res.trail] == [("inner", 1), ("outer", 0)]


def _reject(_):
    raise ValueError("nope")


def test_convert_failure_is_committed():
    node = alt(convert(NUMBER, _reject, "number"), pattern(r"[0-9a-z]+", "word"))
    res = run(node, "12")
    assert isinstance(res, Failure)
    assert res.kind == MALFORMED
    assert res.committed
    assert res.message == "nope"


def test_convert_failure_escapes_repetition():
    res = run(many0(convert(NUMBER, _reject, "number")), "12")
    assert isinstance(res, Failure)
    assert res.kind == MALFORMED


def test_furthest_failure_survives_optional():
    # opt() swallows the failure at offset 1, but it is still the best report
    res = run(seq(opt(seq(tag("a"), tag("b"))), tag("c")), "ax")
    assert isinstance(res, Failure)
    assert res.pos == 1
    assert res.expected == ("'b'",)


def test_eof_failure_is_incomplete():
    res = run(terminated(tag("a"), eof()), "ab")
    assert isinstance(res, Failure)
    assert res.kind == INCOMPLETE
    assert res.pos == 1


def test_rule_applications_are_memoized():
    calls = []

    def count(v):
        calls.append(v)
        return v

    item = RuleDef("item", transform(tag("a"), count))
    res = run(alt(seq(ref("item"), tag("x")), ref("item")), "a", extra=[item])
    assert res.value == "a"
    assert calls == ["a"]


def test_left_recursion_fails_instead_of_looping():
    res = run(alt(seq(ref("start"), tag("a")), tag("a")), "aa")
    assert (res.value, res.pos) == ("a", 1)


def test_memo_is_per_run():
    g = PegGrammar.from_rules([RuleDef("start", tag("a"))])
    eng = Packrat(g)
    eng.parse("start", "a")
    assert ("start", 0) in eng.memo
    eng.parse("start", "b")
    assert isinstance(eng.memo[("start", 0)], Failure)


NEST = RuleDef("start", alt(delimited(tag("("), ref("start"), tag(")")), tag("x")), guard=True)


def _nest_run(text, max_depth):
    return PegRunner(PegProgram.from_rules([NEST]), max_depth=max_depth).run(None, text)


def test_depth_guard_allows_nesting_up_to_limit():
    assert isinstance(_nest_run("((x))", 3), Success)


def test_depth_guard_reports_dedicated_failure():
    res = _nest_run("(((x)))", 3)
    assert isinstance(res, Failure)
    assert res.kind == TOO_DEEP


def test_undefined_rule_raises():
    with pytest.raises(SyntaxError):
        run(ref("missing"), "x")


def test_duplicate_rule_raises():
    with pytest.raises(SyntaxError):
        PegGrammar.from_rules([RuleDef("a", tag("a")), RuleDef("a", tag("b"))])
