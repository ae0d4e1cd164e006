# yieldlang/grammar/literals.py
r"""리터럴/식별자 파서 (combinator 노드)

- INTEGER    : 10진 숫자열 → 32비트 부호 있는 정수 (범위 밖이면 malformed literal)
- BOOLEAN    : true / false (뒤에 식별자 문자가 오면 불일치 → `truefoo`는 식별자)
- STRING     : "..." 본문은 fragment들의 연결
    * 따옴표/백슬래시가 아닌 문자들의 최장 run (비어 있으면 안 됨)
    * 이스케이프: \n \r \t \b \f \\ \/ \" 그리고 \u{H..H} (1~6자리)
    * 백슬래시 + 공백류 run(개행 포함) → 아무것도 남기지 않음 (줄 이어쓰기)
- IDENTIFIER : [A-Za-z0-9_]+ 이되 첫 글자가 숫자가 아님 (부정 lookahead로 검사)
"""

from __future__ import annotations
from ..peg.combinators import (
    alt, convert, delimited, many0, not_, pattern, preceded, recognize,
    seq, tag, terminated, transform, value,
)

INT_MAX = 2**31 - 1
MAX_CODE_POINT = 0x10FFFF

# ---- 문자 클래스 ----
DIGIT = pattern(r"[0-9]", "digit")
DIGITS = pattern(r"[0-9]+", "digit")
IDENT_CHARS = pattern(r"[A-Za-z0-9_]+", "identifier")
IDENT_CHAR = pattern(r"[A-Za-z0-9_]", "identifier character")
HEX_DIGITS = pattern(r"[0-9A-Fa-f]{1,6}", "hex digit")
MULTISPACE1 = pattern(r"[ \t\r\n]+", "whitespace")
STRING_RUN = pattern(r'[^"\\]+', "string character")


def to_i32(digits: str) -> int:
    # 긴 숫자열을 int()로 바꾸기 전에 자릿수로 먼저 거른다
    if len(digits.lstrip("0")) > 10 or int(digits) > INT_MAX:
        raise ValueError(f"integer literal {digits} does not fit in 32 bits")
    return int(digits)


def to_scalar(hex_digits: str) -> str:
    cp = int(hex_digits, 16)
    if cp > MAX_CODE_POINT or 0xD800 <= cp <= 0xDFFF:
        raise ValueError(f"\\u{{{hex_digits}}} is not a valid unicode scalar value")
    return chr(cp)


INTEGER = convert(DIGITS, to_i32, "32-bit integer")

_WORD_END = not_(IDENT_CHAR, "end of word")
BOOLEAN = alt(
    value(True, terminated(tag("true"), _WORD_END)),
    value(False, terminated(tag("false"), _WORD_END)),
)

# ---- 문자열 ----
_UNICODE = convert(
    preceded(tag("u"), delimited(tag("{"), HEX_DIGITS, tag("}"))),
    to_scalar,
    "unicode escape",
)

_ESCAPED_CHAR = preceded(
    tag("\\"),
    alt(
        _UNICODE,
        value("\n", tag("n")),
        value("\r", tag("r")),
        value("\t", tag("t")),
        value("\b", tag("b")),
        value("\f", tag("f")),
        value("\\", tag("\\")),
        value("/", tag("/")),
        value('"', tag('"')),
    ),
)

_ESCAPED_WS = value("", preceded(tag("\\"), MULTISPACE1))

STRING_FRAGMENT = alt(STRING_RUN, _ESCAPED_CHAR, _ESCAPED_WS)

STRING = delimited(tag('"'), transform(many0(STRING_FRAGMENT), "".join), tag('"'))

# ---- 식별자 ----
IDENTIFIER = recognize(seq(not_(DIGIT, "identifier not starting with a digit"), IDENT_CHARS))
