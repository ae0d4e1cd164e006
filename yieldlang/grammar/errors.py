# yieldlang/grammar/errors.py
"""파싱 오류 타입과 보고서 렌더링.

- 모든 오류는 `SyntaxError`의 하위 클래스인 `ParseError`로 통일한다.
  * ParseError            : syntax mismatch (모든 대안이 실패)
  * MalformedLiteralError : 정수 범위 초과, 잘못된 유니코드 스칼라 값
  * IncompleteParseError  : 앞부분은 파싱됐지만 입력 끝에 도달하지 못함
  * NestingTooDeepError   : 중첩 깊이 제한 초과
- 보고서에는 실패 위치의 줄/캐럿(^)과, 안쪽부터 바깥쪽까지의 rule-context
  체인(각 단계의 위치와 스니펫)이 들어간다.
"""

from __future__ import annotations
from typing import List, Optional, Tuple, Type
from ..peg.result import Failure, Frame, MISMATCH, MALFORMED, INCOMPLETE, TOO_DEEP


class ParseError(SyntaxError):
    kind = MISMATCH

    def __init__(self, report: str, *, pos: int = 0, line: int = 1, col: int = 1,
                 expected: Tuple[str, ...] = (), trail: Tuple[Frame, ...] = ()):
        super().__init__(report)
        self.report = report
        self.pos = pos
        self.line = line
        self.col = col
        self.expected = expected
        self.trail = trail

    def __str__(self) -> str:
        return self.report

    @property
    def rules(self) -> List[str]:
        """Names of the rules active at the failure, innermost first."""
        return [f.rule for f in self.trail]


class MalformedLiteralError(ParseError):
    kind = MALFORMED


class IncompleteParseError(ParseError):
    kind = INCOMPLETE


class NestingTooDeepError(ParseError):
    kind = TOO_DEEP


_ERROR_TYPES = {
    MISMATCH: ParseError,
    MALFORMED: MalformedLiteralError,
    INCOMPLETE: IncompleteParseError,
    TOO_DEEP: NestingTooDeepError,
}


def _line_bounds(src: str, pos: int) -> Tuple[int, int]:
    """pos가 속한 라인의 [start, end) 범위를 반환."""
    start = src.rfind("\n", 0, pos)
    start = 0 if start < 0 else start + 1
    end = src.find("\n", pos)
    end = len(src) if end < 0 else end
    if end > start and src[end - 1] == "\r":
        end -= 1
    return start, end


def line_col(src: str, pos: int) -> Tuple[int, int]:
    """절대 오프셋 → (line, col), 둘 다 1-based."""
    pos = max(0, min(pos, len(src)))
    start, _ = _line_bounds(src, pos)
    return src.count("\n", 0, pos) + 1, (pos - start) + 1


def _caret_snippet(src: str, pos: int) -> str:
    """해당 절대 오프셋 pos에 캐럿(^)을 찍은 스니펫을 생성."""
    pos = max(0, min(pos, len(src)))
    start, end = _line_bounds(src, pos)
    line = src[start:end]
    col = (pos - start) + 1
    caret = " " * (col - 1) + "^"
    return f"{line}\n{caret}"


def _found(src: str, pos: int) -> str:
    if pos >= len(src):
        return "end of input"
    ch = src[pos]
    if ch in "\r\n":
        return "end of line"
    return repr(ch)


def _expected_phrase(expected: Tuple[str, ...]) -> str:
    if not expected:
        return ""
    if len(expected) == 1:
        return expected[0]
    return ", ".join(expected[:-1]) + " or " + expected[-1]


def format_failure(src: str, failure: Failure, filename: Optional[str] = None) -> str:
    """Failure 값을 여러 줄짜리 진단 메시지로 렌더링."""
    line, col = line_col(src, failure.pos)
    where = f"{filename}:{line}:{col}" if filename else f"{line}:{col}"
    head = f"Parse error at {where}: {failure.kind}"
    if failure.message:
        head += f": {failure.message}"
    elif failure.expected:
        head += f", expected {_expected_phrase(failure.expected)}, found {_found(src, failure.pos)}"
    parts = [head, _caret_snippet(src, failure.pos)]
    for frame in failure.trail:
        f_line, f_col = line_col(src, frame.pos)
        parts.append(f"in {frame.rule} at {f_line}:{f_col}:\n{_caret_snippet(src, frame.pos)}")
    return "\n".join(parts)


def error_from_failure(src: str, failure: Failure, filename: Optional[str] = None) -> ParseError:
    cls: Type[ParseError] = _ERROR_TYPES.get(failure.kind, ParseError)
    line, col = line_col(src, failure.pos)
    return cls(
        format_failure(src, failure, filename),
        pos=failure.pos, line=line, col=col,
        expected=failure.expected, trail=failure.trail,
    )
