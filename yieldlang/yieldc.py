# yieldlang/yieldc.py
"""yieldc – yieldlang front-end CLI

사용 예)
    $ python -m yieldlang.yieldc check examples/hello.yl -D
    $ python -m yieldlang.yieldc ast   examples/hello.yl --max-depth 16
    $ python -m yieldlang.yieldc fmt   examples/hello.yl

기능
----
- check : 소스를 파싱해 문장 수를 요약 출력
- ast   : 파싱된 AST를 문장 단위로 출력
- fmt   : AST를 다시 소스 텍스트로 렌더링해 출력

코드 생성(backend)은 이 도구의 범위 밖이다.
디버그 모드(-D/--debug)를 켜면 단계별 진행 상황을 stderr로 출력합니다.
"""

from __future__ import annotations
import argparse
import sys
from typing import Optional

# ------------------------------
# 헬퍼
# ------------------------------

def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)

# ------------------------------
# 파이프라인 로딩
# ------------------------------

def _load_program(path: str, debug: bool, max_depth: int):
    """소스 파일을 읽어 Block(AST)까지 만든다."""
    from .grammar.loader import load_source
    from .grammar.parser import parse_program

    src = load_source(path)
    if debug: _eprint("[DEBUG] source loaded | chars=%d lines=%d" %
                      (len(src), src.count("\n") + 1))

    block = parse_program(src, max_depth=max_depth, filename=path)
    if debug: _eprint("[DEBUG] AST ready | statements=%d" % len(block.exprs))
    return block


def _run_pipeline(args):
    """공통 오류 처리. 성공 시 (block, None), 실패 시 (None, exit code)."""
    try:
        return _load_program(args.file, debug=args.debug, max_depth=args.max_depth), None
    except SyntaxError as e:
        _eprint("[SYNTAX ERROR]")
        _eprint(str(e))
        return None, 2
    except (OSError, UnicodeDecodeError) as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return None, 2

# ------------------------------
# 커맨드 구현
# ------------------------------

def cmd_check(args) -> int:
    block, code = _run_pipeline(args)
    if block is None:
        return code
    print(f"[CHECK OK] statements={len(block.exprs)}")
    return 0


def cmd_ast(args) -> int:
    block, code = _run_pipeline(args)
    if block is None:
        return code
    for i, e in enumerate(block.exprs):
        print(f"{i:03d}: {e!r}")
    return 0


def cmd_fmt(args) -> int:
    from .grammar.render import render_program
    block, code = _run_pipeline(args)
    if block is None:
        return code
    sys.stdout.write(render_program(block))
    return 0

# ------------------------------
# 엔트리포인트
# ------------------------------

def main(argv: Optional[list[str]] = None) -> int:
    from .peg.engine import DEFAULT_MAX_DEPTH

    ap = argparse.ArgumentParser(prog="yieldc", description="yieldlang front-end CLI")
    sub = ap.add_subparsers(dest="cmd", required=True)

    def _common(p):
        p.add_argument("file", help="소스 파일")
        p.add_argument("--max-depth", type=int, default=DEFAULT_MAX_DEPTH,
                       help=f"식 중첩 깊이 제한 (기본 {DEFAULT_MAX_DEPTH})")
        p.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")

    p_check = sub.add_parser("check", help="소스를 파싱해 문법 오류 유무를 확인합니다")
    _common(p_check)
    p_check.set_defaults(func=cmd_check)

    p_ast = sub.add_parser("ast", help="파싱된 AST를 출력합니다")
    _common(p_ast)
    p_ast.set_defaults(func=cmd_ast)

    p_fmt = sub.add_parser("fmt", help="AST를 소스 텍스트로 다시 출력합니다")
    _common(p_fmt)
    p_fmt.set_defaults(func=cmd_fmt)

    args = ap.parse_args(argv)
    return int(args.func(args))

if __name__ == "__main__":
    sys.exit(main())
