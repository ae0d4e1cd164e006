# yieldlang/grammar/loader.py
"""(MVP) 간단한 소스 파일 로더"""

from __future__ import annotations
from pathlib    import Path


def load_source(path: str) -> str:
    """
    Load Source Text
    - UTF-8 (앞머리 BOM은 제거)
    - 줄바꿈은 \\n 으로 통일 (\\r\\n, 단독 \\r 포함)
    """
    raw = Path(path).read_bytes()
    text = raw.decode("utf-8-sig")
    return text.replace("\r\n", "\n").replace("\r", "\n")
