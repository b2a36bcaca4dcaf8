from __future__ import annotations

import re
from typing import List, Sequence


LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(content: str) -> List[str]:
    """Split on any newline convention (CRLF, CR or LF)."""
    return LINE_BREAK.split(content)


def join_lines(lines: Sequence[str], *, terminator: str = "\n") -> str:
    return terminator.join(lines)


def is_blank(text: str | None) -> bool:
    return not text or not text.strip()
