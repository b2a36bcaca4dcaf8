from __future__ import annotations

from typing import Awaitable, Callable, List, Optional

from .text import is_blank


SentenceBreaker = Callable[[str, str], Awaitable[Optional[List[int]]]]


async def last_sentence_break(
    text: str,
    language: str,
    break_sentences: SentenceBreaker,
    *,
    max_size: int,
) -> int:
    """Offset of the end of the last complete sentence inside ``text[:max_size]``.

    The final reported sentence is never counted: it may be cut off by the
    truncation. No boundary data means offset 0.
    """
    lengths = await break_sentences(text[:max_size], language)
    if not lengths:
        return 0
    return sum(lengths[:-1])


async def split_sentences(
    text: str,
    language: str,
    break_sentences: SentenceBreaker,
    *,
    max_size: int,
) -> List[str] | None:
    """Cut an over-limit string into pieces on sentence boundaries.

    The pieces always concatenate back to ``text``. When no boundary can be
    found the rest of the string is returned as one final piece, which may
    still be over the limit. Returns ``None`` for blank over-limit input.
    """
    if len(text) <= max_size:
        return [text]
    if is_blank(text):
        return None

    pieces: List[str] = []
    cursor = 0
    while cursor <= len(text):
        boundary = await last_sentence_break(text[cursor:], language, break_sentences, max_size=max_size)
        if boundary <= 0:
            break
        pieces.append(text[cursor:cursor + boundary])
        cursor += boundary
    pieces.append(text[cursor:])
    return pieces
