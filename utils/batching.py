from __future__ import annotations

from typing import List, Sequence


def _joined_length(items: Sequence[str]) -> int:
    return sum(len(item) for item in items)


def chunk_by_char_limit(items: Sequence[str], *, max_chars: int, max_items: int) -> List[List[str]]:
    """Split ``items`` into contiguous batches in their original order.

    Each batch holds at most ``max_items`` entries and its concatenated length
    stays below ``max_chars``. A batch is shrunk one item at a time until it
    fits; a single item that is too long on its own is still emitted alone,
    splitting it further is the caller's job.
    """
    if max_items < 1:
        raise ValueError("max_items must be at least 1")

    batches: List[List[str]] = []
    start = 0
    total = len(items)
    while start < total:
        count = min(max_items, total - start)
        while count > 1 and _joined_length(items[start:start + count]) >= max_chars:
            count -= 1
        batches.append(list(items[start:start + count]))
        start += count
    return batches
