from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, List

from bs4 import Comment, NavigableString, PageElement, Tag
from loguru import logger

from config import MAX_REQUEST_SIZE


# Never translated, nor anything below them.
SKIP_TAGS: FrozenSet[str] = frozenset(
    {
        "script",
        "#text",
        "code",
        "col",
        "colgroup",
        "embed",
        "em",
        "#comment",
        "image",
        "map",
        "media",
        "meta",
        "source",
        "xml",
    }
)


@dataclass(slots=True)
class HtmlChunk:
    node: Tag
    length: int
    order: int


def node_kind(node: PageElement) -> str:
    if isinstance(node, Comment):
        return "#comment"
    if isinstance(node, NavigableString):
        return "#text"
    return (node.name or "").lower()


class HtmlChunkSelector:
    """Pick the translatable subtrees of an HTML tree, in document order.

    A child whose inner HTML fits ``max_size`` becomes one chunk. A larger
    child is not emitted itself; its own children are walked instead, unless
    it has no child elements at all, in which case it is emitted whole.
    Chunks never overlap, so each can be rewritten independently.
    """

    def __init__(self, max_size: int = MAX_REQUEST_SIZE, *, skip_tags: FrozenSet[str] = SKIP_TAGS) -> None:
        self.max_size = max_size
        self.skip_tags = frozenset(tag.lower() for tag in skip_tags)

    def is_skipped(self, node: PageElement) -> bool:
        return not isinstance(node, Tag) or node_kind(node) in self.skip_tags

    def select(self, root: Tag) -> List[HtmlChunk]:
        chunks: List[HtmlChunk] = []
        self._collect(root, chunks)
        return chunks

    def _collect(self, parent: Tag, chunks: List[HtmlChunk]) -> None:
        for child in list(parent.children):
            try:
                self._visit(child, chunks)
            except Exception as exc:  # noqa: BLE001
                logger.warning(f"Skipping HTML subtree <{node_kind(child)}>: {exc}")

    def _visit(self, node: PageElement, chunks: List[HtmlChunk]) -> None:
        if self.is_skipped(node):
            return
        inner = node.decode_contents()
        if len(inner) > self.max_size and any(isinstance(child, Tag) for child in node.children):
            self._collect(node, chunks)
            return
        if inner.strip():
            chunks.append(HtmlChunk(node=node, length=len(inner), order=len(chunks)))
