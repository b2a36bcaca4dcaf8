from .html_chunks import SKIP_TAGS, HtmlChunk, HtmlChunkSelector
from .html_document import HtmlDocument

__all__ = [
    "SKIP_TAGS",
    "HtmlChunk",
    "HtmlChunkSelector",
    "HtmlDocument",
]
