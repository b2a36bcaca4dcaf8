from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence

from config import DEFAULT_CATEGORY, MAX_REQUEST_SIZE

from .errors import UnsupportedContentType


class ContentType(str, Enum):
    PLAIN = "plain"
    HTML = "html"

    @classmethod
    def parse(cls, value: "ContentType | str") -> "ContentType":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized in {"plain", "text", "txt"}:
                return cls.PLAIN
            if normalized == "html":
                return cls.HTML
        raise UnsupportedContentType(f"Content type not supported: {value!r}")


@dataclass(slots=True)
class TranslationRequest:
    texts: Sequence[str]
    source_lang: str
    target_lang: str
    category: str = DEFAULT_CATEGORY
    content_type: ContentType = ContentType.PLAIN


class BaseTranslator(ABC):
    name: str = "base"
    max_chars_per_request: int = MAX_REQUEST_SIZE

    def __init__(self, *, timeout: float = 30.0, proxy: str | None = None) -> None:
        self.timeout = timeout
        self.proxy = proxy

    @abstractmethod
    async def translate_texts(self, request: TranslationRequest) -> List[str]:
        """Translate a batch of texts and return the translated payloads."""

    @abstractmethod
    async def break_sentences(self, text: str, language: str) -> List[int] | None:
        """Return sentence lengths for ``text``, or None for blank input."""

    async def close(self) -> None:
        """Release network resources held by the backend."""
