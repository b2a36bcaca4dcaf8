from __future__ import annotations

import re
from typing import Callable, List, Optional

import pytest

from translator.base import BaseTranslator, TranslationRequest
from translator.errors import RemoteTranslationError
from translator.orchestrator import TranslationOrchestrator
from translator.service import TranslationService


SENTENCE_END = re.compile(r"[^.!?]*[.!?]+\s*|[^.!?]+$")


def sentence_lengths(text: str) -> List[int]:
    return [len(match.group(0)) for match in SENTENCE_END.finditer(text) if match.group(0)]


class FakeTranslator(BaseTranslator):
    """In-memory backend: prefixes every text with the target language."""

    name = "fake"

    def __init__(
        self,
        *,
        breaker: Callable[[str], Optional[List[int]]] | None = None,
        fail_on_call: int | None = None,
        drop_results: bool = False,
    ) -> None:
        super().__init__()
        self.breaker = breaker or sentence_lengths
        self.fail_on_call = fail_on_call
        self.drop_results = drop_results
        self.requests: List[TranslationRequest] = []
        self.break_calls: List[str] = []
        self.closed = False

    @property
    def sent_texts(self) -> List[str]:
        return [text for request in self.requests for text in request.texts]

    async def translate_texts(self, request: TranslationRequest) -> List[str]:
        if self.fail_on_call is not None and len(self.requests) + 1 >= self.fail_on_call:
            raise RemoteTranslationError(503, "service unavailable")
        self.requests.append(request)
        if self.drop_results:
            return []
        return [f"{request.target_lang}:{text}" for text in request.texts]

    async def break_sentences(self, text: str, language: str) -> List[int] | None:
        self.break_calls.append(text)
        if not text.strip():
            return None
        return self.breaker(text)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def backend() -> FakeTranslator:
    return FakeTranslator()


@pytest.fixture
def service(backend: FakeTranslator) -> TranslationService:
    return TranslationService(backend)


@pytest.fixture
def orchestrator(service: TranslationService) -> TranslationOrchestrator:
    return TranslationOrchestrator(service)
