from __future__ import annotations

from typing import List, Sequence

from loguru import logger

from config import DEFAULT_CATEGORY, MAX_REQUEST_SIZE
from utils.sentences import split_sentences
from utils.text import is_blank

from .base import BaseTranslator, ContentType, TranslationRequest
from .errors import ExpiredOrInvalidResponse


class TranslationService:
    """Array and single-string translation on top of one backend.

    Identical source and target languages short-circuit without any remote
    call. Strings at or over ``max_request_size`` are cut on sentence
    boundaries and their pieces are translated one request at a time.
    """

    def __init__(
        self,
        backend: BaseTranslator,
        *,
        max_request_size: int = MAX_REQUEST_SIZE,
        category: str = DEFAULT_CATEGORY,
    ) -> None:
        self.backend = backend
        self.max_request_size = max_request_size
        self.category = category

    async def translate_string(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        content_type: ContentType = ContentType.PLAIN,
        *,
        category: str | None = None,
    ) -> str:
        results = await self.translate_array([text], source_lang, target_lang, content_type, category=category)
        if not results:
            raise ExpiredOrInvalidResponse("No translation returned; the subscription may have expired")
        return results[0]

    async def translate_array(
        self,
        texts: Sequence[str],
        source_lang: str,
        target_lang: str,
        content_type: ContentType = ContentType.PLAIN,
        *,
        category: str | None = None,
    ) -> List[str]:
        if source_lang == target_lang:
            return list(texts)

        resolved_category = category or self.category
        if any(len(text) >= self.max_request_size for text in texts):
            return [
                await self._translate_oversized(text, source_lang, target_lang, content_type, resolved_category)
                for text in texts
            ]

        request = TranslationRequest(
            texts=list(texts),
            source_lang=source_lang,
            target_lang=target_lang,
            category=resolved_category,
            content_type=content_type,
        )
        return await self._send(request)

    async def _translate_oversized(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        content_type: ContentType,
        category: str,
    ) -> str:
        pieces = await split_sentences(
            text,
            source_lang,
            self.backend.break_sentences,
            max_size=self.max_request_size,
        )
        if pieces is None:
            return text

        logger.debug(f"Split {len(text)} chars into {len(pieces)} pieces")
        translated: List[str] = []
        for piece in pieces:
            if is_blank(piece):
                translated.append(piece)
                continue
            request = TranslationRequest(
                texts=[piece],
                source_lang=source_lang,
                target_lang=target_lang,
                category=category,
                content_type=content_type,
            )
            translated.extend(await self._send(request))
        return "".join(translated)

    async def _send(self, request: TranslationRequest) -> List[str]:
        translations = await self.backend.translate_texts(request)
        if len(translations) != len(request.texts):
            raise ExpiredOrInvalidResponse(
                f"Expected {len(request.texts)} translations, got {len(translations)}"
            )
        return translations
