from __future__ import annotations

import asyncio

from config import SETTINGS, AppSettings

from .base import BaseTranslator, ContentType
from .factory import build_translator
from .orchestrator import ProgressCallback, TranslationOrchestrator
from .service import TranslationService


class TranslationManager:
    """Blocking entry point: one event loop and one backend per call."""

    def __init__(self, settings: AppSettings | None = None, *, engine: str = "azure") -> None:
        self.settings = settings or SETTINGS
        self.engine = engine

    def build_orchestrator(self, backend: BaseTranslator, *, category: str | None = None) -> TranslationOrchestrator:
        limits = self.settings.translator
        service = TranslationService(
            backend,
            max_request_size=limits.max_request_size,
            category=category or limits.category,
        )
        return TranslationOrchestrator(
            service,
            max_request_size=limits.max_request_size,
            max_batch_count=limits.max_batch_count,
        )

    def translate(
        self,
        content: str,
        source_lang: str,
        target_lang: str,
        content_type: ContentType | str = ContentType.PLAIN,
        *,
        category: str | None = None,
        progress_cb: ProgressCallback | None = None,
    ) -> str:
        kind = ContentType.parse(content_type)
        if source_lang == target_lang:
            return content
        return asyncio.run(
            self._run(content, source_lang, target_lang, kind, category=category, progress_cb=progress_cb)
        )

    async def _run(
        self,
        content: str,
        source_lang: str,
        target_lang: str,
        content_type: ContentType,
        *,
        category: str | None,
        progress_cb: ProgressCallback | None,
    ) -> str:
        backend = build_translator(self.engine, settings=self.settings)
        try:
            orchestrator = self.build_orchestrator(backend, category=category)
            return await orchestrator.translate(
                content,
                source_lang,
                target_lang,
                content_type,
                progress_cb=progress_cb,
            )
        finally:
            await backend.close()
