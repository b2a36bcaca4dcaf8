from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List

from loguru import logger

from config import MAX_BATCH_COUNT, MAX_REQUEST_SIZE
from markup.html_chunks import HtmlChunkSelector
from markup.html_document import HtmlDocument
from utils.batching import chunk_by_char_limit
from utils.text import is_blank, join_lines, split_lines

from .base import ContentType
from .errors import TranslationError
from .service import TranslationService


ProgressCallback = Callable[[int, int], None]


@dataclass(slots=True)
class HtmlTranslationResult:
    html: str
    translated_chunks: int
    total_chunks: int
    error: TranslationError | None = None

    @property
    def complete(self) -> bool:
        return self.error is None and self.translated_chunks == self.total_chunks


class TranslationOrchestrator:
    def __init__(
        self,
        service: TranslationService,
        *,
        max_request_size: int = MAX_REQUEST_SIZE,
        max_batch_count: int = MAX_BATCH_COUNT,
    ) -> None:
        self.service = service
        self.max_request_size = max_request_size
        self.max_batch_count = max_batch_count
        self.selector = HtmlChunkSelector(max_request_size)

    async def translate(
        self,
        content: str,
        source_lang: str,
        target_lang: str,
        content_type: ContentType | str = ContentType.PLAIN,
        *,
        progress_cb: ProgressCallback | None = None,
    ) -> str:
        kind = ContentType.parse(content_type)
        if source_lang == target_lang:
            return content
        if kind is ContentType.PLAIN:
            return await self.translate_plain(content, source_lang, target_lang, progress_cb=progress_cb)
        result = await self.translate_html_document(content, source_lang, target_lang, progress_cb=progress_cb)
        return result.html

    async def translate_plain(
        self,
        content: str,
        source_lang: str,
        target_lang: str,
        *,
        progress_cb: ProgressCallback | None = None,
    ) -> str:
        lines = split_lines(content)
        batches = chunk_by_char_limit(lines, max_chars=self.max_request_size, max_items=self.max_batch_count)
        logger.debug(f"Prepared {len(lines)} lines in {len(batches)} batches")

        translated: List[str] = []
        for done, batch in enumerate(batches, start=1):
            translated.extend(
                await self.service.translate_array(batch, source_lang, target_lang, ContentType.PLAIN)
            )
            if progress_cb:
                progress_cb(done, len(batches))
        return join_lines(translated)

    async def translate_html_document(
        self,
        content: str,
        source_lang: str,
        target_lang: str,
        *,
        progress_cb: ProgressCallback | None = None,
    ) -> HtmlTranslationResult:
        """Translate title and body of an HTML document in place.

        Errors on the title or on a body small enough for one request are
        raised. Once the body has been cut into chunks, a failing chunk stops
        the run and the document is returned with the chunks done so far.
        """
        document = HtmlDocument.from_string(content)

        title = document.title
        if title is not None and not is_blank(document.inner_html(title)):
            translated = await self.service.translate_string(
                document.inner_html(title), source_lang, target_lang, ContentType.HTML
            )
            document.set_inner_html(title, translated)

        body = document.body
        body_html = document.inner_html(body)
        if len(body_html) < self.max_request_size:
            if is_blank(body_html):
                return HtmlTranslationResult(html=document.render(), translated_chunks=0, total_chunks=0)
            translated = await self.service.translate_string(body_html, source_lang, target_lang, ContentType.HTML)
            document.set_inner_html(body, translated)
            return HtmlTranslationResult(html=document.render(), translated_chunks=1, total_chunks=1)

        chunks = self.selector.select(body)
        logger.debug(f"Body of {len(body_html)} chars split into {len(chunks)} chunks")
        done = 0
        error: TranslationError | None = None
        for chunk in chunks:
            try:
                translated = await self.service.translate_string(
                    document.inner_html(chunk.node), source_lang, target_lang, ContentType.HTML
                )
            except TranslationError as exc:
                logger.warning(f"Stopped after {done} of {len(chunks)} HTML chunks: {exc}")
                error = exc
                break
            document.set_inner_html(chunk.node, translated)
            done += 1
            if progress_cb:
                progress_cb(done, len(chunks))

        return HtmlTranslationResult(
            html=document.render(),
            translated_chunks=done,
            total_chunks=len(chunks),
            error=error,
        )
