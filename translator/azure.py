"""
Azure AI Translator

Client for the Translator v3 REST API: ``translate`` and ``breaksentence``.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional

import aiohttp

from config import DEFAULT_ENDPOINT, MAX_REQUEST_SIZE
from utils.text import is_blank

from .base import BaseTranslator, ContentType, TranslationRequest
from .errors import ExpiredOrInvalidResponse, MissingCredentialsError, RemoteTranslationError


class AzureTranslator(BaseTranslator):
    """Azure AI Translator over a shared aiohttp session.

    Every call is a single POST with a JSON array body. Batches are sent
    exactly as given; callers are responsible for keeping them inside the
    service limits.
    """

    name = "azure"
    max_chars_per_request = MAX_REQUEST_SIZE

    def __init__(
        self,
        *,
        subscription_key: str,
        subscription_region: str | None = None,
        endpoint: str = DEFAULT_ENDPOINT,
        api_version: str = "3.0",
        max_request_size: int = MAX_REQUEST_SIZE,
        timeout: float = 30.0,
        proxy: str | None = None,
    ) -> None:
        if not subscription_key:
            raise MissingCredentialsError("Azure Translator subscription key is required")

        super().__init__(timeout=timeout, proxy=proxy)
        self.subscription_key = subscription_key
        self.subscription_region = subscription_region
        self.endpoint = endpoint.rstrip("/")
        self.api_version = api_version
        self.max_chars_per_request = max_request_size

        self._session: Optional[aiohttp.ClientSession] = None
        self.logger = logging.getLogger(self.__class__.__name__)

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            headers = {
                "Ocp-Apim-Subscription-Key": self.subscription_key,
                "Content-Type": "application/json",
            }
            if self.subscription_region:
                headers["Ocp-Apim-Subscription-Region"] = self.subscription_region
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            self._session = aiohttp.ClientSession(headers=headers, timeout=timeout)
        return self._session

    async def close(self) -> None:
        """Close the session."""
        if self._session:
            try:
                await self._session.close()
            finally:
                self._session = None

    async def _request(self, route: str, params: Dict[str, str], payload: List[Dict[str, str]]) -> Any:
        session = await self._get_session()
        url = f"{self.endpoint}/{route}"
        try:
            async with session.post(url, params=params, json=payload, proxy=self.proxy) as resp:
                if resp.status != 200:
                    text = await resp.text()
                    raise RemoteTranslationError(resp.status, text)
                try:
                    data = await resp.json(content_type=None)
                except ValueError as e:
                    raise ExpiredOrInvalidResponse(f"Invalid JSON from {route}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self.logger.debug(f"{route} request failed: {e!r}")
            raise RemoteTranslationError(None, str(e) or type(e).__name__) from e

        if data is None:
            raise ExpiredOrInvalidResponse(f"Empty response from {route}")
        return data

    async def translate_texts(self, request: TranslationRequest) -> List[str]:
        """Translate texts in one request, preserving order."""
        texts = list(request.texts)
        if not texts:
            return []

        params = {
            "api-version": self.api_version,
            "from": request.source_lang,
            "to": request.target_lang,
            "category": request.category,
        }
        if request.content_type is ContentType.HTML:
            params["textType"] = "html"

        data = await self._request("translate", params, [{"Text": text} for text in texts])
        if not isinstance(data, list):
            raise ExpiredOrInvalidResponse("Translate response is not a list")

        translations: List[str] = []
        for item in data:
            try:
                translations.append(item["translations"][0]["text"])
            except (KeyError, IndexError, TypeError) as e:
                raise ExpiredOrInvalidResponse("Translate response item has no text") from e

        if len(translations) != len(texts):
            self.logger.warning(
                f"Azure returned {len(translations)} translations for {len(texts)} texts"
            )
        return translations

    async def break_sentences(self, text: str, language: str) -> List[int] | None:
        """Sentence lengths for the first ``max_chars_per_request`` characters."""
        if is_blank(text):
            return None

        params = {"api-version": self.api_version, "language": language}
        payload = [{"Text": text[: self.max_chars_per_request]}]
        data = await self._request("breaksentence", params, payload)
        if not isinstance(data, list):
            raise ExpiredOrInvalidResponse("Break sentence response is not a list")

        lengths: List[int] = []
        for item in data:
            try:
                lengths = [int(value) for value in item["sentLen"]]
            except (KeyError, TypeError, ValueError) as e:
                raise ExpiredOrInvalidResponse("Break sentence response item has no sentLen") from e
        return lengths

    def __del__(self) -> None:
        """Cleanup on deletion."""
        session = getattr(self, "_session", None)
        if session and not session.closed:
            try:
                loop = asyncio.get_running_loop()
                loop.create_task(self.close())
            except RuntimeError:
                pass
