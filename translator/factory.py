"""
Translator Factory

Factory for creating translator instances.
Supports: Azure AI Translator
"""
from __future__ import annotations

from typing import Optional

from config import SETTINGS, AppSettings
from .base import BaseTranslator
from .azure import AzureTranslator
from .errors import MissingCredentialsError


# Available translation engines
AVAILABLE_ENGINES = {
    "azure": "Azure AI Translator",
}


def get_available_engines() -> dict[str, str]:
    """Get available translation engines with display names."""
    return AVAILABLE_ENGINES.copy()


def build_translator(
    engine_name: str,
    *,
    settings: AppSettings | None = None,
    subscription_key: Optional[str] = None,
    subscription_region: Optional[str] = None,
    endpoint: Optional[str] = None,
    proxy: Optional[str] = None,
) -> BaseTranslator:
    """Build a translator instance.

    Args:
        engine_name: Name of the engine (azure)
        settings: Settings to read defaults from (falls back to SETTINGS)
        subscription_key: Azure key override
        subscription_region: Azure region override
        endpoint: Azure endpoint override
        proxy: Optional proxy URL

    Returns:
        BaseTranslator instance

    Raises:
        ValueError: If engine is not supported
        MissingCredentialsError: If no subscription key is configured
    """
    engine = engine_name.lower()
    resolved = settings or SETTINGS

    if engine == "azure":
        key = subscription_key or resolved.azure.subscription_key
        if not key:
            raise MissingCredentialsError(
                "Azure Translator key is required. Set AZURE_TRANSLATOR_KEY or pass it explicitly."
            )
        return AzureTranslator(
            subscription_key=key,
            subscription_region=subscription_region or resolved.azure.subscription_region,
            endpoint=endpoint or resolved.azure.endpoint,
            api_version=resolved.azure.api_version,
            max_request_size=resolved.translator.max_request_size,
            timeout=resolved.translator.session_timeout,
            proxy=proxy or resolved.translator.proxy_url,
        )

    raise ValueError(f"Unsupported translator engine: {engine_name}")
