"""
DocLocalizer Translation Engines

Supported engines:
- Azure AI Translator (Translator v3 REST API)
"""
from .base import BaseTranslator, ContentType, TranslationRequest
from .azure import AzureTranslator
from .errors import (
    ExpiredOrInvalidResponse,
    MissingCredentialsError,
    RemoteTranslationError,
    TranslationError,
    UnsupportedContentType,
)
from .factory import build_translator, get_available_engines, AVAILABLE_ENGINES
from .service import TranslationService
from .orchestrator import HtmlTranslationResult, TranslationOrchestrator
from .manager import TranslationManager

__all__ = [
    "BaseTranslator",
    "ContentType",
    "TranslationRequest",
    "AzureTranslator",
    "ExpiredOrInvalidResponse",
    "MissingCredentialsError",
    "RemoteTranslationError",
    "TranslationError",
    "UnsupportedContentType",
    "build_translator",
    "get_available_engines",
    "AVAILABLE_ENGINES",
    "TranslationService",
    "HtmlTranslationResult",
    "TranslationOrchestrator",
    "TranslationManager",
]
