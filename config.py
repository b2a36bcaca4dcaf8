from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import os


MAX_REQUEST_SIZE = 5000
MAX_BATCH_COUNT = 100
DEFAULT_CATEGORY = "general"
DEFAULT_ENDPOINT = "https://api.cognitive.microsofttranslator.com"


def _optional_path(value: str | None) -> Path | None:
    return Path(value) if value else None


@dataclass(slots=True)
class AzureSettings:
    endpoint: str = field(default_factory=lambda: os.getenv("AZURE_TRANSLATOR_ENDPOINT", DEFAULT_ENDPOINT))
    subscription_key: str | None = field(default_factory=lambda: os.getenv("AZURE_TRANSLATOR_KEY"))
    subscription_region: str | None = field(default_factory=lambda: os.getenv("AZURE_TRANSLATOR_REGION"))
    api_version: str = "3.0"


@dataclass(slots=True)
class TranslatorSettings:
    max_request_size: int = MAX_REQUEST_SIZE
    max_batch_count: int = MAX_BATCH_COUNT
    category: str = DEFAULT_CATEGORY
    session_timeout: float = 30.0
    proxy_url: str | None = field(default_factory=lambda: os.getenv("DOCLOCALIZER_PROXY"))


@dataclass(slots=True)
class AppSettings:
    azure: AzureSettings = field(default_factory=AzureSettings)
    translator: TranslatorSettings = field(default_factory=TranslatorSettings)
    default_source_lang: str = field(default_factory=lambda: os.getenv("DOCLOCALIZER_SOURCE", "en"))
    default_target_lang: str = field(default_factory=lambda: os.getenv("DOCLOCALIZER_TARGET", "de"))
    log_file: Path | None = field(default_factory=lambda: _optional_path(os.getenv("DOCLOCALIZER_LOG")))


SETTINGS = AppSettings()
