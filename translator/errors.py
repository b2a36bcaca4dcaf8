from __future__ import annotations


class TranslationError(Exception):
    """Base class for translation failures."""


class UnsupportedContentType(TranslationError):
    """Raised for a content kind other than plain text or HTML."""


class MissingCredentialsError(TranslationError):
    """Raised when a backend is built without a subscription key."""


class ExpiredOrInvalidResponse(TranslationError):
    """Raised when a response lacks the data that was asked for.

    An expired subscription answers with an empty result list instead of an
    error status, which ends up here as well.
    """


class RemoteTranslationError(TranslationError):
    """Non-success answer from the remote service."""

    def __init__(self, status: int | None, body: str) -> None:
        self.status = status
        self.body = body
        label = f"HTTP {status}" if status is not None else "connection error"
        super().__init__(f"Remote translation failed ({label}): {body[:200]}")
