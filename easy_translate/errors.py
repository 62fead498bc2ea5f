"""
Error hierarchy shared by the translation engines and the dispatcher.

Only the classes listed in ``MASKED_ERRORS`` are absorbed per batch; every
other exception propagates out of the orchestration call.
"""
from __future__ import annotations


class EasyTranslateError(Exception):
    """Base class for every error raised by easy_translate."""


class ConfigError(EasyTranslateError, ValueError):
    """Missing or invalid configuration, raised before any request is sent."""


class ServiceError(EasyTranslateError):
    """The translation service rejected a batch."""

    def __init__(self, message: str, *, status: int | None = None, reason: str | None = None) -> None:
        super().__init__(message)
        self.status = status
        self.reason = reason


class TransportError(EasyTranslateError):
    """The translation service could not be reached."""


MASKED_ERRORS: tuple[type[BaseException], ...] = (ServiceError,)


def is_service_error(exc: BaseException) -> bool:
    return isinstance(exc, MASKED_ERRORS)
