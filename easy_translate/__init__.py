"""
easy_translate

Batched, concurrency-limited translation through Google Translate, with
optional glossary support.
"""
from __future__ import annotations

import asyncio
from typing import Any, List, Mapping, Sequence

from .config import SETTINGS
from .errors import ConfigError, EasyTranslateError, ServiceError, TransportError
from .translator import BaseTranslator, TranslateOptions, TranslationOrchestrator, build_translator

__all__ = [
    "translate",
    "ConfigError",
    "EasyTranslateError",
    "ServiceError",
    "TransportError",
    "TranslationOrchestrator",
    "build_translator",
]


def translate(
    texts: str | Sequence[str],
    options: Mapping[str, Any] | None = None,
    *,
    engine: str | None = None,
    translator: BaseTranslator | None = None,
    **kwargs: Any,
) -> str | List[str]:
    """Translate text synchronously.

    Options are validated before an engine is built, so a missing target never
    reaches the network. An engine passed in as *translator* is left open.
    """
    merged = {**(options or {}), **kwargs}
    TranslateOptions.from_mapping(merged)

    async def runner() -> str | List[str]:
        owned = translator is None
        engine_obj = translator or build_translator(engine or SETTINGS.default_engine, api_key=merged.get("api_key"))
        orchestrator = TranslationOrchestrator(engine_obj, default_source=SETTINGS.default_source_lang)
        try:
            return await orchestrator.translate(texts, merged)
        finally:
            if owned:
                await orchestrator.close()

    return asyncio.run(runner())
