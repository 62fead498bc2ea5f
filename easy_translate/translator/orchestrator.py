from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Sequence

from loguru import logger

from ..config import SETTINGS, DispatchSettings
from ..errors import ConfigError
from ..utils.batching import Batch, partition
from ..utils.text import normalize_texts

from .base import BaseTranslator, TranslationRequest
from .dispatcher import BatchDispatcher, ProgressCallback


RESERVED_OPTIONS = ("source", "target", "html", "model", "batch_size", "concurrency", "api_key", "timeout")


def _timeout(value: Any) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ConfigError(f"timeout must be a positive number of seconds, got {value!r}")
    return float(value)


@dataclass(slots=True)
class TranslateOptions:
    target: str
    source: str | None = None
    html: bool = False
    model: str | None = None
    batch_size: int | None = None
    concurrency: int | None = None
    api_key: str | None = None
    timeout: float | None = None
    params: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "TranslateOptions":
        """Validate caller options; unknown keys are passed through to the engine."""
        target = options.get("target")
        if not target:
            raise ConfigError("No target language provided")
        if isinstance(target, (list, tuple, set, frozenset)):
            raise ConfigError("Support for multiple targets dropped, translate once per target language")
        return cls(
            target=target if isinstance(target, str) else str(target),
            source=options.get("source"),
            html=bool(options.get("html")),
            model=options.get("model"),
            batch_size=options.get("batch_size"),
            concurrency=options.get("concurrency"),
            api_key=options.get("api_key"),
            timeout=_timeout(options.get("timeout")),
            params={key: value for key, value in options.items() if key not in RESERVED_OPTIONS},
        )

    def to_request(self, texts: Sequence[str]) -> TranslationRequest:
        return TranslationRequest(
            texts=texts,
            target_lang=self.target,
            source_lang=self.source,
            format="html" if self.html else None,
            model=self.model,
            api_key=self.api_key,
            timeout=self.timeout,
            params=dict(self.params),
        )


def assemble(batch_results: Sequence[Sequence[str]], *, expected: int) -> List[str]:
    translations = [text for result in batch_results for text in result]
    if len(translations) != expected:
        raise RuntimeError(f"Assembled {len(translations)} translations for {expected} texts")
    return translations


class TranslationOrchestrator:
    def __init__(
        self,
        translator: BaseTranslator,
        dispatch: DispatchSettings | None = None,
        *,
        default_source: str | None = None,
        dispatcher_factory: Callable[[int], BatchDispatcher] = BatchDispatcher,
    ) -> None:
        self.translator = translator
        self.dispatch = dispatch or SETTINGS.dispatch
        self.default_source = default_source
        self.dispatcher_factory = dispatcher_factory

    async def __aenter__(self) -> "TranslationOrchestrator":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        await self.translator.close()

    async def translate(
        self,
        texts: str | Sequence[str],
        options: Mapping[str, Any] | None = None,
        *,
        progress_cb: ProgressCallback | None = None,
        **kwargs: Any,
    ) -> str | List[str]:
        """Translate one string or a sequence of strings.

        A single string yields a single string, a sequence yields a list of the
        same length. Positions belonging to a batch the service rejected are
        empty strings.
        """
        merged: Dict[str, Any] = {**(options or {}), **kwargs}
        if self.default_source and merged.get("source") is None:
            merged["source"] = self.default_source
        opts = TranslateOptions.from_mapping(merged)
        settings = self.dispatch.override(batch_size=opts.batch_size, concurrency=opts.concurrency)
        dispatcher = self.dispatcher_factory(settings.concurrency)

        text_input = normalize_texts(texts)
        batches = partition(text_input.texts, batch_size=settings.batch_size)
        logger.info(
            f"Translating {len(text_input.texts)} texts to {opts.target} with {self.translator.name} "
            f"({len(batches)} batches, concurrency {settings.concurrency})"
        )

        async def translate_batch(batch: Batch) -> List[str]:
            return await self.translator.translate_texts(opts.to_request(batch.texts))

        batch_results = await dispatcher.dispatch(batches, translate_batch, progress_cb=progress_cb)
        translations = assemble(batch_results, expected=len(text_input.texts))
        if not text_input.multi:
            return translations[0]
        return translations
