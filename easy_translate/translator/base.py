from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence


@dataclass(slots=True)
class TranslationRequest:
    texts: Sequence[str]
    target_lang: str
    source_lang: str | None = None
    format: str | None = None
    model: str | None = None
    api_key: str | None = None
    timeout: float | None = None
    params: Dict[str, Any] = field(default_factory=dict)


class BaseTranslator(ABC):
    name: str = "base"

    def __init__(self, *, timeout: float = 20.0, proxy: str | None = None) -> None:
        self.timeout = timeout
        self.proxy = proxy

    @abstractmethod
    async def translate_texts(self, request: TranslationRequest) -> List[str]:
        """Translate a batch of texts and return one translation per input, in order."""

    async def close(self) -> None:
        """Release any network resources held by the engine."""
