"""Shared fixtures: an in-memory translation engine."""

import asyncio
from typing import Dict, Iterable, List

import pytest

from easy_translate.errors import ServiceError
from easy_translate.translator.base import BaseTranslator, TranslationRequest


class FakeTranslator(BaseTranslator):
    """Engine that prefixes every text with the target language."""

    name = "fake"

    def __init__(
        self,
        *,
        fail_on: Iterable[str] = (),
        error: Exception | None = None,
        delays: Dict[str, float] | None = None,
    ) -> None:
        super().__init__()
        self.fail_on = set(fail_on)
        self.error = error or ServiceError("Invalid glossary", status=400, reason="invalid")
        self.delays = delays or {}
        self.requests: List[TranslationRequest] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self.closed = False

    @property
    def call_count(self) -> int:
        return len(self.requests)

    async def translate_texts(self, request: TranslationRequest) -> List[str]:
        self.requests.append(request)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(request.texts[0], 0.001))
            if self.fail_on.intersection(request.texts):
                raise self.error
            return [f"{request.target_lang}:{text}" for text in request.texts]
        finally:
            self.in_flight -= 1

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def make_translator():
    return FakeTranslator
