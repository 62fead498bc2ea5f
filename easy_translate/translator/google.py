"""
Google Translate v2 REST engine.

Texts travel as repeated ``q`` form fields in a POST body, the remaining
arguments as query parameters. Error payloads from the service become
``ServiceError``; connection problems become ``TransportError``.
"""
from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Dict, List, Optional, Tuple

import aiohttp

from ..config import DEFAULT_API_URL
from ..errors import ConfigError, ServiceError, TransportError
from ..utils.lang import normalize_language
from ..utils.text import unescape_translations
from .base import BaseTranslator, TranslationRequest


class GoogleTranslator(BaseTranslator):
    """Google Translate v2 translator authenticated with an API key."""

    name = "google"

    def __init__(
        self,
        *,
        api_key: str | None,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 20.0,
        proxy: str | None = None,
    ) -> None:
        if not api_key:
            raise ConfigError("Google Translate API key is required (GOOGLE_TRANSLATE_API_KEY)")
        super().__init__(timeout=timeout, proxy=proxy)
        self.api_key = api_key
        self.api_url = api_url
        self._session: Optional[aiohttp.ClientSession] = None
        self.logger = logging.getLogger(self.__class__.__name__)

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create the aiohttp session."""
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def close(self) -> None:
        if self._session:
            await self._session.close()
            self._session = None

    def build_params(self, request: TranslationRequest) -> Dict[str, str]:
        """Query parameters for *request*; pass-through params override the defaults."""
        params: Dict[str, str] = {
            "key": request.api_key or self.api_key,
            "target": normalize_language(request.target_lang),
        }
        if request.source_lang is not None:
            params["source"] = normalize_language(request.source_lang)
        if request.model is not None:
            params["model"] = request.model
        if request.format is not None:
            params["format"] = request.format
        for key, value in request.params.items():
            params[key] = str(value).lower() if isinstance(value, bool) else str(value)
        return params

    @staticmethod
    def build_body(request: TranslationRequest) -> List[Tuple[str, str]]:
        return [("q", text) for text in request.texts]

    async def _post(
        self, params: Dict[str, str], body: List[Tuple[str, str]], timeout: float | None = None
    ) -> Tuple[int, str]:
        session = await self._get_session()
        total = timeout or self.timeout
        try:
            async with session.post(
                self.api_url,
                params=params,
                data=body,
                proxy=self.proxy,
                timeout=aiohttp.ClientTimeout(total=total),
            ) as resp:
                return resp.status, await resp.text()
        except asyncio.TimeoutError as e:
            raise TransportError(f"Google Translate request timed out after {total}s") from e
        except aiohttp.ClientError as e:
            raise TransportError(f"Google Translate connection error: {e}") from e

    async def translate_texts(self, request: TranslationRequest) -> List[str]:
        texts = list(request.texts)
        if not texts:
            return []

        status, raw = await self._post(self.build_params(request), self.build_body(request), request.timeout)
        data = self._decode(status, raw)

        payload = data.get("data")
        items = payload.get("translations") if isinstance(payload, dict) else None
        translations = [item.get("translatedText", "") for item in items or [] if isinstance(item, dict)]
        if len(translations) != len(texts):
            raise ServiceError(
                f"Google Translate returned {len(translations)} translations for {len(texts)} texts",
                status=status,
            )
        return unescape_translations(translations)

    def _decode(self, status: int, raw: str) -> Dict[str, Any]:
        try:
            data = json.loads(raw) if raw else {}
        except ValueError:
            raise ServiceError(f"Google Translate error: HTTP {status} - {raw[:200]}", status=status) from None

        error = data.get("error") if isinstance(data, dict) else None
        if error and not isinstance(error, dict):
            raise ServiceError(f"Google Translate error: {error}", status=status)
        if error:
            reasons = [item.get("reason") for item in error.get("errors") or [] if isinstance(item, dict) and item.get("reason")]
            message = error.get("message", "unknown error")
            self.logger.debug(f"Google Translate rejected request: {message}")
            raise ServiceError(
                f"Google Translate error: {message}",
                status=error.get("code", status),
                reason=reasons[0] if reasons else None,
            )
        if status >= 400 or not isinstance(data, dict):
            raise ServiceError(f"Google Translate error: HTTP {status} - {raw[:200]}", status=status)
        return data
