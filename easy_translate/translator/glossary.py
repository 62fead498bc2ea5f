"""
Google Cloud Translation v3 engine with a server-side glossary.

Requires a glossary id, project, location and service-account credentials;
any of them missing is reported when the engine is built, before a single
request goes out.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List

from google.api_core import exceptions as core_exceptions
from google.cloud import translate_v3
from google.oauth2 import service_account

from ..config import GlossarySettings
from ..errors import ConfigError, ServiceError, TransportError
from ..utils.lang import normalize_language
from ..utils.text import unescape_translations
from .base import BaseTranslator, TranslationRequest


class GlossaryTranslator(BaseTranslator):
    """Translator that applies a Cloud Translation glossary to every request."""

    name = "glossary"

    def __init__(
        self,
        *,
        settings: GlossarySettings,
        timeout: float = 20.0,
        client: translate_v3.TranslationServiceAsyncClient | None = None,
    ) -> None:
        settings.require()
        super().__init__(timeout=timeout)
        self.settings = settings
        try:
            credentials_info: Dict[str, Any] = json.loads(settings.credentials or "")
        except ValueError as e:
            raise ConfigError("GOOGLE_SERVICE_ACCOUNT_CREDENTIALS is not valid JSON") from e
        if not isinstance(credentials_info, dict):
            raise ConfigError("GOOGLE_SERVICE_ACCOUNT_CREDENTIALS must be a JSON object")
        try:
            self._credentials = service_account.Credentials.from_service_account_info(credentials_info)
        except ValueError as e:
            raise ConfigError(f"Invalid service account credentials: {e}") from e
        self._client = client
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def parent(self) -> str:
        return f"projects/{self.settings.project_id}/locations/{self.settings.location}"

    @property
    def glossary_path(self) -> str:
        return f"{self.parent}/glossaries/{self.settings.glossary_id}"

    def _get_client(self) -> translate_v3.TranslationServiceAsyncClient:
        if self._client is None:
            self._client = translate_v3.TranslationServiceAsyncClient(credentials=self._credentials)
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            transport = getattr(self._client, "transport", None)
            if transport is not None and hasattr(transport, "close"):
                await transport.close()
            self._client = None

    def build_request(self, request: TranslationRequest) -> Dict[str, Any]:
        """Request fields for *request*.

        Without ``format="html"`` no mime type is sent, so the service applies
        its HTML default. Params that are not ``TranslateTextRequest`` fields,
        or that would replace one set here, are dropped.
        """
        payload: Dict[str, Any] = {
            "parent": self.parent,
            "contents": list(request.texts),
            "target_language_code": normalize_language(request.target_lang),
            "glossary_config": translate_v3.TranslateTextGlossaryConfig(
                glossary=self.glossary_path,
                ignore_case=self.settings.ignore_case,
            ),
        }
        if request.format == "html":
            payload["mime_type"] = "text/html"
        if request.source_lang is not None:
            payload["source_language_code"] = normalize_language(request.source_lang)
        if request.model is not None:
            model = request.model
            payload["model"] = model if model.startswith("projects/") else f"{self.parent}/models/{model}"

        known_fields = translate_v3.TranslateTextRequest.meta.fields
        for key, value in request.params.items():
            if key in known_fields and key not in payload and key != "mime_type":
                payload[key] = value
            else:
                self.logger.debug(f"Ignoring option {key!r}, not supported by Cloud Translation v3")
        return payload

    async def translate_texts(self, request: TranslationRequest) -> List[str]:
        texts = list(request.texts)
        if not texts:
            return []

        client = self._get_client()
        timeout = request.timeout or self.timeout
        try:
            response = await client.translate_text(request=self.build_request(request), timeout=timeout)
        except core_exceptions.InvalidArgument as e:
            self.logger.debug(f"Glossary translation rejected: {e.message}")
            raise ServiceError(f"Cloud Translation rejected request: {e.message}", status=400, reason="invalid_argument") from e
        except (core_exceptions.ServiceUnavailable, core_exceptions.DeadlineExceeded, core_exceptions.RetryError) as e:
            raise TransportError(f"Cloud Translation unreachable: {e}") from e

        translations = [item.translated_text for item in response.glossary_translations]
        if len(translations) != len(texts):
            raise ServiceError(f"Cloud Translation returned {len(translations)} translations for {len(texts)} texts")
        return unescape_translations(translations)
