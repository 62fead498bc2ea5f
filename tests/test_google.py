"""Tests for the Google Translate v2 engine."""

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock, patch

import aiohttp
import pytest

from easy_translate.errors import ConfigError, ServiceError, TransportError
from easy_translate.translator.base import TranslationRequest
from easy_translate.translator.google import GoogleTranslator


def _ok(*texts):
    return 200, json.dumps({"data": {"translations": [{"translatedText": t} for t in texts]}})


class TestGoogleTranslator:
    """Tests for GoogleTranslator."""

    def test_requires_api_key(self):
        """Test a missing key is a configuration error."""
        with pytest.raises(ConfigError):
            GoogleTranslator(api_key=None)

    def test_build_params(self):
        """Test query params include language, model, format and extras."""
        translator = GoogleTranslator(api_key="secret")
        request = TranslationRequest(
            texts=["hola"],
            target_lang="english",
            source_lang="es",
            format="html",
            model="nmt",
            params={"cid": 7, "debug": True},
        )

        params = translator.build_params(request)

        assert params == {
            "key": "secret",
            "target": "en",
            "source": "es",
            "model": "nmt",
            "format": "html",
            "cid": "7",
            "debug": "true",
        }

    def test_build_params_minimal(self):
        """Test optional params are omitted when unset."""
        translator = GoogleTranslator(api_key="secret")

        params = translator.build_params(TranslationRequest(texts=["a"], target_lang="fr"))

        assert params == {"key": "secret", "target": "fr"}

    def test_per_request_api_key(self):
        """Test a request api_key replaces the configured one."""
        translator = GoogleTranslator(api_key="secret")

        params = translator.build_params(TranslationRequest(texts=["a"], target_lang="fr", api_key="other"))

        assert params["key"] == "other"

    def test_build_body_repeats_q(self):
        """Test every text becomes its own q field."""
        body = GoogleTranslator.build_body(TranslationRequest(texts=["a b", "c&d"], target_lang="fr"))

        assert body == [("q", "a b"), ("q", "c&d")]

    def test_translate_unescapes_html(self):
        """Test translated text is HTML-unescaped."""
        translator = GoogleTranslator(api_key="secret")

        with patch.object(translator, "_post", AsyncMock(return_value=_ok("&quot;hi&quot; &amp; bye", "it&#39;s"))):
            result = asyncio.run(translator.translate_texts(TranslationRequest(texts=["a", "b"], target_lang="en")))

        assert result == ['"hi" & bye', "it's"]

    def test_empty_request_skips_network(self):
        """Test no request is sent for an empty batch."""
        translator = GoogleTranslator(api_key="secret")
        post = AsyncMock()

        with patch.object(translator, "_post", post):
            result = asyncio.run(translator.translate_texts(TranslationRequest(texts=[], target_lang="en")))

        assert result == []
        post.assert_not_called()

    def test_error_payload_raises_service_error(self):
        """Test an error body from the service becomes a ServiceError."""
        translator = GoogleTranslator(api_key="secret")
        payload = {"error": {"code": 400, "message": "Invalid Value", "errors": [{"reason": "invalid"}]}}

        with patch.object(translator, "_post", AsyncMock(return_value=(400, json.dumps(payload)))):
            with pytest.raises(ServiceError) as exc_info:
                asyncio.run(translator.translate_texts(TranslationRequest(texts=["a"], target_lang="xx")))

        assert exc_info.value.status == 400
        assert exc_info.value.reason == "invalid"

    def test_non_json_error_raises_service_error(self):
        """Test an HTML error page is reported as a ServiceError."""
        translator = GoogleTranslator(api_key="secret")

        with patch.object(translator, "_post", AsyncMock(return_value=(503, "<html>down</html>"))):
            with pytest.raises(ServiceError, match="HTTP 503"):
                asyncio.run(translator.translate_texts(TranslationRequest(texts=["a"], target_lang="en")))

    def test_count_mismatch_raises_service_error(self):
        """Test a response with the wrong number of translations is rejected."""
        translator = GoogleTranslator(api_key="secret")

        with patch.object(translator, "_post", AsyncMock(return_value=_ok("only"))):
            with pytest.raises(ServiceError):
                asyncio.run(translator.translate_texts(TranslationRequest(texts=["a", "b"], target_lang="en")))

    def test_connection_error_raises_transport_error(self):
        """Test aiohttp failures become TransportError."""
        translator = GoogleTranslator(api_key="secret")
        session = MagicMock()
        session.post.side_effect = aiohttp.ClientConnectionError("refused")

        with patch.object(translator, "_get_session", AsyncMock(return_value=session)):
            with pytest.raises(TransportError):
                asyncio.run(translator.translate_texts(TranslationRequest(texts=["a"], target_lang="en")))

    def test_timeout_raises_transport_error(self):
        """Test request timeouts become TransportError."""
        translator = GoogleTranslator(api_key="secret", timeout=1.0)
        session = MagicMock()
        session.post.side_effect = asyncio.TimeoutError()

        with patch.object(translator, "_get_session", AsyncMock(return_value=session)):
            with pytest.raises(TransportError, match="timed out"):
                asyncio.run(translator.translate_texts(TranslationRequest(texts=["a"], target_lang="en")))

    @pytest.mark.parametrize(
        "payload",
        [
            {"error": "quota exceeded"},
            {"error": {"message": "bad", "errors": ["invalid"]}},
            {"data": "unexpected"},
            {"data": {"translations": ["plain string"]}},
        ],
    )
    def test_malformed_payload_raises_service_error(self, payload):
        """Test unexpected response shapes are reported as ServiceError."""
        translator = GoogleTranslator(api_key="secret")

        with patch.object(translator, "_post", AsyncMock(return_value=(200, json.dumps(payload)))):
            with pytest.raises(ServiceError):
                asyncio.run(translator.translate_texts(TranslationRequest(texts=["a"], target_lang="en")))

    def test_request_timeout_overrides_engine_default(self):
        """Test a per-request timeout is applied to the POST."""
        translator = GoogleTranslator(api_key="secret", timeout=20.0)
        session = MagicMock()
        response = session.post.return_value.__aenter__.return_value
        response.status, text = _ok("hola")
        response.text = AsyncMock(return_value=text)

        with patch.object(translator, "_get_session", AsyncMock(return_value=session)):
            result = asyncio.run(
                translator.translate_texts(TranslationRequest(texts=["hello"], target_lang="es", timeout=5.0))
            )

        assert result == ["hola"]
        assert session.post.call_args.kwargs["timeout"] == aiohttp.ClientTimeout(total=5.0)

    def test_close_without_session(self):
        """Test closing an unused engine is a no-op."""
        translator = GoogleTranslator(api_key="secret")

        asyncio.run(translator.close())

        assert translator._session is None
