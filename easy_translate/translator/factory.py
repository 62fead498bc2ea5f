"""
Translator Factory

Builds the engine named by the caller from explicit arguments, falling back
to the process-wide settings.
"""
from __future__ import annotations

from typing import Optional

from ..config import SETTINGS, GlossarySettings
from ..errors import ConfigError
from .base import BaseTranslator
from .google import GoogleTranslator
from .glossary import GlossaryTranslator


# Available translation engines
AVAILABLE_ENGINES = {
    "google": "Google Translate v2 (API key)",
    "glossary": "Google Cloud Translation v3 with glossary",
}


def get_available_engines() -> dict[str, str]:
    """Get available translation engines with display names."""
    return AVAILABLE_ENGINES.copy()


def build_translator(
    engine_name: str,
    *,
    api_key: Optional[str] = None,
    api_url: Optional[str] = None,
    proxy: Optional[str] = None,
    glossary: Optional[GlossarySettings] = None,
    timeout: Optional[float] = None,
) -> BaseTranslator:
    """Build a translator instance.

    Args:
        engine_name: Name of the engine (google, glossary)
        api_key: Google Translate API key (google engine)
        api_url: Override of the v2 endpoint URL (google engine)
        proxy: Optional proxy URL (google engine)
        glossary: Glossary settings (glossary engine)
        timeout: Request timeout in seconds

    Returns:
        BaseTranslator instance

    Raises:
        ConfigError: If the engine is unknown or its credentials are missing
    """
    engine = engine_name.lower()
    timeout = timeout or SETTINGS.translator.session_timeout

    if engine == "google":
        return GoogleTranslator(
            api_key=api_key or SETTINGS.secrets.api_key,
            api_url=api_url or SETTINGS.secrets.api_url,
            proxy=proxy or SETTINGS.translator.proxy_url,
            timeout=timeout,
        )

    if engine == "glossary":
        return GlossaryTranslator(
            settings=glossary or SETTINGS.glossary,
            timeout=timeout,
        )

    raise ConfigError(f"Unsupported translator engine: {engine_name}")
