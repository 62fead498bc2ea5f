"""
easy_translate translation engines

Supported engines:
- Google Translate v2 (REST, API key)
- Google Cloud Translation v3 with a glossary (service account)
"""
from .base import BaseTranslator, TranslationRequest
from .google import GoogleTranslator
from .glossary import GlossaryTranslator
from .factory import build_translator, get_available_engines, AVAILABLE_ENGINES
from .dispatcher import BatchDispatcher
from .orchestrator import TranslateOptions, TranslationOrchestrator

__all__ = [
    "BaseTranslator",
    "TranslationRequest",
    "GoogleTranslator",
    "GlossaryTranslator",
    "build_translator",
    "get_available_engines",
    "AVAILABLE_ENGINES",
    "BatchDispatcher",
    "TranslateOptions",
    "TranslationOrchestrator",
]
