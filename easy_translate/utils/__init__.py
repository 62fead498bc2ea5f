from .batching import Batch, partition
from .text import TextInput, normalize_texts, unescape_translations
from .lang import LANGUAGES, normalize_language

__all__ = [
    "Batch",
    "partition",
    "TextInput",
    "normalize_texts",
    "unescape_translations",
    "LANGUAGES",
    "normalize_language",
]
