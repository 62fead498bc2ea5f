from __future__ import annotations

from dataclasses import dataclass
import html
from typing import Iterable, List, Sequence


@dataclass(slots=True)
class TextInput:
    texts: List[str]
    multi: bool  # False when the caller passed a single string


def normalize_texts(texts: str | Sequence[str]) -> TextInput:
    if isinstance(texts, str):
        return TextInput(texts=[texts], multi=False)
    return TextInput(texts=list(texts), multi=True)


def unescape_translations(translations: Iterable[str]) -> List[str]:
    return [html.unescape(text) for text in translations]
