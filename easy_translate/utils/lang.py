from __future__ import annotations

LANGUAGES: dict[str, str] = {
    "af": "afrikaans",
    "ar": "arabic",
    "bg": "bulgarian",
    "ca": "catalan",
    "cs": "czech",
    "da": "danish",
    "de": "german",
    "el": "greek",
    "en": "english",
    "es": "spanish",
    "et": "estonian",
    "fa": "persian",
    "fi": "finnish",
    "fr": "french",
    "ga": "irish",
    "he": "hebrew",
    "hi": "hindi",
    "hr": "croatian",
    "hu": "hungarian",
    "id": "indonesian",
    "is": "icelandic",
    "it": "italian",
    "ja": "japanese",
    "ko": "korean",
    "lt": "lithuanian",
    "lv": "latvian",
    "mk": "macedonian",
    "ms": "malay",
    "nl": "dutch",
    "no": "norwegian",
    "pl": "polish",
    "pt": "portuguese",
    "ro": "romanian",
    "ru": "russian",
    "sk": "slovak",
    "sl": "slovenian",
    "sq": "albanian",
    "sr": "serbian",
    "sv": "swedish",
    "sw": "swahili",
    "th": "thai",
    "tl": "filipino",
    "tr": "turkish",
    "uk": "ukrainian",
    "vi": "vietnamese",
    "zh-CN": "chinese_simplified",
    "zh-TW": "chinese_traditional",
}

_BY_NAME = {name: code for code, name in LANGUAGES.items()}


def normalize_language(lang: object) -> str:
    """Return the language code for *lang*, which may be a code or an English name.

    Unknown values are passed through so the service can judge them.
    """
    look = lang if isinstance(lang, str) else str(lang)
    if look in LANGUAGES:
        return look
    code = _BY_NAME.get(look.strip().lower().replace(" ", "_"))
    if code is not None:
        return code
    return look
