from __future__ import annotations

from dataclasses import dataclass, field
import os

from .errors import ConfigError


DEFAULT_BATCH_SIZE = 100
DEFAULT_CONCURRENCY = 4
DEFAULT_API_URL = "https://translation.googleapis.com/language/translate/v2"


def require_positive_int(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigError(f"{name} must be a positive integer, got {value!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass(slots=True)
class DispatchSettings:
    batch_size: int = field(default_factory=lambda: _env_int("EASY_TRANSLATE_BATCH_SIZE", DEFAULT_BATCH_SIZE))
    concurrency: int = field(default_factory=lambda: _env_int("EASY_TRANSLATE_CONCURRENCY", DEFAULT_CONCURRENCY))

    def __post_init__(self) -> None:
        require_positive_int("batch_size", self.batch_size)
        require_positive_int("concurrency", self.concurrency)

    def override(self, *, batch_size: int | None = None, concurrency: int | None = None) -> "DispatchSettings":
        return DispatchSettings(
            batch_size=self.batch_size if batch_size is None else batch_size,
            concurrency=self.concurrency if concurrency is None else concurrency,
        )


@dataclass(slots=True)
class TranslatorSettings:
    session_timeout: float = 20.0
    proxy_url: str | None = field(default_factory=lambda: os.getenv("EASY_TRANSLATE_PROXY"))


@dataclass(slots=True)
class EngineSecrets:
    api_key: str | None = field(default_factory=lambda: os.getenv("GOOGLE_TRANSLATE_API_KEY"))
    api_url: str = field(default_factory=lambda: os.getenv("GOOGLE_TRANSLATE_API_URL", DEFAULT_API_URL))


@dataclass(slots=True)
class GlossarySettings:
    project_id: str | None = field(default_factory=lambda: os.getenv("GOOGLE_PROJECT_ID"))
    location: str | None = field(default_factory=lambda: os.getenv("GOOGLE_LOCATION"))
    glossary_id: str | None = field(default_factory=lambda: os.getenv("GOOGLE_GLOSSARY_ID"))
    credentials: str | None = field(default_factory=lambda: os.getenv("GOOGLE_SERVICE_ACCOUNT_CREDENTIALS"))
    ignore_case: bool = True

    def require(self) -> None:
        """Raise ConfigError naming every identifier the glossary engine lacks."""
        missing = [
            env_name
            for env_name, value in (
                ("GOOGLE_GLOSSARY_ID", self.glossary_id),
                ("GOOGLE_PROJECT_ID", self.project_id),
                ("GOOGLE_LOCATION", self.location),
                ("GOOGLE_SERVICE_ACCOUNT_CREDENTIALS", self.credentials),
            )
            if not value
        ]
        if missing:
            raise ConfigError(f"Glossary translation requires {', '.join(missing)} to be set")


@dataclass(slots=True)
class AppSettings:
    dispatch: DispatchSettings = field(default_factory=DispatchSettings)
    translator: TranslatorSettings = field(default_factory=TranslatorSettings)
    secrets: EngineSecrets = field(default_factory=EngineSecrets)
    glossary: GlossarySettings = field(default_factory=GlossarySettings)
    default_engine: str = field(default_factory=lambda: os.getenv("EASY_TRANSLATE_ENGINE", "glossary"))
    default_source_lang: str | None = field(default_factory=lambda: os.getenv("EASY_TRANSLATE_SOURCE"))


SETTINGS = AppSettings()
