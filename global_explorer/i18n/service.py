"""User-facing strings loaded from JSON locale files."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

FALLBACK_LOCALE = "en"


class I18nService:
    """Resolves message keys for one session locale, falling back to English."""

    def __init__(self, *, locales_path: str | Path | None = None, default_locale: str = FALLBACK_LOCALE) -> None:
        self.locales_path = Path(locales_path or Path(__file__).with_name("locales"))
        self.default_locale = default_locale.lower()

    def gettext(self, key: str, **kwargs: Any) -> str:
        text = _load_locale(self.locales_path, self.default_locale).get(key)
        if text is None:
            text = _load_locale(self.locales_path, FALLBACK_LOCALE).get(key, key)
        return text.format(**kwargs) if kwargs else text

    def ngettext(self, key: str, n: int, /, **kwargs: Any) -> str:
        """Pick the ``_one`` or ``_other`` variant of ``key`` by ``count``."""

        suffix = "one" if n == 1 else "other"
        return self.gettext(f"{key}_{suffix}", **kwargs)


@lru_cache(maxsize=16)
def _load_locale(locales_path: Path, locale: str) -> dict[str, str]:
    file_path = locales_path / f"{locale}.json"
    if not file_path.exists():
        return {}
    with file_path.open("r", encoding="utf-8") as fp:
        return json.load(fp)


@lru_cache
def get_i18n() -> I18nService:
    return I18nService()


__all__ = ["FALLBACK_LOCALE", "I18nService", "get_i18n"]
