import os
from typing import Optional, Sequence

DEFAULT_LOCALE = os.getenv("DEFAULT_LOCALE", "en").strip().lower() or "en"


def normalize_locale(locale: str) -> str:
    return locale.strip().lower()


def select_locale(lang: Optional[str]) -> str:
    """Locale requested through ``?lang=``, or the default one."""
    if isinstance(lang, str):
        value = normalize_locale(lang)
        if value:
            return value
    return DEFAULT_LOCALE


def resolve_name(translations: Sequence, locale: str) -> Optional[str]:
    """Pick the display name for ``locale`` out of an entity's translations.

    Falls back to the default locale, then to the first translation (lowest
    language id). ``None`` when there are no translations at all.
    """
    if not translations:
        return None
    by_locale = {t.language.locale: t.name for t in translations if t.language is not None}
    for candidate in (locale, DEFAULT_LOCALE):
        if candidate in by_locale:
            return by_locale[candidate]
    return translations[0].name
