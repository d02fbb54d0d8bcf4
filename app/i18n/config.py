"""
Dashboard translations (``en``/``it``) and language preference resolution.

Lookup keys are dotted paths into ``locales/<lang>.json``; a key missing in
the requested language falls back to English, then to the key itself.
"""
import json
from functools import lru_cache
from pathlib import Path
from typing import Optional

from app.config.settings import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES

LOCALES_DIR = Path(__file__).resolve().parent / "locales"
FALLBACK_LANGUAGE = "en"


@lru_cache(maxsize=None)
def load_translations(language: str) -> dict:
    with open(LOCALES_DIR / f"{language}.json", encoding="utf-8") as fh:
        return json.load(fh)


def is_supported(language: Optional[str]) -> bool:
    return language in SUPPORTED_LANGUAGES


def _lookup(tree: dict, key: str) -> Optional[str]:
    node = tree
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


def translate(key: str, language: str) -> str:
    if not is_supported(language):
        language = FALLBACK_LANGUAGE
    return (
        _lookup(load_translations(language), key)
        or _lookup(load_translations(FALLBACK_LANGUAGE), key)
        or key
    )


def language_from_header(accept_language: Optional[str]) -> Optional[str]:
    """First supported primary tag of an Accept-Language header (``it-IT,it;q=0.9`` -> ``it``)."""
    if not accept_language:
        return None
    for part in accept_language.split(","):
        tag = part.split(";")[0].strip().split("-")[0].lower()
        if is_supported(tag):
            return tag
    return None


def resolve_language(cookie_value: Optional[str], accept_language: Optional[str]) -> str:
    """Saved preference, then browser language, then the default."""
    if is_supported(cookie_value):
        return cookie_value
    return language_from_header(accept_language) or (
        DEFAULT_LANGUAGE if is_supported(DEFAULT_LANGUAGE) else FALLBACK_LANGUAGE
    )
