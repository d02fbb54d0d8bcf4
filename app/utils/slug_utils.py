# app/utils/slug_utils.py
import re
import unicodedata
from typing import Optional

from slugify import slugify

# Symbols that show up in restaurant and dish names
_REPLACEMENTS = [
    ("&", " and "),
    ("%", " percent "),
    ("€", " euro "),
    ("°", "o"),
    ("'", " "),
]


def _ascii_fallback(text: str, max_length: int) -> str:
    ascii_str = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    ascii_str = re.sub(r"[^a-zA-Z0-9]+", "-", ascii_str).strip("-").lower()
    return ascii_str[:max_length].rstrip("-") if max_length else ascii_str


def make_slug(text: Optional[str], max_length: int = 0) -> str:
    """Lowercase ASCII slug joined by dashes; "" for blank input."""
    if not text or not text.strip():
        return ""
    slug = slugify(
        text,
        max_length=max_length,
        word_boundary=False,
        replacements=_REPLACEMENTS,
        allow_unicode=False,
    )
    return slug or _ascii_fallback(text, max_length)
