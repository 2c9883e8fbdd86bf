from __future__ import annotations

import re
from typing import Optional

from unidecode import unidecode

_NON_ALNUM = re.compile(r"[^0-9a-z]+")


def sluggify(title: Optional[str]) -> str:
    """
    Derive a URL-safe slug from arbitrary title text.

    Non-ASCII characters are transliterated to their closest ASCII
    equivalent with ``unidecode`` (``ß`` -> ``ss``, Cyrillic and Greek by
    sound), the result is lowercased and every run of non-alphanumeric
    characters becomes a single hyphen.  Leading and trailing hyphens are
    trimmed, so an empty or purely punctuated title yields ``""``.
    """
    if not title:
        return ""
    text = unidecode(title).lower()
    return _NON_ALNUM.sub("-", text).strip("-")
