"""URL slug helper used to derive category slugs from their names."""

from __future__ import annotations

import re
import unicodedata
from typing import Optional

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(value: Optional[str]) -> str:
    """Turn free text into a lowercase, dash-separated slug.

    Accents are stripped after NFD decomposition, every run of characters
    outside ``[a-z0-9]`` collapses into a single dash, and dashes at either
    end are dropped.

    >>> slugify("Café déjà vu")
    'cafe-deja-vu'
    >>> slugify("!!!")
    ''
    """
    if value is None:
        return ""

    decomposed = unicodedata.normalize("NFD", value)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))

    dashed = _NON_ALNUM.sub("-", stripped.lower().strip())
    return dashed.strip("-")
