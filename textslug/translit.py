"""Lowercasing and transliteration of common European Latin characters.

The table is deliberately small: it catches the letters that show up in
European names and titles.  Anything it misses is handled later by NFKD
decomposition (accents are split off and dropped) or passes through as-is.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .utils import ensure_text


# Uppercase keys are unreachable after lowercasing but stay part of the table.
TRANSLITERATIONS: Mapping[str, str] = MappingProxyType(
    {
        "À": "A",
        "Á": "A",
        "Â": "A",
        "Ã": "A",
        "Ä": "A",
        "Å": "AA",
        "Æ": "AE",
        "Ç": "C",
        "È": "E",
        "É": "E",
        "Ê": "E",
        "Ë": "E",
        "Ì": "I",
        "Í": "I",
        "Î": "I",
        "Ï": "I",
        "Ð": "D",
        "Ł": "L",
        "Ñ": "N",
        "Ò": "O",
        "Ó": "O",
        "Ô": "O",
        "Õ": "O",
        "Ö": "O",
        "Ø": "OE",
        "Ù": "U",
        "Ú": "U",
        "Ü": "U",
        "Û": "U",
        "Ý": "Y",
        "Þ": "Th",
        "ß": "ss",
        "à": "a",
        "á": "a",
        "â": "a",
        "ã": "a",
        "ä": "a",
        "å": "aa",
        "æ": "ae",
        "ç": "c",
        "è": "e",
        "é": "e",
        "ê": "e",
        "ë": "e",
        "ì": "i",
        "í": "i",
        "î": "i",
        "ï": "i",
        "ð": "d",
        "ł": "l",
        "ñ": "n",
        "ń": "n",
        "ò": "o",
        "ó": "o",
        "ô": "o",
        "õ": "o",
        "ō": "o",
        "ö": "o",
        "ø": "oe",
        "ś": "s",
        "ù": "u",
        "ú": "u",
        "û": "u",
        "ū": "u",
        "ü": "u",
        "ý": "y",
        "þ": "th",
        "ÿ": "y",
        "ż": "z",
        "Œ": "OE",
        "œ": "oe",
    }
)


def transliterate(text: str) -> str:
    """Replace every table key in *text* with its ASCII spelling."""

    return "".join(TRANSLITERATIONS.get(char, char) for char in ensure_text(text))


def sanitize(text: str) -> str:
    """Lowercase *text*, then transliterate it.

    Lowercasing runs first so ``"Ø"`` and ``"ø"`` both come out as ``"oe"``.
    Each character is lowered on its own, so ``"Σ"`` is always ``"σ"`` and
    never the word-final ``"ς"``.
    """

    lowered = "".join(char.lower() for char in ensure_text(text))
    return transliterate(lowered)
