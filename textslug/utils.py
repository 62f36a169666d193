"""Utility helpers for *textslug*.

Only pure-Python, dependency-free helpers live here so that the transliteration
and classification modules stay concise.
"""

from __future__ import annotations

import re
import unicodedata


_EXTRA_DASHES_RE = re.compile(r"-{2,}")


# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------


def ensure_text(text: object) -> str:
    """Return *text* unchanged, raising :class:`TypeError` for non-strings."""

    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    return text


def normalize(text: str) -> str:
    """Return the NFKD (compatibility) decomposition of *text*.

    Precomposed letters split into base letter + combining marks, ligatures and
    fullwidth forms split into their plain constituents.  The classifier later
    drops the marks, which strips any accent the transliteration table did not
    already handle.
    """

    return unicodedata.normalize("NFKD", ensure_text(text))


def cleanup(text: str) -> str:
    """Trim leading/trailing dashes, then collapse runs of dashes into one."""

    text = ensure_text(text).strip("-")
    return _EXTRA_DASHES_RE.sub("-", text)
