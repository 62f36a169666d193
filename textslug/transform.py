"""The slug and identifier pipelines.

Both variants run the same steps and differ only in their literal symbol sets
(see :pydata:`textslug.classify.SLUG` and :pydata:`textslug.classify.ID`).
"""

from __future__ import annotations

import logging

from .classify import ID, SLUG, Action, Variant, classify
from .translit import sanitize
from .utils import cleanup, normalize

logger = logging.getLogger(__name__)


def transform(text: str, variant: Variant) -> str:
    """Run *text* through sanitize → NFKD → classify → cleanup."""

    buf: list[str] = []
    for char in normalize(sanitize(text)):
        action = classify(char, variant)
        if action is Action.LOWER:
            buf.append(char.lower())
        elif action is Action.KEEP:
            buf.append(char)
        elif action is Action.DASH:
            buf.append("-")

    result = cleanup("".join(buf))
    logger.debug("%s(%r) -> %r", variant.name, text, result)
    return result


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def slugify(text: str) -> str:
    """Slugify *text*.

    The result only contains lowercase letters, digits, ``-``, ``_``, ``~``
    and ``.``.  It never begins or ends with a dash and never contains runs of
    dashes.

    It is **not** forced into ASCII: letters and digits the transliteration
    table and NFKD cannot reduce (Cyrillic, CJK, …) survive unchanged.
    """

    return transform(text, SLUG)


def idify(text: str) -> str:
    """Like :func:`slugify` but ``.`` and ``~`` become dashes as well."""

    return transform(text, ID)
