"""Per-character classification shared by the slug and identifier variants.

Each character of the normalised text is tested against a fixed, ordered list
of guards; the first guard that matches decides the :class:`Action`:

1. *Safe* (letters, numbers) → :attr:`Action.LOWER`
2. the variant's allowed literal symbols → :attr:`Action.KEEP`
3. *Space* (separators and whitespace) → :attr:`Action.DASH`
4. *Dash* (dash punctuation) → :attr:`Action.DASH`
5. the variant's to-dash literal symbols → :attr:`Action.DASH`
6. anything else, *Skip* included → :attr:`Action.DROP`
"""

from __future__ import annotations

import enum
import unicodedata
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Unicode category groups
# ---------------------------------------------------------------------------

SAFE = frozenset({"Lu", "Ll", "Lt", "Lm", "Lo", "Nd", "Nl", "No"})
# Never tested directly: Lm is caught by SAFE, the rest falls through to DROP.
SKIP = frozenset({"Mn", "Mc", "Me", "Sk", "Lm"})
DASH = frozenset({"Pd"})
SPACE = frozenset({"Zs", "Zl", "Zp"})


class Action(enum.Enum):
    """What the transform engine emits for one input character."""

    KEEP = "keep"
    LOWER = "lower"
    DASH = "dash"
    DROP = "drop"


@dataclass(frozen=True)
class Variant:
    """Literal symbol sets that distinguish one output flavour from another."""

    name: str
    allowed: frozenset[str]
    to_dash: frozenset[str]


SLUG = Variant(
    name="slug",
    allowed=frozenset("-_~."),
    to_dash=frozenset("/\\—–"),
)

ID = Variant(
    name="id",
    allowed=frozenset("-_"),
    to_dash=frozenset("/\\—–.~"),
)


# ---------------------------------------------------------------------------
# Group membership
# ---------------------------------------------------------------------------


def in_group(char: str, group: frozenset[str]) -> bool:
    return unicodedata.category(char) in group


def is_space(char: str) -> bool:
    # Tab, newline and friends are Cc, not Z*, but still separate words.
    return in_group(char, SPACE) or char.isspace()


def classify(char: str, variant: Variant = SLUG) -> Action:
    """Return the :class:`Action` for a single character under *variant*."""

    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")

    if in_group(char, SAFE):
        return Action.LOWER
    if char in variant.allowed:
        return Action.KEEP
    if is_space(char) or in_group(char, DASH) or char in variant.to_dash:
        return Action.DASH
    return Action.DROP
