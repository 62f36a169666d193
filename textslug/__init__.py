"""textslug – turn human-readable text into slugs and identifiers.

The package exposes two pure functions:

* :pyfunc:`textslug.transform.slugify` – a URL-safe slug that may keep
  ``-``, ``_``, ``~`` and ``.``.
* :pyfunc:`textslug.transform.idify` – a stricter identifier that only keeps
  ``-`` and ``_``.

Both share one pipeline: lowercase + transliterate
(:pymod:`textslug.translit`), NFKD decomposition, per-character
classification (:pymod:`textslug.classify`) and dash cleanup
(:pymod:`textslug.utils`).  A small CLI lives in :pymod:`textslug.cli` and is
reachable via ``python -m textslug`` or the ``textslug`` console script.
"""

from importlib.metadata import version, PackageNotFoundError

from .classify import ID, SLUG, Action, Variant, classify
from .translit import TRANSLITERATIONS, sanitize
from .transform import idify, slugify, transform
from .utils import cleanup, normalize


def __getattr__(name):  # pragma: no cover – lazy, avoids hard failure
    if name == "__version__":
        try:
            return version(__name__)
        except PackageNotFoundError:
            return "0.0.0"
    raise AttributeError(name)


__all__ = [
    "Action",
    "ID",
    "SLUG",
    "TRANSLITERATIONS",
    "Variant",
    "classify",
    "cleanup",
    "idify",
    "normalize",
    "sanitize",
    "slugify",
    "transform",
]
