"""Display-name normalization for xref map entries."""

import re

SIGNATURE_START_RE = re.compile(r"[(<]")
# A run of hashes collapses too, so a second pass has nothing left to rewrite.
CTOR_MARKER_RE = re.compile(r"#+ctor")


def normalize_text(text: str) -> str:
    """Make a display name independent of signatures and generic markers.

    ``Foo.Bar(int,string)`` -> ``Foo.Bar``, ``List`1`` -> ``List_1``,
    ``Type.#ctor`` -> ``Type.ctor``. Truncation runs first so the rewrites
    only see the kept prefix.
    """
    m = SIGNATURE_START_RE.search(text)
    if m:
        text = text[: m.start()]
    text = text.replace("`", "_")
    return CTOR_MARKER_RE.sub("ctor", text)
