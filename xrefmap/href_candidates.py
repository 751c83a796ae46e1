"""Derivation of Scripting Reference page names from DocFX identifiers.

The Unity Scripting Reference does not document its page naming, so the rules
here are empirical:

- namespaces have no page of their own;
- the ``UnityEngine.`` / ``UnityEditor.`` roots are omitted;
- enum values and instance fields starting with a lowercase letter are joined
  to their type with ``-``, everything else with ``.``;
- constructors and operators get synthetic ``-ctor`` / ``-operator_<slug>``
  suffixes;
- overloads share one page, so parameter lists are dropped.

Each rule yields a best guess plus the spellings worth trying when the guess
is wrong. The guesses are confirmed by :class:`xrefmap.href_resolver.HrefResolver`.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from xrefmap.operator_slug import rewrite_operator
from xrefmap.resolution_result import RUNG_ALTERNATE, RUNG_PARENT, RUNG_PRIMARY

logger = logging.getLogger(__name__)

DEFAULT_STRIP_PREFIXES: tuple[str, ...] = ("UnityEngine", "UnityEditor")
NAMESPACE_HREF = "index"

KNOWN_TAGS = frozenset({"N", "T", "F", "P", "M", "E"})

NESTED_ARITY_RE = re.compile(r"``\d+")
OWN_ARITY_RE = re.compile(r"`(\d+)")
PARAM_LIST_RE = re.compile(r"\(.*\)")
BRACE_BLOCK_RE = re.compile(r"\{[^{}]*\}")
RETURN_TYPE_RE = re.compile(r"~.*$")

CTOR_SUFFIX = ".#ctor"
SYNTHETIC_MARKERS = ("-ctor", "-operator_")


@dataclass(frozen=True)
class HrefCandidates:
    """Candidate page names for one symbol, best guess first."""

    primary: str
    alternate: str | None = None
    parent: str | None = None

    def ordered(self) -> list[tuple[str, str]]:
        """Return ``(rung, href)`` pairs to probe, without blanks or repeats."""
        seen: set[str] = set()
        out: list[tuple[str, str]] = []
        for rung, href in (
            (RUNG_PRIMARY, self.primary),
            (RUNG_ALTERNATE, self.alternate),
            (RUNG_PARENT, self.parent),
        ):
            if href and href not in seen:
                seen.add(href)
                out.append((rung, href))
        return out


def comment_id_tag(comment_id: str) -> str:
    """Return the single-letter tag of a comment ID (``"M:Foo.Bar"`` -> ``"M"``)."""
    tag, sep, _ = comment_id.partition(":")
    return tag if sep else ""


def is_namespace_comment_id(comment_id: str) -> bool:
    """Check if the comment ID denotes a namespace."""
    return comment_id_tag(comment_id) == "N"


def strip_root_namespace(uid: str, prefixes: tuple[str, ...]) -> str:
    """Remove the first matching root namespace from the start of ``uid``."""
    for prefix in prefixes:
        if uid.startswith(prefix + "."):
            return uid[len(prefix) + 1 :]
    return uid


def collapse_generic_arity(href: str) -> str:
    """Drop ````N`` markers and turn ```N`` into ``_N``."""
    href = NESTED_ARITY_RE.sub("", href)
    return OWN_ARITY_RE.sub(r"_\1", href)


def remove_signature(href: str) -> str:
    """Delete parameter lists, ``{...}`` blocks and return-type remnants."""
    href = PARAM_LIST_RE.sub("", href)
    while True:
        stripped = BRACE_BLOCK_RE.sub("", href)
        if stripped == href:
            break
        href = stripped
    return RETURN_TYPE_RE.sub("", href)


def _flip_last_separator(head: str, sep: str, tail: str) -> str:
    other = "-" if sep == "." else "."
    return f"{head}{other}{tail}"


def build_href_candidates(
    uid: str,
    comment_id: str,
    strip_prefixes: tuple[str, ...] = DEFAULT_STRIP_PREFIXES,
) -> HrefCandidates:
    """Derive the candidate page names for ``uid``.

    The returned hrefs are relative to the version's ``ScriptReference/``
    directory and carry no ``.html`` suffix. Namespaces always map to
    ``index`` and need no validation.
    """
    tag = comment_id_tag(comment_id)
    if tag == "N":
        return HrefCandidates(primary=NAMESPACE_HREF)
    if tag not in KNOWN_TAGS:
        logger.info(
            "Unrecognized comment ID %r for %s; using member rules", comment_id, uid
        )

    href = strip_root_namespace(uid, strip_prefixes)
    # Operators first: their slug is read from the parameter list.
    href = rewrite_operator(href)
    href = collapse_generic_arity(href)
    href = remove_signature(href)

    if tag == "M" and href.endswith(CTOR_SUFFIX):
        href = href[: -len(CTOR_SUFFIX)] + "-ctor"

    for marker in SYNTHETIC_MARKERS:
        idx = href.find(marker)
        if idx > 0:
            owner = href[:idx]
            return HrefCandidates(
                primary=href,
                alternate=owner,
                parent=owner.rpartition(".")[0] or None,
            )

    head, _, tail = href.rpartition(".")
    if not head:
        return HrefCandidates(primary=href)

    sep = "."
    if tag == "F" and tail[:1].islower():
        sep = "-"
    return HrefCandidates(
        primary=f"{head}{sep}{tail}",
        alternate=_flip_last_separator(head, sep, tail),
        parent=head,
    )
