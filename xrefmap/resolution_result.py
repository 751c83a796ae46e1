"""Data models for href resolution results."""

from dataclasses import dataclass

# Ladder rungs, in the order they are tried.
RUNG_NAMESPACE = "namespace"
RUNG_PRIMARY = "primary"
RUNG_ALTERNATE = "alternate"
RUNG_PARENT = "parent"
RUNG_INDEX = "index"


@dataclass(frozen=True)
class HrefResolution:
    """Represents the outcome of resolving a UID to a Scripting Reference URL."""

    uid: str
    url: str
    rung: str
    probes: int = 0
