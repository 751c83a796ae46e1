"""Data models for symbols read from DocFX metadata."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SymbolEntry:
    """Represents a documented member as emitted by ``docfx metadata``."""

    uid: str
    comment_id: str  # N:/T:/F:/P:/M:/E: followed by the dotted path
    name: str
    full_name: str
    name_with_type: str
    file: Path
