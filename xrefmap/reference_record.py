"""Data model for a single xref map reference."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ReferenceRecord:
    """One entry of an XRefMap ``references`` list."""

    uid: str
    name: str
    href: str
    comment_id: str
    full_name: str
    name_with_type: str

    def to_dict(self) -> dict[str, Any]:
        """Return the record keyed the way DocFX expects, in its field order."""
        return {
            "uid": self.uid,
            "name": self.name,
            "href": self.href,
            "commentId": self.comment_id,
            "fullName": self.full_name,
            "nameWithType": self.name_with_type,
        }
