"""Tag objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class Tag:
    """Metadata for a tag used by operations."""

    name: str = ""
    description: str = ""
    external_docs: Optional[dict[str, Any]] = None
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the document form, leaving out empty fields."""
        data = {
            key: value
            for key, value in (
                ("name", self.name),
                ("description", self.description),
                ("externalDocs", self.external_docs),
            )
            if value
        }
        data.update(self.extensions)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Tag":
        """Build a tag from its document form."""
        known = {"name", "description", "externalDocs"}
        return cls(
            name=data.get("name", ""),
            description=data.get("description", ""),
            external_docs=data.get("externalDocs"),
            extensions={k: v for k, v in data.items() if k not in known},
        )


class Tags(list):
    """A list of tags."""

    def get(self, name: str) -> Optional[Tag]:
        """Return the first tag called ``name``, or None."""
        return next((tag for tag in self if tag.name == name), None)