"""Category entity - a product category managed from the settings screen."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .timestamps import format_timestamp, parse_timestamp


@dataclass(frozen=True)
class Category:
    """A category groups products under a unique machine-readable value."""

    id: str
    name: str
    value: str
    label: Optional[str] = None
    description: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Category":
        """Creates a Category from an API payload.

        Accepts both ``_id`` (as sent by the API) and ``id``.
        """
        return cls(
            id=str(data["_id"] if "_id" in data else data["id"]),
            name=data["name"],
            value=data["value"],
            label=data.get("label"),
            description=data.get("description"),
            is_active=bool(data.get("isActive", True)),
            created_at=parse_timestamp(data.get("createdAt")),
            updated_at=parse_timestamp(data.get("updatedAt")),
        )

    def to_dict(self) -> dict:
        """Converts to the API payload shape."""
        return {
            "_id": self.id,
            "name": self.name,
            "value": self.value,
            "label": self.label,
            "description": self.description,
            "isActive": self.is_active,
            "createdAt": format_timestamp(self.created_at),
            "updatedAt": format_timestamp(self.updated_at),
        }

    @property
    def display_label(self) -> str:
        return self.label or self.name
