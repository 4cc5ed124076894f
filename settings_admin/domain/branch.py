"""Branch entity - represents a business location."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .timestamps import format_timestamp, parse_timestamp


@dataclass(frozen=True)
class Branch:
    """A branch is a physical location of the business."""

    id: str
    name: str
    description: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Branch":
        """Creates a Branch from an API payload."""
        return cls(
            id=str(data["_id"] if "_id" in data else data["id"]),
            name=data["name"],
            description=data.get("description"),
            address=data.get("address"),
            phone=data.get("phone"),
            email=data.get("email"),
            is_active=bool(data.get("isActive", True)),
            created_at=parse_timestamp(data.get("createdAt")),
            updated_at=parse_timestamp(data.get("updatedAt")),
        )

    def to_dict(self) -> dict:
        """Converts to the API payload shape."""
        return {
            "_id": self.id,
            "name": self.name,
            "description": self.description,
            "address": self.address,
            "phone": self.phone,
            "email": self.email,
            "isActive": self.is_active,
            "createdAt": format_timestamp(self.created_at),
            "updatedAt": format_timestamp(self.updated_at),
        }
