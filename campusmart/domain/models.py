from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class _LabeledEnum(Enum):
    """Persisted by member name; the value is the display label only."""

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str):
        return cls[name]


class Role(_LabeledEnum):
    STANDARD = "Standard"
    ADMINISTRATOR = "Administrator"


class ListingCategory(_LabeledEnum):
    GENERAL = "General"
    ENGINEERING = "Engineering"
    PRE_MED = "Pre Med"
    HUMANITIES_ART = "Humanities/Art"


class ItemCondition(_LabeledEnum):
    NEW = "NEW"
    LIKE_NEW = "LIKE NEW"
    GOOD = "GOOD"
    FAIR = "FAIR"
    POOR = "POOR"


class ListingStatus(_LabeledEnum):
    ACTIVE = "Active"
    SOLD = "Sold"
    ARCHIVED = "Archived"


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class Account:
    first: str
    last: str
    email: str
    credential: str  # plain text, demo only
    role: Role = Role.STANDARD
    id: Optional[int] = None

    def to_public_dict(self) -> dict:
        return {
            "id": self.id,
            "first": self.first,
            "last": self.last,
            "email": self.email,
            "role": self.role.name,
        }


@dataclass
class Listing:
    seller_id: int
    title: str
    description: Optional[str]
    category: ListingCategory
    price_cents: int
    condition: ItemCondition
    photos: list[str] = field(default_factory=list)
    status: ListingStatus = ListingStatus.ACTIVE
    created_at: int = field(default_factory=now_ms)
    id: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "seller_id": self.seller_id,
            "title": self.title,
            "description": self.description,
            "category": self.category.name,
            "price_cents": self.price_cents,
            "condition": self.condition.name,
            "photos": list(self.photos),
            "status": self.status.name,
            "created_at": self.created_at,
        }
