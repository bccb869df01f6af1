"""Entities whose office addresses are being resolved."""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from govaddress.address.models import Address

# "JOHN R. SMITH" -> "JOHN SMITH"
_INITIALS_RE = re.compile(r"\b[A-Z]\.\s+")
_HONORIFIC_RE = re.compile(r"^(?:DR\.?|GENERAL|GEN\.?|ADMIRAL|ADM\.?)\s+", re.IGNORECASE)


def remove_initials(full_name: str) -> str:
    """Drop middle initials from a directory name."""
    return _INITIALS_RE.sub("", full_name)


def strip_honorific(full_name: str) -> str:
    """Drop a leading title such as "DR." or "GENERAL"."""
    return _HONORIFIC_RE.sub("", full_name.strip())


class Role(Enum):
    """Kind of office an entity holds."""

    MILITARY = "military"
    SCIENTIFIC = "scientific"
    POLITICAL = "political"


@dataclass
class Entity:
    """A person with a source page and, once resolved, office addresses."""

    first_name: str
    last_name: str
    url: str = ""
    title: Optional[str] = None
    addresses: Optional[List[Address]] = None  # None until resolved

    @classmethod
    def from_full_name(cls, full_name: str, url: str = "", title: Optional[str] = None) -> "Entity":
        """
        Build an Entity from a directory name like "Dr. Jane Q. Doe".

        Everything before the last word is the first name.
        """
        name = remove_initials(strip_honorific(full_name))
        parts = name.split()
        if not parts:
            raise ValueError(f"Empty name: {full_name!r}")
        return cls(first_name=" ".join(parts[:-1]), last_name=parts[-1], url=url, title=title)

    @property
    def identity(self) -> Tuple[str, str]:
        return (self.first_name, self.last_name)

    @property
    def is_resolved(self) -> bool:
        return self.addresses is not None

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def sort_key(self) -> Tuple[str, str]:
        return (self.last_name, self.first_name)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "url": self.url,
            "title": self.title,
            "addresses": (
                [address.to_dict() for address in self.addresses]
                if self.addresses is not None
                else None
            ),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Entity":
        """Build an Entity from a dictionary produced by to_dict()."""
        addresses = data.get("addresses")
        return cls(
            first_name=data["first_name"],
            last_name=data["last_name"],
            url=data.get("url", ""),
            title=data.get("title"),
            addresses=(
                [Address.from_dict(address) for address in addresses]
                if addresses is not None
                else None
            ),
        )


@dataclass
class EntityCollection:
    """An ordered group of entities from one directory."""

    name: str
    role: Role = Role.POLITICAL
    entities: List[Entity] = field(default_factory=list)

    def pending(self) -> List[Entity]:
        """Entities without resolved addresses, in order."""
        return [entity for entity in self.entities if not entity.is_resolved]

    def resolved(self) -> List[Entity]:
        """Entities with resolved addresses, in order."""
        return [entity for entity in self.entities if entity.is_resolved]

    def find(self, identity: Tuple[str, str]) -> Optional[Entity]:
        """Look up an entity by (first_name, last_name)."""
        for entity in self.entities:
            if entity.identity == identity:
                return entity
        return None

    def sort(self) -> None:
        """Order entities by last name, then first name."""
        self.entities.sort(key=lambda entity: entity.sort_key)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "role": self.role.value,
            "entities": [entity.to_dict() for entity in self.entities],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EntityCollection":
        """Build a collection from a dictionary produced by to_dict()."""
        return cls(
            name=data["name"],
            role=Role(data.get("role", Role.POLITICAL.value)),
            entities=[Entity.from_dict(entity) for entity in data.get("entities", [])],
        )
