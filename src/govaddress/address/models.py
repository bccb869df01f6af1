"""Mailing address value type."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from govaddress.data.constants import FIELD_LENGTH_LIMITS


@dataclass(frozen=True)
class Address:
    """A US mailing address."""

    address1: str
    address2: Optional[str] = None  # Suite, room, building name
    city: str = ""
    state: str = ""
    zip: str = ""  # 12345 or 12345-6789

    @property
    def sort_key(self) -> Tuple[str, str, str, str, str]:
        """Total ordering key; a missing address2 sorts first."""
        return (self.address1, self.address2 or "", self.city, self.state, self.zip)

    def oversized_fields(self) -> List[Tuple[str, int]]:
        """Fields too long for a mailing label, with their limits."""
        return [
            (name, limit)
            for name, limit in FIELD_LENGTH_LIMITS
            if len(getattr(self, name) or "") > limit
        ]

    @property
    def is_mailable(self) -> bool:
        """Check that every field fits on a mailing label."""
        return not self.oversized_fields()

    def to_dict(self) -> Dict[str, Optional[str]]:
        """Convert to dictionary."""
        return {
            "address1": self.address1,
            "address2": self.address2,
            "city": self.city,
            "state": self.state,
            "zip": self.zip,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Address":
        """Build an Address from a dictionary produced by to_dict()."""
        return cls(
            address1=data["address1"],
            address2=data.get("address2") or None,
            city=data.get("city", ""),
            state=data.get("state", ""),
            zip=data.get("zip", ""),
        )

    def __str__(self) -> str:
        return ",".join(
            [self.address1, self.address2 or "", self.city, self.state, self.zip]
        )
