"""Deduplication and field checks for extracted addresses."""

import logging
from typing import AbstractSet, Iterable, List

from govaddress.address.models import Address
from govaddress.address.patterns import is_zip
from govaddress.data.constants import ZIP_DENYLIST

logger = logging.getLogger(__name__)


class ValidationError(ValueError):
    """An address is missing a required field or breaks a field bound."""

    def __init__(self, address: Address, field: str, reason: str):
        self.address = address
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid address '{address}': {field} {reason}")


def deduplicate(addresses: Iterable[Address]) -> List[Address]:
    """Return the structurally unique addresses in sort order."""
    return sorted(set(addresses), key=lambda a: a.sort_key)


def filter_denylisted(
    addresses: Iterable[Address],
    denylist: AbstractSet[str] = ZIP_DENYLIST,
) -> List[Address]:
    """
    Remove addresses whose zip is a known non-address artifact.

    Args:
        addresses: Candidate addresses
        denylist: Zips to drop

    Returns:
        Remaining addresses, order preserved
    """
    kept = []
    for address in addresses:
        if address.zip in denylist:
            logger.warning("Dropping denylisted address %s", address)
            continue
        kept.append(address)
    return kept


def validate_addresses(addresses: Iterable[Address], check_lengths: bool = False) -> None:
    """
    Check that every address has its required fields.

    Args:
        addresses: Addresses to check
        check_lengths: Also enforce mailing label field lengths

    Raises:
        ValidationError: On the first offending address
    """
    for address in addresses:
        for name in ("address1", "city", "state", "zip"):
            if not getattr(address, name):
                raise ValidationError(address, name, "is empty")
        if not is_zip(address.zip):
            raise ValidationError(address, "zip", "is not a 5 or 5+4 digit zip code")
        if check_lengths and not address.is_mailable:
            name, limit = address.oversized_fields()[0]
            raise ValidationError(address, name, f"is longer than {limit} characters")
