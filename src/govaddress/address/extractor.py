"""Reverse zip-anchored address extraction."""

import logging
from typing import List, Optional, Sequence

from govaddress.address.models import Address
from govaddress.address.patterns import is_address_line1, is_po_box, is_zip
from govaddress.data.constants import normalize_state

logger = logging.getLogger(__name__)


class ExtractionError(Exception):
    """No address could be extracted from a line sequence."""

    def __init__(self, reason: str, lines: Sequence[str] = ()):
        self.reason = reason
        self.lines = list(lines)
        super().__init__(f"Failed to extract addresses: {reason}")


class AddressExtractor:
    """
    Extract addresses from a normalized line sequence.

    Scans from the bottom for zip lines. Each zip anchors one address laid
    out as ``address1 [address2 ...] city state zip``: the state sits on the
    line above the zip, the city above that, and address1 is the nearest
    line further up that looks like a street line or PO box. Lines between
    address1 and city become address2.

    Pages that break this ordering are repaired with per-entity overrides
    before extraction, not here.
    """

    # state, city and at least one candidate line above the zip
    MIN_ANCHOR_INDEX = 3

    def extract(self, lines: Sequence[str]) -> List[Address]:
        """
        Extract every anchored address.

        Args:
            lines: Output of LineEditor.edit()

        Returns:
            Sorted, deduplicated addresses

        Raises:
            ExtractionError: If no anchor produced an address
        """
        addresses: List[Address] = []
        for idx in range(len(lines) - 1, -1, -1):
            if not is_zip(lines[idx]):
                continue
            address = self._extract_at(lines, idx)
            if address is not None:
                addresses.append(address)

        if not addresses:
            reason = "no zip anchor" if not any(is_zip(line) for line in lines) else "no address line 1"
            raise ExtractionError(reason, lines)

        unique = sorted(set(addresses), key=lambda a: a.sort_key)
        logger.debug("Extracted %d addresses", len(unique))
        return unique

    def _extract_at(self, lines: Sequence[str], idx: int) -> Optional[Address]:
        """Build the address anchored at the zip on line ``idx``, if any."""
        if idx < self.MIN_ANCHOR_INDEX:
            logger.warning("Skipping zip %s: too few lines above it", lines[idx])
            return None

        state = lines[idx - 1]
        idx_city = idx - 2
        city = lines[idx_city]

        idx_adr1 = self._find_address1(lines, idx_city - 1)
        if idx_adr1 is None:
            logger.warning("Unable to find address line 1 for %s %s %s", city, state, lines[idx])
            return None

        # A street line directly above the match is the real primary line.
        if idx_adr1 > 0 and self._looks_like_address1(lines[idx_adr1 - 1]):
            idx_adr1 -= 1

        between = lines[idx_adr1 + 1 : idx_city]
        return Address(
            address1=lines[idx_adr1],
            address2=" ".join(between) if between else None,
            city=city,
            state=normalize_state(state) or state,
            zip=lines[idx],
        )

    def _find_address1(self, lines: Sequence[str], start: int) -> Optional[int]:
        """Scan up from ``start`` for an address line 1, stopping at another zip."""
        for idx in range(start, -1, -1):
            if is_zip(lines[idx]):
                return None
            if self._looks_like_address1(lines[idx]):
                return idx
        return None

    @staticmethod
    def _looks_like_address1(line: str) -> bool:
        return line.endswith("BUILDING") or is_address_line1(line) or is_po_box(line)
