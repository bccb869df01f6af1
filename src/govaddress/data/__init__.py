"""Static reference data and checkpoint persistence for govaddress."""

from govaddress.data.constants import STATE_ABBREVS, STATE_NAMES, USPS_ZIP_LOOKUP_URL, ZIP_DENYLIST

__all__ = [
    "STATE_ABBREVS",
    "STATE_NAMES",
    "USPS_ZIP_LOOKUP_URL",
    "ZIP_DENYLIST",
]
