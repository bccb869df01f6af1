"""Static reference data: USPS state codes, validator endpoint, denylists."""

import re
from typing import Dict, FrozenSet, Optional, Tuple

# USPS state, district, territory and military codes
STATE_ABBREVS: FrozenSet[str] = frozenset(
    [
        "AL", "AK", "AS", "AZ", "AR", "CA", "CO", "CT", "DE", "DC",
        "FM", "FL", "GA", "GU", "HI", "ID", "IL", "IN", "IA", "KS",
        "KY", "LA", "ME", "MH", "MD", "MA", "MI", "MN", "MS", "MO",
        "MT", "NE", "NV", "NH", "NJ", "NM", "NY", "NC", "ND", "MP",
        "OH", "OK", "OR", "PW", "PA", "PR", "RI", "SC", "SD", "TN",
        "TX", "UT", "VT", "VI", "VA", "WA", "WV", "WI", "WY", "AA",
        "AE", "AP",
    ]
)

# Full (upper-case) names to USPS abbreviation
STATE_NAMES: Dict[str, str] = {
    "ALABAMA": "AL",
    "ALASKA": "AK",
    "AMERICAN SAMOA": "AS",
    "ARIZONA": "AZ",
    "ARKANSAS": "AR",
    "CALIFORNIA": "CA",
    "COLORADO": "CO",
    "CONNECTICUT": "CT",
    "DELAWARE": "DE",
    "DISTRICT OF COLUMBIA": "DC",
    "FEDERATED STATES OF MICRONESIA": "FM",
    "FLORIDA": "FL",
    "GEORGIA": "GA",
    "GUAM": "GU",
    "HAWAII": "HI",
    "IDAHO": "ID",
    "ILLINOIS": "IL",
    "INDIANA": "IN",
    "IOWA": "IA",
    "KANSAS": "KS",
    "KENTUCKY": "KY",
    "LOUISIANA": "LA",
    "MAINE": "ME",
    "MARSHALL ISLANDS": "MH",
    "MARYLAND": "MD",
    "MASSACHUSETTS": "MA",
    "MICHIGAN": "MI",
    "MINNESOTA": "MN",
    "MISSISSIPPI": "MS",
    "MISSOURI": "MO",
    "MONTANA": "MT",
    "NEBRASKA": "NE",
    "NEVADA": "NV",
    "NEW HAMPSHIRE": "NH",
    "NEW JERSEY": "NJ",
    "NEW MEXICO": "NM",
    "NEW YORK": "NY",
    "NORTH CAROLINA": "NC",
    "NORTH DAKOTA": "ND",
    "NORTHERN MARIANA ISLANDS": "MP",
    "OHIO": "OH",
    "OKLAHOMA": "OK",
    "OREGON": "OR",
    "PALAU": "PW",
    "PENNSYLVANIA": "PA",
    "PUERTO RICO": "PR",
    "RHODE ISLAND": "RI",
    "SOUTH CAROLINA": "SC",
    "SOUTH DAKOTA": "SD",
    "TENNESSEE": "TN",
    "TEXAS": "TX",
    "UTAH": "UT",
    "VERMONT": "VT",
    "VIRGIN ISLANDS": "VI",
    "VIRGINIA": "VA",
    "WASHINGTON": "WA",
    "WEST VIRGINIA": "WV",
    "WISCONSIN": "WI",
    "WYOMING": "WY",
}

# Longest names first so "WEST VIRGINIA" wins over "VIRGINIA" at the same offset.
_STATE_ALTERNATION = "|".join(
    re.escape(name)
    for name in sorted(list(STATE_NAMES) + sorted(STATE_ABBREVS), key=len, reverse=True)
)
STATE_PATTERN = re.compile(rf"\b(?:{_STATE_ALTERNATION})\b")

# External address validator (USPS ZIP code lookup by address)
USPS_ZIP_LOOKUP_URL = "https://tools.usps.com/tools/app/ziplookup/zipByAddress"
USER_AGENT = "govaddress/0.1.0"

# Zips seen attached to non-address content (contact-form artifacts).
# Hand-curated from observed failures; extend as new ones show up.
ZIP_DENYLIST: FrozenSet[str] = frozenset(["89801", "49854"])

# Mailing field length limits
MAX_LINE_LENGTH = 40
MAX_STATE_LENGTH = 2
MAX_ZIP_LENGTH = 10

FIELD_LENGTH_LIMITS: Tuple[Tuple[str, int], ...] = (
    ("address1", MAX_LINE_LENGTH),
    ("address2", MAX_LINE_LENGTH),
    ("city", MAX_LINE_LENGTH),
    ("state", MAX_STATE_LENGTH),
    ("zip", MAX_ZIP_LENGTH),
)


def normalize_state(value: str) -> Optional[str]:
    """
    Convert a state name or abbreviation to its USPS abbreviation.

    Args:
        value: State name or abbreviation (any case)

    Returns:
        Two-letter abbreviation, or None if unrecognized
    """
    key = " ".join(value.upper().split())
    if key in STATE_ABBREVS:
        return key
    return STATE_NAMES.get(key)


def is_state(value: str) -> bool:
    """Check if a whole line is a state abbreviation or full state name."""
    return normalize_state(value) is not None
