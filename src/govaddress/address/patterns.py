"""Line-shape predicates shared by the editor and the extractor."""

import re

# 5 digits, or 5+4 with a literal hyphen
ZIP_RE = re.compile(r"\d{5}(?:-\d{4})?")

# A line holding only a zip, hyphen optional for the 9-digit form
ZIP_ONLY_RE = re.compile(r"(\d{5})(?:-?(\d{4}))?")

# Zip token at the end of a line; never the tail of a longer digit run
TRAILING_ZIP_RE = re.compile(r"(?:^|\s)(\d{5}(?:-\d{4})?)$")

# Leads with a number (or PO BOX) and contains a letter somewhere after:
# "21-00 NJ 208 S", "340A 9TH STREET", "PO BOX B"
ADDRESS1_RE = re.compile(r"(?:PO\s*BOX|\d+).*[A-Z]", re.IGNORECASE)

# "PO BOX 123", "P.O. BOX 456", "P.O.BOX 1011"
PO_BOX_RE = re.compile(r"P\s*\.?\s*O\s*\.?\s*BOX\s+\d+", re.IGNORECASE)


def is_zip(line: str) -> bool:
    """Check if a line is exactly a 5-digit or 5+4 zip code."""
    return ZIP_RE.fullmatch(line) is not None


def ends_with_zip(line: str) -> bool:
    """Check if a line is, or ends with, a zip token."""
    return TRAILING_ZIP_RE.search(line) is not None


def is_address_line1(line: str) -> bool:
    """Check if a line looks like a primary street line."""
    return ADDRESS1_RE.match(line) is not None


def is_po_box(line: str) -> bool:
    """Check if a line is a post office box."""
    return PO_BOX_RE.fullmatch(line) is not None
