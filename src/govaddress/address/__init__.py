"""Line editing, overrides, extraction and validation of scraped addresses."""

from govaddress.address.editor import LineEditor, count_zip_lines, filter_noise, is_noise
from govaddress.address.extractor import AddressExtractor, ExtractionError
from govaddress.address.models import Address
from govaddress.address.overrides import EditOp, LineEdit, MatchMode, OverrideTable
from govaddress.address.validation import (
    ValidationError,
    deduplicate,
    filter_denylisted,
    validate_addresses,
)

__all__ = [
    "Address",
    "LineEditor",
    "AddressExtractor",
    "ExtractionError",
    "OverrideTable",
    "LineEdit",
    "EditOp",
    "MatchMode",
    "ValidationError",
    "deduplicate",
    "filter_denylisted",
    "validate_addresses",
    "is_noise",
    "filter_noise",
    "count_zip_lines",
]
