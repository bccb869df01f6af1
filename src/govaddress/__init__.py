"""
govaddress: Extract and standardize US government office addresses.

Turns the text nodes scraped from member and agency web pages into
validated mailing addresses:

- LineEditor: normalize raw lines into address-shaped lines
- OverrideTable: per-entity corrections for known page defects
- AddressExtractor: reverse zip-anchored extraction
- StandardizationClient: USPS lookup with fallback strategies
- CheckpointStore: resumable progress between runs
"""

from govaddress.address.editor import (
    LineEditor,
    abbreviate_office_buildings,
    concat_zip,
    count_zip_lines,
    filter_noise,
    is_noise,
    normalize_text,
    repair_disjoint_zip,
    split_city_state_zip,
    split_delimiters,
    trim_after_last_zip,
)
from govaddress.address.extractor import AddressExtractor, ExtractionError
from govaddress.address.models import Address
from govaddress.address.overrides import EditOp, LineEdit, MatchMode, OverrideTable
from govaddress.address.patterns import ends_with_zip, is_address_line1, is_po_box, is_zip
from govaddress.address.validation import (
    ValidationError,
    deduplicate,
    filter_denylisted,
    validate_addresses,
)
from govaddress.core.models import Entity, EntityCollection, Role, remove_initials, strip_honorific
from govaddress.core.pipeline import DEFAULT_URL_PATHS, AddressPipeline, PageSource
from govaddress.data.checkpoint import CheckpointError, CheckpointStore
from govaddress.data.constants import USPS_ZIP_LOOKUP_URL, ZIP_DENYLIST, is_state, normalize_state
from govaddress.data.overrides import DEFAULT_OVERRIDES
from govaddress.standardize.client import (
    STRATEGY_ORDER,
    StandardizationAttempt,
    StandardizationClient,
    StandardizationError,
    Strategy,
    ValidatorUnavailableError,
    build_form,
    select_candidate,
)

__version__ = "0.1.0"
__all__ = [
    # Main API
    "Address",
    "Entity",
    "EntityCollection",
    "Role",
    "AddressPipeline",
    "PageSource",
    "DEFAULT_URL_PATHS",
    # Line editing
    "LineEditor",
    "normalize_text",
    "split_delimiters",
    "concat_zip",
    "repair_disjoint_zip",
    "split_city_state_zip",
    "abbreviate_office_buildings",
    "trim_after_last_zip",
    "is_noise",
    "filter_noise",
    "count_zip_lines",
    # Overrides
    "OverrideTable",
    "LineEdit",
    "EditOp",
    "MatchMode",
    "DEFAULT_OVERRIDES",
    # Extraction and validation
    "AddressExtractor",
    "deduplicate",
    "filter_denylisted",
    "validate_addresses",
    "is_zip",
    "is_address_line1",
    "is_po_box",
    "is_state",
    "ends_with_zip",
    "normalize_state",
    "ZIP_DENYLIST",
    "USPS_ZIP_LOOKUP_URL",
    # Standardization
    "StandardizationClient",
    "StandardizationAttempt",
    "Strategy",
    "STRATEGY_ORDER",
    "build_form",
    "select_candidate",
    # Persistence
    "CheckpointStore",
    # Names
    "remove_initials",
    "strip_honorific",
    # Exceptions
    "ExtractionError",
    "ValidationError",
    "StandardizationError",
    "ValidatorUnavailableError",
    "CheckpointError",
]
