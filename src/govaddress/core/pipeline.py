"""Drive entities through editing, extraction, standardization and checkpointing."""

import logging
from typing import List, Optional, Protocol, Sequence

from tqdm import tqdm

from govaddress.address.editor import LineEditor, count_zip_lines, filter_noise, normalize_text
from govaddress.address.extractor import AddressExtractor, ExtractionError
from govaddress.address.models import Address
from govaddress.address.overrides import OverrideTable
from govaddress.address.validation import filter_denylisted, validate_addresses
from govaddress.core.models import Entity, EntityCollection
from govaddress.data.checkpoint import CheckpointStore
from govaddress.data.overrides import DEFAULT_OVERRIDES
from govaddress.standardize.client import StandardizationClient

logger = logging.getLogger(__name__)

# Pages to try, relative to an entity's url. Paths in one group are
# fetched together and their lines concatenated.
DEFAULT_URL_PATHS: List[List[str]] = [
    ["contact/offices"],
    ["contact/office-locations"],
    ["district"],
    ["contact"],
    ["offices"],
    ["office-locations"],
    ["office-information"],
    [""],
    ["washington-d-c-office", "district-office"],
]


class PageSource(Protocol):
    """Fetches the text lines of one page for an entity."""

    async def fetch_lines(self, entity: Entity, url_path: str) -> Optional[List[str]]:
        """Return the page's text nodes, or None if the page has none."""
        ...


class AddressPipeline:
    """
    Resolve office addresses for a collection, one entity at a time.

    A checkpoint is written after every resolved entity, so a failed or
    interrupted run resumes at the first unresolved entity.
    """

    def __init__(
        self,
        source: PageSource,
        client: StandardizationClient,
        checkpoint: CheckpointStore,
        overrides: OverrideTable = DEFAULT_OVERRIDES,
        url_paths: Sequence[Sequence[str]] = DEFAULT_URL_PATHS,
        min_addresses: int = 2,
        show_progress: bool = True,
    ):
        """
        Initialize pipeline.

        Args:
            source: Page fetcher
            client: Address standardization client
            checkpoint: Where progress is saved
            overrides: Per-entity line corrections
            url_paths: Alternate page groups, tried in order
            min_addresses: Fewest addresses a page group must yield
                (one home-state office plus the DC office)
            show_progress: Show a progress bar while running
        """
        self.source = source
        self.client = client
        self.checkpoint = checkpoint
        self.overrides = overrides
        self.url_paths = url_paths
        self.min_addresses = min_addresses
        self.show_progress = show_progress
        self.editor = LineEditor()
        self.extractor = AddressExtractor()

    def prepare_lines(self, entity: Entity, lines: Sequence[str]) -> List[str]:
        """Filter noise, apply the entity's overrides and run the line editor."""
        cleaned = normalize_text(filter_noise(lines))
        corrected = self.overrides.apply(entity.identity, cleaned)
        return self.editor.edit(corrected)

    async def _fetch_group(self, entity: Entity, paths: Sequence[str]) -> List[str]:
        lines: List[str] = []
        for path in paths:
            page = await self.source.fetch_lines(entity, path)
            if page:
                lines.extend(self.prepare_lines(entity, page))
        return lines

    async def resolve_entity(self, entity: Entity) -> Optional[List[Address]]:
        """
        Find, validate and standardize an entity's addresses.

        Returns:
            Standardized addresses, or None if no page group yielded enough

        Raises:
            ValidationError: If an extracted address is missing a field
            StandardizationError: If an address cannot be standardized
            ValidatorUnavailableError: If the validator cannot be reached
        """
        for paths in self.url_paths:
            lines = await self._fetch_group(entity, paths)
            if count_zip_lines(lines) < self.min_addresses:
                logger.debug("Too few zips for %s at %s", entity.display_name, list(paths))
                continue

            try:
                addresses = self.extractor.extract(lines)
            except ExtractionError as e:
                logger.debug("No addresses for %s at %s: %s", entity.display_name, list(paths), e)
                continue
            if len(addresses) < self.min_addresses:
                logger.debug(
                    "Only %d addresses for %s at %s", len(addresses), entity.display_name, list(paths)
                )
                continue

            addresses = filter_denylisted(addresses, self.client.denylist)
            validate_addresses(addresses)
            standardized = await self.client.standardize_addresses(addresses)
            validate_addresses(standardized, check_lengths=True)
            logger.info("Resolved %d addresses for %s", len(standardized), entity.display_name)
            return standardized

        logger.warning("No addresses found for %s", entity.display_name)
        return None

    async def run(self, collection: Optional[EntityCollection] = None) -> EntityCollection:
        """
        Resolve every pending entity.

        Args:
            collection: Starting collection, used when no checkpoint exists

        Returns:
            The collection with newly resolved entities filled in
        """
        saved = self.checkpoint.load()
        if saved is not None:
            collection = saved
        elif collection is None:
            raise ValueError("No checkpoint found and no collection given")

        pending = collection.pending()
        logger.info(
            "%s: %d of %d entities pending", collection.name, len(pending), len(collection.entities)
        )

        iterator = tqdm(pending, desc="Resolving", unit="entity") if self.show_progress else pending
        for entity in iterator:
            addresses = await self.resolve_entity(entity)
            if addresses is None:
                continue
            entity.addresses = addresses
            self.checkpoint.save(collection)

        return collection
