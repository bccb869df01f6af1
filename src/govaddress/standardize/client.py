"""Standardize addresses against the USPS ZIP code lookup service."""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, Any, Dict, List, Optional, Sequence, Tuple

import aiohttp

from govaddress.address.models import Address
from govaddress.address.validation import deduplicate
from govaddress.data.constants import USER_AGENT, USPS_ZIP_LOOKUP_URL, ZIP_DENYLIST

logger = logging.getLogger(__name__)


class Strategy(Enum):
    """Ways of laying out an address for the validator."""

    AS_IS = "as_is"  # address1 and address2 as separate fields
    COMBINE = "combine"  # address2 appended to address1
    SWAP = "swap"  # address2 submitted as address1
    DROP_ZIP = "drop_zip"  # as-is without the zip constraint


STRATEGY_ORDER: Tuple[Strategy, ...] = (
    Strategy.AS_IS,
    Strategy.COMBINE,
    Strategy.SWAP,
    Strategy.DROP_ZIP,
)


@dataclass(frozen=True)
class StandardizationAttempt:
    """Outcome of submitting one address with one strategy."""

    strategy: Strategy
    succeeded: bool
    detail: str = ""


class StandardizationError(Exception):
    """Every strategy failed for an address."""

    def __init__(self, address: Address, attempts: Sequence[StandardizationAttempt]):
        self.address = address
        self.attempts = list(attempts)
        tried = "; ".join(f"{a.strategy.value}: {a.detail}" for a in self.attempts)
        super().__init__(f"Failed to standardize '{address}' ({tried})")


class ValidatorUnavailableError(Exception):
    """The validator could not be reached or returned an HTTP error."""

    def __init__(self, url: str, status_code: int, message: str = ""):
        self.url = url
        self.status_code = status_code
        super().__init__(f"Validator request to {url} failed: HTTP {status_code}. {message}")


def build_form(address: Address, strategy: Strategy) -> Optional[Dict[str, str]]:
    """
    Build the form fields for one strategy.

    Args:
        address: Address to submit
        strategy: Field layout to use

    Returns:
        Form fields, or None if the strategy does not apply to this address
    """
    form: Dict[str, str] = {}
    if strategy in (Strategy.AS_IS, Strategy.DROP_ZIP):
        if address.address1:
            form["address1"] = address.address1
        if address.address2:
            form["address2"] = address.address2
    elif strategy is Strategy.COMBINE:
        form["address1"] = " ".join(p for p in (address.address1, address.address2) if p)
    elif strategy is Strategy.SWAP:
        if not address.address2:
            return None
        form["address1"] = address.address2

    if address.city:
        form["city"] = address.city
    if address.state:
        form["state"] = address.state
    if strategy is not Strategy.DROP_ZIP and address.zip:
        form["zip"] = address.zip
    return form


def select_candidate(payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], str]:
    """
    Pick the best candidate from a validator response.

    "Range" lines are street-range placeholders and never selected. With
    several candidates left, the first one without an addressLine2 wins.

    Returns:
        (candidate, reason); candidate is None when the response is a failure
    """
    status = payload.get("resultStatus")
    if status != "SUCCESS":
        return None, f"result status {status!r}"

    candidates = payload.get("addressList") or []
    if not candidates:
        return None, "no candidates"
    candidates = [c for c in candidates if "Range" not in (c.get("addressLine1") or "")]
    if not candidates:
        return None, "all candidates were ranges"

    if len(candidates) == 1:
        return candidates[0], "single candidate"
    for candidate in candidates:
        if not candidate.get("addressLine2"):
            return candidate, "primary candidate"
    return candidates[0], "first candidate"


def candidate_to_address(candidate: Dict[str, Any]) -> Address:
    """Convert a validator candidate to an Address."""
    zip5 = candidate.get("zip5") or ""
    zip4 = candidate.get("zip4") or ""
    return Address(
        address1=candidate.get("addressLine1") or "",
        address2=candidate.get("addressLine2") or None,
        city=candidate.get("city") or "",
        state=candidate.get("state") or "",
        zip=f"{zip5}-{zip4}" if zip4 else zip5,
    )


class StandardizationClient:
    """
    Submits addresses to the USPS lookup, trying each strategy in turn.

    Transport errors and HTTP error statuses are retried and then raised
    as ValidatorUnavailableError; they never count as a strategy failure.

    Example:
        >>> async with StandardizationClient() as client:
        ...     address = await client.standardize(Address("1600 PENNSYLVANIA AVE NW",
        ...                                                 city="WASHINGTON", state="DC"))
    """

    def __init__(
        self,
        endpoint: str = USPS_ZIP_LOOKUP_URL,
        timeout: int = 30,
        retries: int = 3,
        denylist: AbstractSet[str] = ZIP_DENYLIST,
    ):
        """
        Initialize client.

        Args:
            endpoint: Validator URL
            timeout: Request timeout in seconds
            retries: Number of attempts per request
            denylist: Zips whose unresolvable addresses are dropped instead of raised
        """
        self.endpoint = endpoint
        self.timeout = timeout
        self.retries = retries
        self.denylist = denylist
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            self._session = aiohttp.ClientSession(
                timeout=timeout,
                headers={"User-Agent": USER_AGENT},
            )
        return self._session

    async def close(self):
        """Close the aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "StandardizationClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _post(self, form: Dict[str, str]) -> Any:
        """POST a form to the validator with retries and decode the JSON body."""
        session = await self._get_session()
        for attempt in range(self.retries):
            try:
                async with session.post(self.endpoint, data=form) as response:
                    response.raise_for_status()
                    return await response.json(content_type=None)
            except aiohttp.ClientResponseError as e:
                if attempt == self.retries - 1:
                    raise ValidatorUnavailableError(self.endpoint, e.status, e.message)
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                if attempt == self.retries - 1:
                    raise ValidatorUnavailableError(self.endpoint, 0, str(e) or type(e).__name__)
            logger.debug("Retrying validator request (%d/%d)", attempt + 1, self.retries)
        raise ValidatorUnavailableError(self.endpoint, 0, "no attempts made")

    async def _attempt(
        self, address: Address, strategy: Strategy
    ) -> Tuple[Optional[Address], StandardizationAttempt]:
        form = build_form(address, strategy)
        if form is None:
            return None, StandardizationAttempt(strategy, False, "not applicable")

        try:
            payload = await self._post(form)
        except ValueError as e:
            return None, StandardizationAttempt(strategy, False, f"invalid response ({e})")
        if not isinstance(payload, dict):
            return None, StandardizationAttempt(strategy, False, "invalid response")

        candidate, reason = select_candidate(payload)
        if candidate is None:
            return None, StandardizationAttempt(strategy, False, reason)
        return candidate_to_address(candidate), StandardizationAttempt(strategy, True, reason)

    async def standardize(self, address: Address) -> Address:
        """
        Standardize one address.

        Args:
            address: Validated, extracted address

        Returns:
            The validator's canonical form of the address

        Raises:
            StandardizationError: If every strategy failed
            ValidatorUnavailableError: If the validator could not be reached
        """
        attempts: List[StandardizationAttempt] = []
        for strategy in STRATEGY_ORDER:
            result, attempt = await self._attempt(address, strategy)
            attempts.append(attempt)
            logger.debug("Standardize %s with %s: %s", address, strategy.value, attempt.detail)
            if result is not None:
                return result
        raise StandardizationError(address, attempts)

    async def standardize_addresses(self, addresses: Sequence[Address]) -> List[Address]:
        """
        Standardize addresses in order, then deduplicate.

        Addresses with a denylisted zip that fail every strategy are dropped;
        any other failure is raised.
        """
        results: List[Address] = []
        for address in addresses:
            try:
                results.append(await self.standardize(address))
            except StandardizationError:
                if address.zip not in self.denylist:
                    raise
                logger.warning("Dropping unresolvable denylisted address %s", address)
        return deduplicate(results)
