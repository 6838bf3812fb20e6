"""
REST client for the exchange ticker endpoint.
One GET per refresh, no retry and no cache.
"""

import logging
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional
from urllib.parse import urlparse

import requests

from config.settings import DEFAULT_API_BASE
from core.models import TickerSnapshot

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("price_24h", "volume_24h", "last_trade_price")

_PAIR_PATTERN = re.compile(r"^[A-Za-z0-9]+(-[A-Za-z0-9]+)*$")


class TickerDecodeError(ValueError):
    """Raised when a ticker payload is missing a field or has a wrong-typed one."""


class FetchFailure(Enum):
    """Why a fetch produced no snapshot. Used for diagnostics only."""
    INVALID_URL = "invalid_url"
    NETWORK_ERROR = "network_error"
    BAD_STATUS = "bad_status"
    DECODE_ERROR = "decode_error"


@dataclass(frozen=True)
class FetchResult:
    snapshot: Optional[TickerSnapshot] = None
    failure: Optional[FetchFailure] = None

    @property
    def ok(self) -> bool:
        return self.snapshot is not None


def decode_snapshot(payload: Any) -> TickerSnapshot:
    """
    Decode a ticker JSON object into a snapshot.

    All three required fields must be JSON numbers; extra fields are ignored.

    Raises:
        TickerDecodeError: If the payload is not an object or a field is missing/wrong-typed.
    """
    if not isinstance(payload, dict):
        raise TickerDecodeError(f"Expected JSON object, got {type(payload).__name__}")

    values = {}
    for name in REQUIRED_FIELDS:
        if name not in payload:
            raise TickerDecodeError(f"Missing field: {name}")
        value = payload[name]
        # bool is an int subclass but not a JSON number
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TickerDecodeError(f"Field {name} is not a number: {value!r}")
        try:
            number = float(value)
        except (OverflowError, TypeError) as e:
            raise TickerDecodeError(f"Field {name} is out of range: {value!r}") from e
        # json accepts NaN/Infinity literals, which are not JSON numbers
        if not math.isfinite(number):
            raise TickerDecodeError(f"Field {name} is not finite: {value!r}")
        values[name] = number

    return TickerSnapshot(**values)


class TickerClient:
    """
    Fetches a single ticker from the exchange.
    Every failure is logged and folded into an absent result.
    """

    def __init__(self, api_base: str = DEFAULT_API_BASE, timeout: float = 10.0,
                 session: Optional[requests.Session] = None):
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    def build_url(self, pair: str) -> Optional[str]:
        """Return the ticker URL for a pair, or None if it cannot be formed."""
        parsed = urlparse(self.api_base)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            return None
        if not pair or not _PAIR_PATTERN.match(pair):
            return None
        return f"{self.api_base}/{pair.upper()}"

    def fetch(self, pair: str) -> Optional[TickerSnapshot]:
        """Fetch the ticker for a pair. Returns None on any failure."""
        return self.fetch_result(pair).snapshot

    def fetch_result(self, pair: str) -> FetchResult:
        """Fetch the ticker for a pair, keeping the failure kind for diagnostics."""
        url = self.build_url(pair)
        if url is None:
            logger.warning(f"Invalid ticker URL for pair {pair!r} (base: {self.api_base})")
            return FetchResult(failure=FetchFailure.INVALID_URL)

        logger.debug(f"Fetching ticker from {url}")
        try:
            response = self._session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"Network error fetching {pair}: {e}")
            return FetchResult(failure=FetchFailure.NETWORK_ERROR)

        if response.status_code != 200:
            logger.warning(f"Ticker API returned status {response.status_code} for {pair}")
            return FetchResult(failure=FetchFailure.BAD_STATUS)

        try:
            snapshot = decode_snapshot(response.json())
        except ValueError as e:
            # TickerDecodeError and the JSON errors from response.json() are both ValueErrors
            logger.warning(f"Failed to decode ticker for {pair}: {e}")
            return FetchResult(failure=FetchFailure.DECODE_ERROR)

        logger.debug(f"Ticker {pair}: {snapshot}")
        return FetchResult(snapshot=snapshot)
