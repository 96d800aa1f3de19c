#!/usr/bin/env python3
"""
Registro.br availability checker.

One GET per candidate against the avail endpoint, no retries.
Every failure is classified into a LookupOutcome instead of raised:

- timeout / connection error      -> transport_error
- HTTP 429                         -> rate_limited (body not parsed)
- other non-2xx                    -> transport_error "HTTP <code>"
- 2xx with unparseable body        -> protocol_error
- 2xx: status 0 available, 2 registered, 3 processing, 4 unavailable
"""

import logging
from typing import Optional

import httpx

from .models import AvailResponse, DomainResult, LookupOutcome


logger = logging.getLogger(__name__)

# Configuration
AVAIL_API_URL = "https://registro.br/v2/ajax/avail/raw/"
USER_AGENT = "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7)"
DEFAULT_SUFFIX = ".com.br"
TIMEOUT = 10.0


def _expiry_date(expires_at: str) -> str:
    """Date portion of an ISO timestamp ('2030-01-01T00:00:00' -> '2030-01-01')."""
    return expires_at.split("T", 1)[0]


def classify_status(avail: AvailResponse) -> LookupOutcome:
    """Map the registry status code to an outcome."""
    if avail.status == 0:
        return LookupOutcome.available()
    if avail.status == 2:
        if avail.expires_at:
            return LookupOutcome.taken(
                f"registered (expires: {_expiry_date(avail.expires_at)})",
                expires_at=avail.expires_at
            )
        return LookupOutcome.taken("registered")
    if avail.status == 3:
        return LookupOutcome.taken("processing")
    if avail.status == 4:
        return LookupOutcome.taken("unavailable")
    return LookupOutcome.taken(f"status {avail.status}")


def _describe(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


class AvailabilityChecker:
    """Checks a single candidate per call. Holds no mutable state."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        suffix: str = DEFAULT_SUFFIX,
        timeout: float = TIMEOUT,
        endpoint: str = AVAIL_API_URL,
        user_agent: str = USER_AGENT
    ):
        self.client = client
        self.suffix = suffix
        self.timeout = timeout
        self.endpoint = endpoint
        self.user_agent = user_agent

    def url_for(self, domain: str) -> str:
        return f"{self.endpoint}{domain}"

    async def check(self, candidate: str) -> DomainResult:
        """Look up candidate + suffix and classify the response."""
        domain = f"{candidate}{self.suffix}"
        outcome = await self._lookup(domain)
        logger.debug("%s -> %s (%s)", domain, outcome.kind.value, outcome.detail)
        return DomainResult(domain=domain, outcome=outcome)

    async def _lookup(self, domain: str) -> LookupOutcome:
        try:
            response = await self.client.get(
                self.url_for(domain),
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout
            )
        except httpx.TimeoutException:
            return LookupOutcome.transport_error("timeout")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return LookupOutcome.transport_error(_describe(e))

        if response.status_code == 429:
            return LookupOutcome.rate_limited()

        if not response.is_success:
            return LookupOutcome.transport_error(f"HTTP {response.status_code}")

        try:
            avail = AvailResponse.from_json(response.json())
        except ValueError as e:
            return LookupOutcome.protocol_error(f"parse error: {_describe(e)}")

        return classify_status(avail)


async def check_domain(
    client: httpx.AsyncClient,
    candidate: str,
    suffix: str = DEFAULT_SUFFIX,
    timeout: Optional[float] = None
) -> DomainResult:
    """One-off lookup without building a checker first."""
    checker = AvailabilityChecker(client, suffix, TIMEOUT if timeout is None else timeout)
    return await checker.check(candidate)
