#!/usr/bin/env python3
"""
Result types shared by the checker, aggregator and sinks.

A lookup produces exactly one LookupOutcome per candidate:
available, taken, rate_limited, transport_error or protocol_error.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class OutcomeKind(Enum):
    """Classification of a single availability lookup."""
    AVAILABLE = "available"
    TAKEN = "taken"
    RATE_LIMITED = "rate_limited"
    TRANSPORT_ERROR = "transport_error"
    PROTOCOL_ERROR = "protocol_error"


@dataclass(frozen=True)
class LookupOutcome:
    kind: OutcomeKind
    detail: Optional[str] = None
    expires_at: Optional[str] = None

    @classmethod
    def available(cls) -> "LookupOutcome":
        return cls(OutcomeKind.AVAILABLE, "available")

    @classmethod
    def taken(cls, detail: str, expires_at: Optional[str] = None) -> "LookupOutcome":
        return cls(OutcomeKind.TAKEN, detail, expires_at)

    @classmethod
    def rate_limited(cls) -> "LookupOutcome":
        return cls(OutcomeKind.RATE_LIMITED, "rate limited")

    @classmethod
    def transport_error(cls, message: str) -> "LookupOutcome":
        return cls(OutcomeKind.TRANSPORT_ERROR, message)

    @classmethod
    def protocol_error(cls, message: str) -> "LookupOutcome":
        return cls(OutcomeKind.PROTOCOL_ERROR, message)

    @property
    def is_available(self) -> bool:
        return self.kind is OutcomeKind.AVAILABLE

    @property
    def is_error(self) -> bool:
        return self.kind in (OutcomeKind.TRANSPORT_ERROR, OutcomeKind.PROTOCOL_ERROR)

    @property
    def is_rate_limited(self) -> bool:
        return self.kind is OutcomeKind.RATE_LIMITED


@dataclass(frozen=True)
class DomainResult:
    """Result of a domain check."""
    domain: str
    outcome: LookupOutcome

    @property
    def available(self) -> bool:
        return self.outcome.is_available

    @property
    def status(self) -> Optional[str]:
        """Human readable status for available/taken results."""
        if self.outcome.kind in (OutcomeKind.AVAILABLE, OutcomeKind.TAKEN):
            return self.outcome.detail
        return None

    @property
    def error(self) -> Optional[str]:
        if self.outcome.is_error or self.outcome.is_rate_limited:
            return self.outcome.detail
        return None

    @property
    def status_label(self) -> str:
        """Short status word: 'available', 'taken', 'rate_limited' or 'error'."""
        if self.outcome.is_error:
            return "error"
        return self.outcome.kind.value


@dataclass
class AvailResponse:
    """
    Registro.br availability response.
    status: 0 = available, 2 = registered, 3 = processing, 4 = unavailable
    """
    status: int
    fqdn: str
    publication_status: Optional[str] = None
    expires_at: Optional[str] = None

    @classmethod
    def from_json(cls, payload: Any) -> "AvailResponse":
        """Build from a decoded JSON body, raising ValueError on bad shape."""
        if not isinstance(payload, dict):
            raise ValueError(f"expected JSON object, got {type(payload).__name__}")

        status = payload.get("status")
        # bool is an int subclass
        if isinstance(status, bool) or not isinstance(status, int):
            raise ValueError(f"invalid 'status': {status!r}")

        fqdn = payload.get("fqdn")
        if not isinstance(fqdn, str):
            raise ValueError(f"invalid 'fqdn': {fqdn!r}")

        publication_status = payload.get("publication-status")
        expires_at = payload.get("expires-at")
        for name, value in (("publication-status", publication_status), ("expires-at", expires_at)):
            if value is not None and not isinstance(value, str):
                raise ValueError(f"invalid '{name}': {value!r}")

        return cls(
            status=status,
            fqdn=fqdn,
            publication_status=publication_status,
            expires_at=expires_at
        )
