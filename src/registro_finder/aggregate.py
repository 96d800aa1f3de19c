#!/usr/bin/env python3
"""
Shared scan totals.

One ScanAggregate is handed to every in-flight check. Mutation is
increment/append only and always happens under the lock.
"""

import threading
from dataclasses import dataclass

from .models import DomainResult, OutcomeKind


@dataclass(frozen=True)
class ScanTotals:
    """Point-in-time copy of the running counters."""
    checked: int = 0
    available: int = 0
    taken: int = 0
    errors: int = 0
    rate_limited: int = 0


class ScanAggregate:
    """Thread-safe running counters plus the list of available domains."""

    def __init__(self):
        self._lock = threading.Lock()
        self._checked = 0
        self._available = 0
        self._taken = 0
        self._errors = 0
        self._rate_limited = 0
        self._available_domains: list[str] = []

    def record(self, result: DomainResult):
        """Apply one completed check."""
        kind = result.outcome.kind
        with self._lock:
            self._checked += 1
            if kind is OutcomeKind.AVAILABLE:
                self._available += 1
                self._available_domains.append(result.domain)
            elif kind is OutcomeKind.TAKEN:
                self._taken += 1
            elif kind is OutcomeKind.RATE_LIMITED:
                self._rate_limited += 1
            else:
                self._errors += 1

    def snapshot(self) -> ScanTotals:
        with self._lock:
            return ScanTotals(
                checked=self._checked,
                available=self._available,
                taken=self._taken,
                errors=self._errors,
                rate_limited=self._rate_limited
            )

    @property
    def checked_count(self) -> int:
        with self._lock:
            return self._checked

    @property
    def available_count(self) -> int:
        with self._lock:
            return self._available

    @property
    def taken_count(self) -> int:
        with self._lock:
            return self._taken

    @property
    def error_count(self) -> int:
        with self._lock:
            return self._errors

    @property
    def rate_limited_count(self) -> int:
        with self._lock:
            return self._rate_limited

    @property
    def available_domains(self) -> list[str]:
        """Copy of the available domains, in completion order."""
        with self._lock:
            return list(self._available_domains)

    def __str__(self) -> str:
        totals = self.snapshot()
        return (
            f"checked={totals.checked} available={totals.available} "
            f"taken={totals.taken} errors={totals.errors} "
            f"rate_limited={totals.rate_limited}"
        )
