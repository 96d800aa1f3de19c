#!/usr/bin/env python3
"""
Live progress for a running scan.

Completions arrive in any order from concurrent checks; every call
goes through one lock so bar updates and notification lines never
interleave.
"""

import threading
from typing import Optional, TextIO

from tqdm import tqdm

from .aggregate import ScanTotals
from .models import DomainResult, OutcomeKind


BAR_FORMAT = "{l_bar}{bar:40}| {n_fmt}/{total_fmt} [{elapsed}<{remaining}] {postfix}"


def notification_line(result: DomainResult, verbose: bool = False) -> Optional[str]:
    """Line to print for a completed check, or None when it stays silent."""
    kind = result.outcome.kind
    if kind is OutcomeKind.AVAILABLE:
        return f"AVAILABLE: {result.domain}"
    if not verbose:
        return None
    if kind is OutcomeKind.RATE_LIMITED:
        return f"   RATE LIMITED: {result.domain}"
    if result.outcome.is_error:
        return f"   ERROR: {result.domain} ({result.outcome.detail})"
    return f"   TAKEN: {result.domain} ({result.outcome.detail or 'registered'})"


class ProgressReporter:
    """tqdm bar plus per-domain notification lines."""

    def __init__(
        self,
        total: int,
        verbose: bool = False,
        enabled: bool = True,
        stream: Optional[TextIO] = None
    ):
        self.total = total
        self.verbose = verbose
        self.stream = stream
        self._lock = threading.Lock()
        self._completed = 0
        self._bar = tqdm(
            total=total,
            desc="Checking",
            unit="domain",
            bar_format=BAR_FORMAT,
            disable=not enabled,
            file=stream,
            dynamic_ncols=True
        )
        self._bar.set_postfix_str("0 available", refresh=False)

    @property
    def completed(self) -> int:
        with self._lock:
            return self._completed

    def on_complete(self, result: DomainResult, totals: ScanTotals):
        """Record one finished check."""
        line = notification_line(result, self.verbose)
        with self._lock:
            if line is not None:
                tqdm.write(line, file=self.stream)
            self._completed += 1
            self._bar.update(1)
            self._bar.set_postfix_str(f"{totals.available} available")

    def close(self, totals: Optional[ScanTotals] = None):
        with self._lock:
            if totals is not None:
                self._bar.set_postfix_str(
                    f"{totals.available} available, {totals.errors} errors"
                )
            self._bar.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
