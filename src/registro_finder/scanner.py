#!/usr/bin/env python3
"""
Bounded-concurrency scan over a candidate list.

Each candidate gets exactly one lookup. A fixed pool of `concurrency`
worker tasks drains the candidate list, so at most that many lookups
are in flight and the number of tasks does not grow with the list.
Completed results are recorded in the shared ScanAggregate and
forwarded to the ProgressReporter before the worker moves on.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Optional, Protocol

import httpx

from .aggregate import ScanAggregate, ScanTotals
from .checker import AvailabilityChecker
from .combinations import generate_combinations
from .config import DEFAULT_WORKERS, ScanConfig
from .database import ResultStore
from .models import DomainResult
from .output import format_summary, write_available
from .progress import ProgressReporter


logger = logging.getLogger(__name__)


class Checker(Protocol):
    async def check(self, candidate: str) -> DomainResult:
        ...


@dataclass
class ScanReport:
    """All results of a finished scan plus the aggregate they were recorded in."""
    results: list[DomainResult]
    aggregate: ScanAggregate

    @property
    def totals(self) -> ScanTotals:
        return self.aggregate.snapshot()

    @property
    def available_domains(self) -> list[str]:
        """Available domains in candidate order."""
        return [r.domain for r in self.results if r.available]

    def __len__(self) -> int:
        return len(self.results)


async def run_scan(
    candidates: list[str],
    checker: Checker,
    concurrency: int = DEFAULT_WORKERS,
    aggregate: Optional[ScanAggregate] = None,
    reporter: Optional[ProgressReporter] = None,
    deadline: Optional[float] = None
) -> ScanReport:
    """
    Check every candidate with at most `concurrency` lookups in flight.

    Args:
        candidates: Labels to check (suffix is added by the checker)
        checker: Object with `async check(candidate) -> DomainResult`
        concurrency: Maximum simultaneous lookups
        aggregate: Shared totals (a fresh one is created when omitted)
        reporter: Receives every completion
        deadline: Optional overall limit in seconds; asyncio.TimeoutError when exceeded

    Returns:
        ScanReport with exactly len(candidates) results
    """
    if concurrency < 1:
        raise ValueError(f"concurrency must be >= 1, got {concurrency}")

    if aggregate is None:
        aggregate = ScanAggregate()
    results: list[Optional[DomainResult]] = [None] * len(candidates)
    pending = iter(enumerate(candidates))

    # Each worker pulls the next candidate as soon as its previous lookup is done
    async def worker():
        for index, candidate in pending:
            result = await checker.check(candidate)
            aggregate.record(result)
            if reporter is not None:
                reporter.on_complete(result, aggregate.snapshot())
            results[index] = result

    workers = [asyncio.ensure_future(worker()) for _ in range(min(concurrency, len(candidates)))]
    try:
        if deadline is None:
            await asyncio.gather(*workers)
        else:
            await asyncio.wait_for(asyncio.gather(*workers), timeout=deadline)
    finally:
        for task in workers:
            task.cancel()

    return ScanReport(results=results, aggregate=aggregate)


class Scanner:
    """Runs a full scan from a ScanConfig: lookups, progress, summary, sinks."""

    def __init__(self, config: ScanConfig, client: Optional[httpx.AsyncClient] = None):
        config.validate()
        self.config = config
        self._client = client

        # Stats
        self.start_time = None
        self.elapsed = 0.0

    def candidates(self) -> list[str]:
        if self.config.check is not None:
            return list(self.config.check)
        return generate_combinations(self.config.digits, self.config.mode)

    def _create_client(self) -> httpx.AsyncClient:
        limits = httpx.Limits(
            max_connections=self.config.workers,
            max_keepalive_connections=self.config.workers
        )
        return httpx.AsyncClient(timeout=self.config.timeout, limits=limits)

    async def run(self) -> ScanReport:
        """Run the scan and write the configured outputs."""
        config = self.config
        candidates = self.candidates()

        print("Registro.br Domain Finder")
        print("=" * 30)
        print(f"Suffix: {config.suffix} | Workers: {config.workers} | Timeout: {config.timeout:g}s\n")
        print(f"Total domains to check: {len(candidates):,}\n")

        self.start_time = time.perf_counter()
        owns_client = self._client is None
        client = self._client if self._client is not None else self._create_client()
        aggregate = ScanAggregate()
        reporter = ProgressReporter(
            total=len(candidates),
            verbose=config.verbose,
            enabled=config.progress
        )

        try:
            checker = AvailabilityChecker(client, suffix=config.suffix, timeout=config.timeout)
            report = await run_scan(
                candidates,
                checker,
                concurrency=config.workers,
                aggregate=aggregate,
                reporter=reporter,
                deadline=config.deadline
            )
        finally:
            reporter.close(aggregate.snapshot())
            if owns_client:
                await client.aclose()

        self.elapsed = time.perf_counter() - self.start_time
        logger.info("Scan finished in %.1fs: %s", self.elapsed, aggregate)

        self.print_summary(report)
        self.save(report)
        return report

    def print_summary(self, report: ScanReport):
        print()
        print(format_summary(report.totals, report.available_domains))
        if self.elapsed > 0:
            print(f"\nTime:             {self.elapsed:.1f}s ({len(report) / self.elapsed:.0f} domains/sec)")

    def save(self, report: ScanReport):
        """Write the available list and the result store, when configured."""
        if self.config.output is not None:
            if write_available(self.config.output, report.available_domains):
                print(f"\nResults saved to: {self.config.output}")

        if self.config.db_path is not None:
            with ResultStore(self.config.db_path) as store:
                store.save_results(report.results)
                stats = store.get_stats()
            print(f"Stored {len(report):,} results in {self.config.db_path} ({stats['total']:,} total)")
