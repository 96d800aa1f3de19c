#!/usr/bin/env python3
"""Summary text and the plain-text list of available domains."""

from pathlib import Path
from typing import Iterable, Union

from .aggregate import ScanTotals


def format_summary(totals: ScanTotals, available_domains: list[str]) -> str:
    """Final summary block printed after the scan."""
    lines = [
        "=" * 30,
        "SUMMARY",
        "=" * 30,
        f"Total checked:    {totals.checked:,}",
        f"Available:        {totals.available:,}",
        f"Taken:            {totals.taken:,}",
        f"Rate limited:     {totals.rate_limited:,}",
        f"Errors:           {totals.errors:,}",
    ]
    if available_domains:
        lines.append("")
        lines.append("AVAILABLE DOMAINS:")
        lines.extend(f"   - {domain}" for domain in available_domains)
    return "\n".join(lines)


def write_available(path: Union[str, Path], domains: Iterable[str]) -> bool:
    """
    Write one domain per line.

    Returns False without touching the filesystem when there is nothing to write.
    OSError from creating the file propagates to the caller.
    """
    domains = list(domains)
    if not domains:
        return False

    with open(path, "w", encoding="utf-8") as f:
        for domain in domains:
            f.write(f"{domain}\n")
    return True
