#!/usr/bin/env python3
"""
Scan configuration.

Environment Variables (defaults, overridden by command line flags):
    REGISTRO_SUFFIX: Domain suffix (default .com.br)
    REGISTRO_WORKERS: Concurrent lookups (default 20)
    REGISTRO_TIMEOUT: Per-request timeout in seconds (default 10)
    REGISTRO_DIGITS: Candidate length (default 2)
    REGISTRO_DB: DuckDB file to store every result (default: unset)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .checker import DEFAULT_SUFFIX, TIMEOUT
from .combinations import CharsetMode


DEFAULT_WORKERS = 20
DEFAULT_DIGITS = 2
MAX_DIGITS = 4


class FinderError(Exception):
    """Invalid configuration or setup failure."""


@dataclass
class ScanConfig:
    """Everything a scan needs besides the HTTP client."""
    suffix: str = DEFAULT_SUFFIX
    workers: int = DEFAULT_WORKERS
    timeout: float = TIMEOUT
    digits: int = DEFAULT_DIGITS
    mode: CharsetMode = CharsetMode.ALPHANUMERIC
    check: Optional[list[str]] = None
    output: Optional[Path] = None
    db_path: Optional[Path] = None
    verbose: bool = False
    deadline: Optional[float] = None
    progress: bool = True

    @classmethod
    def from_env(cls) -> "ScanConfig":
        """Defaults with REGISTRO_* environment overrides."""
        db = os.environ.get("REGISTRO_DB")
        try:
            return cls(
                suffix=os.environ.get("REGISTRO_SUFFIX", DEFAULT_SUFFIX),
                workers=int(os.environ.get("REGISTRO_WORKERS", DEFAULT_WORKERS)),
                timeout=float(os.environ.get("REGISTRO_TIMEOUT", TIMEOUT)),
                digits=int(os.environ.get("REGISTRO_DIGITS", DEFAULT_DIGITS)),
                db_path=Path(db) if db else None
            )
        except ValueError as e:
            raise FinderError(f"Invalid REGISTRO_* environment value: {e}") from e

    def validate(self):
        if self.workers < 1:
            raise FinderError(f"workers must be >= 1, got {self.workers}")
        if self.timeout <= 0:
            raise FinderError(f"timeout must be > 0, got {self.timeout}")
        if self.check is not None and not self.check:
            raise FinderError("--check has no entries")
        if self.check is None and not 1 <= self.digits <= MAX_DIGITS:
            raise FinderError(f"digits must be between 1 and {MAX_DIGITS}, got {self.digits}")
        if self.deadline is not None and self.deadline <= 0:
            raise FinderError(f"deadline must be > 0, got {self.deadline}")
