#!/usr/bin/env python3
"""
Result store (DuckDB)

Writes every checked domain with its classification so a scan can be
inspected after the fact.
"""

from pathlib import Path
from typing import Union

import duckdb

from .models import DomainResult


class ResultStore:
    """Persists DomainResults to a DuckDB file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._conn = None  # Lazy
        self._init_db()

    def _get_conn(self):
        """Get or create DuckDB connection (read-write)."""
        if self._conn is None:
            self._conn = duckdb.connect(str(self.path))
        return self._conn

    def _init_db(self):
        conn = self._get_conn()

        conn.execute("""
            CREATE TABLE IF NOT EXISTS domain_checks (
                domain VARCHAR PRIMARY KEY,
                status VARCHAR NOT NULL,
                detail VARCHAR,
                error VARCHAR,
                checked_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

    def save_results(self, results: list[DomainResult]):
        """Save batch of results, replacing earlier checks of the same domain."""
        if not results:
            return

        conn = self._get_conn()
        conn.executemany(
            """
            INSERT OR REPLACE INTO domain_checks (domain, status, detail, error, checked_at)
            VALUES (?, ?, ?, ?, CURRENT_TIMESTAMP)
            """,
            [(r.domain, r.status_label, r.status, r.error) for r in results]
        )

    def get_stats(self) -> dict:
        """Count stored results by status, plus 'total'."""
        conn = self._get_conn()
        stats = {}

        for row in conn.execute(
            "SELECT status, COUNT(*) FROM domain_checks GROUP BY status"
        ).fetchall():
            stats[row[0]] = row[1]

        stats['total'] = sum(stats.values())

        return stats

    def get_available(self) -> list[str]:
        conn = self._get_conn()
        rows = conn.execute(
            "SELECT domain FROM domain_checks WHERE status = 'available' ORDER BY domain"
        ).fetchall()
        return [row[0] for row in rows]

    def close(self):
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
