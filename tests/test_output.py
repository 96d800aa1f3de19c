"""Summary formatting, output file and DuckDB result store."""

from registro_finder.aggregate import ScanTotals
from registro_finder.database import ResultStore
from registro_finder.models import DomainResult, LookupOutcome
from registro_finder.output import format_summary, write_available


def test_write_available_one_per_line(tmp_path):
    path = tmp_path / "free.txt"
    assert write_available(path, ["aa.com.br", "9z.com.br"]) is True
    assert path.read_text() == "aa.com.br\n9z.com.br\n"


def test_write_available_skips_empty(tmp_path):
    path = tmp_path / "free.txt"
    assert write_available(path, []) is False
    assert not path.exists()


def test_summary_lists_available():
    text = format_summary(
        ScanTotals(checked=10, available=2, taken=5, errors=2, rate_limited=1),
        ["aa.com.br", "ab.com.br"]
    )
    assert "Total checked:    10" in text
    assert "Available:        2" in text
    assert "Rate limited:     1" in text
    assert "Errors:           2" in text
    assert "   - aa.com.br" in text
    assert "AVAILABLE DOMAINS:" in text


def test_summary_without_available():
    text = format_summary(ScanTotals(checked=3, taken=3), [])
    assert "AVAILABLE DOMAINS:" not in text


def test_result_store_roundtrip(tmp_path):
    results = [
        DomainResult("aa.com.br", LookupOutcome.available()),
        DomainResult("ab.com.br", LookupOutcome.taken("registered (expires: 2030-01-01)", "2030-01-01T00:00:00")),
        DomainResult("ac.com.br", LookupOutcome.rate_limited()),
        DomainResult("ad.com.br", LookupOutcome.transport_error("timeout")),
        DomainResult("ae.com.br", LookupOutcome.protocol_error("parse error: bad")),
    ]

    with ResultStore(tmp_path / "checks.duckdb") as store:
        store.save_results(results)
        # Re-saving replaces instead of duplicating
        store.save_results(results[:1])
        stats = store.get_stats()
        available = store.get_available()

    assert stats == {"available": 1, "taken": 1, "rate_limited": 1, "error": 2, "total": 5}
    assert available == ["aa.com.br"]


def test_result_store_persists_between_connections(tmp_path):
    path = tmp_path / "checks.duckdb"
    with ResultStore(path) as store:
        store.save_results([DomainResult("aa.com.br", LookupOutcome.available())])
        store.save_results([])

    with ResultStore(path) as store:
        assert store.get_stats()["total"] == 1
