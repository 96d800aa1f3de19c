"""ScanAggregate and ProgressReporter under concurrent use."""

import io
import threading
from concurrent.futures import ThreadPoolExecutor

from registro_finder.aggregate import ScanAggregate, ScanTotals
from registro_finder.models import DomainResult, LookupOutcome
from registro_finder.progress import ProgressReporter, notification_line


def result(domain, outcome):
    return DomainResult(domain, outcome)


def test_record_counts_each_kind():
    aggregate = ScanAggregate()
    aggregate.record(result("aa.com.br", LookupOutcome.available()))
    aggregate.record(result("ab.com.br", LookupOutcome.taken("registered")))
    aggregate.record(result("ac.com.br", LookupOutcome.rate_limited()))
    aggregate.record(result("ad.com.br", LookupOutcome.transport_error("timeout")))
    aggregate.record(result("ae.com.br", LookupOutcome.protocol_error("parse error: x")))

    assert aggregate.snapshot() == ScanTotals(checked=5, available=1, taken=1, errors=2, rate_limited=1)
    assert aggregate.available_domains == ["aa.com.br"]
    assert aggregate.error_count == 2
    assert aggregate.rate_limited_count == 1


def test_available_domains_is_a_copy():
    aggregate = ScanAggregate()
    aggregate.record(result("aa.com.br", LookupOutcome.available()))
    aggregate.available_domains.append("bogus")
    assert aggregate.available_domains == ["aa.com.br"]


def test_concurrent_records_from_threads_lose_nothing():
    aggregate = ScanAggregate()
    domains = [f"d{i}.com.br" for i in range(4000)]

    def work(i_domain):
        i, domain = i_domain
        if i % 2 == 0:
            aggregate.record(result(domain, LookupOutcome.available()))
        else:
            aggregate.record(result(domain, LookupOutcome.transport_error("timeout")))

    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(work, enumerate(domains)))

    assert aggregate.checked_count == 4000
    assert aggregate.available_count == 2000
    assert aggregate.error_count == 2000
    available = aggregate.available_domains
    assert len(available) == len(set(available)) == 2000
    assert set(available) == set(domains[::2])


def test_notification_lines():
    available = result("aa.com.br", LookupOutcome.available())
    taken = result("ab.com.br", LookupOutcome.taken("processing"))
    error = result("ac.com.br", LookupOutcome.transport_error("HTTP 500"))
    limited = result("ad.com.br", LookupOutcome.rate_limited())

    assert notification_line(available) == "AVAILABLE: aa.com.br"
    assert notification_line(taken) is None
    assert notification_line(error) is None
    assert notification_line(limited) is None

    assert notification_line(taken, verbose=True) == "   TAKEN: ab.com.br (processing)"
    assert notification_line(error, verbose=True) == "   ERROR: ac.com.br (HTTP 500)"
    assert notification_line(limited, verbose=True) == "   RATE LIMITED: ad.com.br"


def test_reporter_lines_do_not_interleave():
    stream = io.StringIO()
    reporter = ProgressReporter(total=800, verbose=True, enabled=False, stream=stream)
    totals = ScanTotals()
    barrier = threading.Barrier(8)

    def work(t):
        barrier.wait()
        for i in range(100):
            reporter.on_complete(result(f"t{t}x{i}.com.br", LookupOutcome.available()), totals)

    threads = [threading.Thread(target=work, args=(t,)) for t in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    reporter.close(totals)

    lines = stream.getvalue().splitlines()
    assert reporter.completed == 800
    assert len(lines) == 800
    assert all(line.startswith("AVAILABLE: t") and line.endswith(".com.br") for line in lines)


def test_reporter_quiet_mode_prints_only_available():
    stream = io.StringIO()
    with ProgressReporter(total=3, enabled=False, stream=stream) as reporter:
        reporter.on_complete(result("aa.com.br", LookupOutcome.available()), ScanTotals(available=1))
        reporter.on_complete(result("ab.com.br", LookupOutcome.taken("registered")), ScanTotals(available=1))
        reporter.on_complete(result("ac.com.br", LookupOutcome.transport_error("timeout")), ScanTotals(available=1))

    assert stream.getvalue() == "AVAILABLE: aa.com.br\n"
    assert reporter.completed == 3
