# Registro.br Domain Finder - Core Components
from .aggregate import ScanAggregate, ScanTotals
from .checker import AvailabilityChecker, check_domain, classify_status
from .combinations import CharsetMode, generate_combinations
from .config import FinderError, ScanConfig
from .database import ResultStore
from .models import AvailResponse, DomainResult, LookupOutcome, OutcomeKind
from .progress import ProgressReporter
from .scanner import Scanner, ScanReport, run_scan

__all__ = [
    'AvailResponse',
    'AvailabilityChecker',
    'CharsetMode',
    'DomainResult',
    'FinderError',
    'LookupOutcome',
    'OutcomeKind',
    'ProgressReporter',
    'ResultStore',
    'ScanAggregate',
    'ScanConfig',
    'ScanReport',
    'ScanTotals',
    'Scanner',
    'check_domain',
    'classify_status',
    'generate_combinations',
    'run_scan',
]
