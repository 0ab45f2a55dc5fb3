# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics — single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""
from prometheus_client import Counter, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "teams_requests_total",
    "Total HTTP requests to the teams API",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "teams_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "teams_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Sequence allocation ──
SEQUENCE_ALLOCATIONS = Counter(
    "teams_sequence_allocations_total",
    "Identifiers issued by the sequence allocator",
    ["namespace"],
)
ALLOCATION_FAILURES = Counter(
    "teams_sequence_allocation_failures_total",
    "Sequence increments that could not be applied",
    ["namespace"],
)

# ── Legacy import ──
IMPORT_RUNS = Counter(
    "teams_import_runs_total",
    "Legacy snapshot imports started",
)
IMPORT_RECORDS = Counter(
    "teams_import_records_total",
    "Imported legacy records by kind and outcome",
    ["kind", "outcome"],
)
IMPORT_UNRESOLVED_REFERENCES = Counter(
    "teams_import_unresolved_references_total",
    "Legacy references passed through without a translation",
    ["field"],
)
IMPORT_DURATION = Histogram(
    "teams_import_duration_seconds",
    "Wall time of one legacy import run",
    buckets=[0.05, 0.1, 0.5, 1, 2, 5, 10, 30],
)
