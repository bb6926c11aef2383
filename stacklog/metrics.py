"""Centralized Prometheus metric definitions for stacklog.

All metric objects are defined here and imported by other modules.
"""

from prometheus_client import Counter, Histogram

# ---- Counters ----

RECORDS_TOTAL = Counter(
    'stacklog_records_total',
    'Total log records created by severity',
    ['severity'],
)

RECORDS_EVICTED_TOTAL = Counter(
    'stacklog_records_evicted_total',
    'Total log records evicted from a full buffer',
)

SUBSCRIBER_ERRORS_TOTAL = Counter(
    'stacklog_subscriber_errors_total',
    'Total exceptions raised by event subscribers',
    ['event'],
)

# ---- Histograms ----

DASHBOARD_REQUEST_DURATION = Histogram(
    'stacklog_dashboard_request_duration_seconds',
    'Duration of dashboard HTTP requests',
    ['method', 'endpoint', 'status_code'],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
)
