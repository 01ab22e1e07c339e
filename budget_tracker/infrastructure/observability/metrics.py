"""Prometheus metrics for monitoring budget usage, notifications and lookups"""

from prometheus_client import Counter, Histogram

# Summary metrics
summary_counter = Counter(
    "budget_summary_total",
    "Total budget summaries computed",
    ["notification"],  # threshold_reached | none
)

percent_used_bucket_counter = Counter(
    "budget_percent_used_bucket",
    "Budget usage at summary time by bucket",
    ["bucket"],  # 0-50%, 50-80%, 80-100%, 100%+
)

# History metrics
history_periods_counter = Counter(
    "budget_history_periods_total",
    "Past periods aggregated for budget history",
)

# Storage lookups
records_lookup_failures_counter = Counter(
    "records_lookup_failures_total",
    "Failed expense record lookups",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_summary(should_notify: bool, percent_used: float) -> None:
    """Record summary metrics for monitoring notification rates and budget usage distribution"""
    notification = "threshold_reached" if should_notify else "none"
    summary_counter.labels(notification=notification).inc()

    if percent_used < 50:
        bucket = "0-50%"
    elif percent_used < 80:
        bucket = "50-80%"
    elif percent_used <= 100:
        bucket = "80-100%"
    else:
        bucket = "100%+"

    percent_used_bucket_counter.labels(bucket=bucket).inc()
