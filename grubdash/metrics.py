"""
Prometheus metrics: entities created/deleted and requests rejected by the validation chains.
"""
from prometheus_client import Counter, Gauge, generate_latest

dishes_created_total = Counter(
    "dishes_created_total",
    "Total dishes created (201)",
)
orders_created_total = Counter(
    "orders_created_total",
    "Total orders created (201)",
)
orders_deleted_total = Counter(
    "orders_deleted_total",
    "Total pending orders deleted (204)",
)

# reason: validation | not_found | lifecycle
requests_rejected_total = Counter(
    "requests_rejected_total",
    "Total requests rejected by validation, existence lookup or lifecycle rules",
    ["resource", "reason"],
)

orders_in_store = Gauge(
    "orders_in_store",
    "Number of orders currently held in the order store",
)


def get_metrics_content_type():
    return "text/plain; charset=utf-8; version=0.0.4"


def get_metrics_bytes():
    return generate_latest()
