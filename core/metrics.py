"""
Core metrics collection for the product inventory service using Prometheus
"""
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, Counter, Histogram, Info, generate_latest

from core.config import settings
from core.logging import get_logger

# Create a global registry for the application
REGISTRY = CollectorRegistry()

# Application info
app_info = Info("inventory_app", "Product inventory application information", registry=REGISTRY)

# Request metrics
request_count = Counter(
    "inventory_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
    registry=REGISTRY,
)

request_duration = Histogram(
    "inventory_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.01, 0.05, 0.1, 0.5, 1.0, 2.5, 5.0, 10.0),
    registry=REGISTRY,
)

# Error metrics
error_count = Counter(
    "inventory_errors_total",
    "Total number of errors",
    ["error_type", "domain"],
    registry=REGISTRY,
)

# Enrichment metrics
account_lookups = Counter(
    "inventory_account_lookups_total",
    "Billing account lookups by outcome",
    ["outcome"],
    registry=REGISTRY,
)

location_enrichments = Counter(
    "inventory_location_enrichments_total",
    "Location enrichment passes by outcome",
    ["outcome"],
    registry=REGISTRY,
)

records_returned = Histogram(
    "inventory_records_returned",
    "Number of inventory records returned per request",
    ["service_type"],
    buckets=(0, 1, 5, 10, 25, 50, 100, 250, 500),
    registry=REGISTRY,
)


class MetricsCollector:
    """Helper class for collecting metrics"""

    def __init__(self):
        self.logger = get_logger("metrics")

        app_info.info({"version": settings.app_version, "environment": settings.environment})

    def track_request(self, method: str, endpoint: str, status: int, duration: float):
        """Track HTTP request metrics"""
        request_count.labels(method=method, endpoint=endpoint, status=str(status)).inc()
        request_duration.labels(method=method, endpoint=endpoint).observe(duration)

    def track_error(self, error_type: str, domain: str):
        """Track errors"""
        error_count.labels(error_type=error_type, domain=domain).inc()

    def track_account_lookup(self, outcome: str):
        """Track one billing account lookup (resolved, empty or failed)"""
        account_lookups.labels(outcome=outcome).inc()

    def track_location_enrichment(self, outcome: str):
        """Track one location enrichment pass (enriched, skipped or failed)"""
        location_enrichments.labels(outcome=outcome).inc()

    def track_records_returned(self, service_type: str, count: int):
        records_returned.labels(service_type=service_type).observe(count)

    def get_metrics(self) -> bytes:
        """Get current metrics in Prometheus format"""
        return generate_latest(REGISTRY)


# Global metrics collector instance
metrics = MetricsCollector()


def get_metrics_collector() -> MetricsCollector:
    """Get the global metrics collector instance"""
    return metrics


def get_metrics_response() -> tuple[bytes, str]:
    """Get metrics response for Prometheus endpoint"""
    return metrics.get_metrics(), CONTENT_TYPE_LATEST
