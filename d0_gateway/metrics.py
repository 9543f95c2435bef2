"""
Prometheus metrics for D0 Gateway monitoring
"""
from prometheus_client import Counter, Histogram

from core.logging import get_logger
from core.metrics import REGISTRY


class GatewayMetrics:
    """Prometheus metrics collector for D0 Gateway"""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self.logger = get_logger("gateway.metrics", domain="d0")

        self.api_calls_total = Counter(
            "gateway_api_calls_total",
            "Total number of upstream API calls made through gateway",
            ["provider", "endpoint", "status_code"],
            registry=REGISTRY,
        )

        self.api_latency_seconds = Histogram(
            "gateway_api_latency_seconds",
            "Upstream API call latency in seconds",
            ["provider", "endpoint"],
            buckets=[0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0],
            registry=REGISTRY,
        )

        self.api_errors_total = Counter(
            "gateway_api_errors_total",
            "Total number of failed upstream API calls",
            ["provider", "endpoint", "error_type"],
            registry=REGISTRY,
        )

        self.__class__._initialized = True
        self.logger.info("Gateway metrics initialized")

    def record_api_call(self, provider: str, endpoint: str, status_code: int, duration: float) -> None:
        """Record an upstream API call and its latency"""
        self.api_calls_total.labels(provider=provider, endpoint=endpoint, status_code=str(status_code)).inc()
        self.api_latency_seconds.labels(provider=provider, endpoint=endpoint).observe(duration)

    def record_error(self, provider: str, endpoint: str, error_type: str) -> None:
        """Record a failed upstream API call"""
        self.api_errors_total.labels(provider=provider, endpoint=endpoint, error_type=error_type).inc()
