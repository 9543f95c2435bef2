"""
Test D0 Gateway metrics implementation
"""
import pytest

from core.metrics import REGISTRY
from d0_gateway.metrics import GatewayMetrics


class TestGatewayMetrics:
    @pytest.fixture
    def gateway_metrics(self):
        # Singleton: collectors are registered on the shared registry once
        return GatewayMetrics()

    def test_singleton(self, gateway_metrics):
        assert GatewayMetrics() is gateway_metrics

    def test_api_call_counts_tracked(self, gateway_metrics):
        labels = {"provider": "catalog", "endpoint": "/inventory", "status_code": "200"}
        before = REGISTRY.get_sample_value("gateway_api_calls_total", labels) or 0

        gateway_metrics.record_api_call("catalog", "/inventory", 200, 0.25)
        gateway_metrics.record_api_call("catalog", "/inventory", 200, 1.5)

        assert REGISTRY.get_sample_value("gateway_api_calls_total", labels) == before + 2

    def test_latency_histogram_buckets(self, gateway_metrics):
        labels = {"provider": "location", "endpoint": "/locations/search"}
        before = REGISTRY.get_sample_value("gateway_api_latency_seconds_count", labels) or 0

        gateway_metrics.record_api_call("location", "/locations/search", 200, 0.05)

        assert REGISTRY.get_sample_value("gateway_api_latency_seconds_count", labels) == before + 1
        assert REGISTRY.get_sample_value("gateway_api_latency_seconds_bucket", {**labels, "le": "0.1"}) >= 1

    def test_errors_tracked_by_type(self, gateway_metrics):
        labels = {"provider": "account", "endpoint": "/billingAccounts", "error_type": "timeout"}
        before = REGISTRY.get_sample_value("gateway_api_errors_total", labels) or 0

        gateway_metrics.record_error("account", "/billingAccounts", "timeout")

        assert REGISTRY.get_sample_value("gateway_api_errors_total", labels) == before + 1
