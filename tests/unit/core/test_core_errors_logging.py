"""
Tests for core exceptions, structured logging and metrics
"""
import json
import logging

import pytest

from core.exceptions import (
    ConfigurationError,
    ExternalAPIError,
    InventoryServiceError,
    NotFoundError,
    NotSupportedError,
    ValidationError,
)
from core.logging import HANDLER_NAME, CustomJsonFormatter, LoggerAdapter, get_logger, setup_logging
from core.metrics import REGISTRY, get_metrics_collector, get_metrics_response
from d0_gateway.exceptions import APIProviderError, UpstreamTimeoutError
from d2_inventory.exceptions import CatalogUnavailableError, InventoryNotFoundError

pytestmark = [pytest.mark.unit]


class TestExceptions:
    def test_base_error_defaults(self):
        error = InventoryServiceError("boom")

        assert error.status_code == 500
        assert error.error_code == "InventoryServiceError"
        assert error.to_dict() == {"error": "InventoryServiceError", "message": "boom", "details": {}}

    def test_validation_error(self):
        error = ValidationError("bad page", field="pageSize")

        assert error.status_code == 400
        assert error.to_dict()["details"] == {"field": "pageSize"}

    def test_not_found(self):
        error = NotFoundError("Inventory", "C1")

        assert error.status_code == 404
        assert error.message == "Inventory not found: C1"

    def test_not_supported(self):
        error = NotSupportedError("Service type", "Port")

        assert error.status_code == 501
        assert error.error_code == "NOT_IMPLEMENTED"

    def test_external_api_error_is_bad_gateway(self):
        error = ExternalAPIError("catalog", "down", status_code=503)

        assert error.status_code == 502
        assert error.details["api_status_code"] == 503

    def test_configuration_error(self):
        assert ConfigurationError("missing", setting="catalog_base_url").details == {"setting": "catalog_base_url"}

    def test_gateway_errors_share_the_base(self):
        error = UpstreamTimeoutError("account", 10.0)

        assert isinstance(error, APIProviderError)
        assert isinstance(error, InventoryServiceError)
        assert error.upstream_message == "Request timed out after 10.0s"
        assert error.message == "account: Request timed out after 10.0s"

    def test_inventory_errors(self):
        unavailable = CatalogUnavailableError("empty body", upstream_status=503, upstream_error="down")
        not_found = InventoryNotFoundError(["C1", "C2"])

        assert unavailable.status_code == 502
        assert unavailable.error_code == "CATALOG_UNAVAILABLE"
        assert unavailable.details["response_body"] == "down"
        assert not_found.status_code == 404
        assert "C1,C2" in not_found.message


class TestLogging:
    def test_get_logger_drops_empty_context(self):
        logger = get_logger("test.logger", domain="d1", tracking_id=None)

        assert isinstance(logger, LoggerAdapter)
        assert logger.extra == {"domain": "d1"}

    def test_with_context_adds_fields(self):
        logger = get_logger("test.logger", domain="d1").with_context(tracking_id="trk-1", ignored=None)

        assert logger.extra == {"domain": "d1", "tracking_id": "trk-1"}

    def test_context_reaches_log_records(self, caplog):
        logger = get_logger("test.context", domain="d2", tracking_id="trk-9")

        with caplog.at_level(logging.INFO, logger="test.context"):
            logger.info("Resolving accounts")

        [record] = caplog.records
        assert record.tracking_id == "trk-9"
        assert record.domain == "d2"

    def test_call_site_extra_overrides_bound_context(self, caplog):
        logger = get_logger("test.override", domain="d2")

        with caplog.at_level(logging.INFO, logger="test.override"):
            logger.info("Override", extra={"domain": "d0", "attempt": 2})

        [record] = caplog.records
        assert record.domain == "d0"
        assert record.attempt == 2

    def test_setup_logging_replaces_its_own_handler(self):
        root = logging.getLogger()
        try:
            setup_logging(level="debug", log_format="text")
            setup_logging(level="debug", log_format="text")

            handlers = [h for h in root.handlers if h.get_name() == HANDLER_NAME]
            assert len(handlers) == 1
            assert not isinstance(handlers[0].formatter, CustomJsonFormatter)
            assert root.level == logging.DEBUG
            assert logging.getLogger("httpx").level == logging.WARNING
        finally:
            setup_logging()

    def test_json_formatter_fields(self):
        formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
        record = logging.LogRecord("inventory.test", logging.WARNING, __file__, 1, "hello %s", ("world",), None)
        record.tracking_id = "trk-2"

        data = json.loads(formatter.format(record))

        assert data["message"] == "hello world"
        assert data["level"] == "WARNING"
        assert data["logger"] == "inventory.test"
        assert data["tracking_id"] == "trk-2"
        assert data["app"] == "ProductInventory"
        assert "timestamp" in data


class TestMetrics:
    def test_enrichment_counters(self):
        collector = get_metrics_collector()
        before = REGISTRY.get_sample_value("inventory_account_lookups_total", {"outcome": "resolved"}) or 0

        collector.track_account_lookup("resolved")

        after = REGISTRY.get_sample_value("inventory_account_lookups_total", {"outcome": "resolved"})
        assert after == before + 1

    def test_metrics_response(self):
        get_metrics_collector().track_location_enrichment("skipped")

        body, content_type = get_metrics_response()

        assert b"inventory_location_enrichments_total" in body
        assert content_type.startswith("text/plain")
