"""
Internet inventory

Fetches internet product records from the catalog, resolves their billing
accounts, merges, enriches locations and assembles the response.
"""

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from core.config import Settings, get_settings
from core.logging import get_logger
from core.metrics import get_metrics_collector
from d0_gateway.exceptions import APIProviderError
from d0_gateway.providers.account import AccountClient
from d0_gateway.providers.catalog import CatalogClient
from d0_gateway.providers.location import LocationClient
from d1_enrichment import (
    AccountResolver,
    EnrichmentConfig,
    LocationEnricher,
    Product,
    RecordMerger,
    extract_account_keys,
)

from .assembler import assemble_response
from .exceptions import CatalogUnavailableError, InventoryNotFoundError
from .schemas import GetInventoryResponse, InventoryQueryParams

_product_list = TypeAdapter(list[Product])

logger = get_logger("inventory.internet", domain="d2")


class InternetInventoryService:
    """Runs the internet enrichment pipeline for one request at a time"""

    def __init__(
        self,
        catalog_client: CatalogClient,
        account_client: AccountClient,
        location_client: LocationClient,
        config: EnrichmentConfig | None = None,
        settings: Settings | None = None,
    ):
        self.catalog_client = catalog_client
        self.account_client = account_client
        self.location_client = location_client
        self.settings = settings or get_settings()
        self.config = config or EnrichmentConfig.from_settings(self.settings)
        self.metrics = get_metrics_collector()

    async def get_inventory(self, params: InventoryQueryParams, tracking_id: str | None = None) -> GetInventoryResponse:
        log = logger.with_context(tracking_id=tracking_id)
        log.info("Processing Internet inventory request")

        records = await self.fetch_records(params, log)
        if not records:
            raise InventoryNotFoundError(params.customer_numbers)

        keys = extract_account_keys(records)
        mapping = await AccountResolver(self.account_client, self.config.worker_count, tracking_id=tracking_id).resolve(keys)

        # CPU-only and brief; runs on the event loop thread
        merged = RecordMerger(self.config).merge(records, mapping)
        enriched = await LocationEnricher(self.location_client, tracking_id=tracking_id).enrich(merged)

        response = assemble_response(enriched, params.service_id, params.page_number, params.page_size)
        self.metrics.track_records_returned(self.config.service_type_label, response.result_count)
        log.info(f"Returning {response.result_count} of {len(enriched)} enriched record(s)")
        return response

    async def fetch_records(self, params: InventoryQueryParams, log=logger) -> list[Product]:
        """Catalog records for the query; anything unusable is CatalogUnavailableError"""
        try:
            payload = await self.catalog_client.get_internet_inventory(
                params.customer_numbers,
                page_number=params.page_number,
                page_size=params.page_size,
                max_page_size=self.settings.catalog_max_page_size,
            )
        except APIProviderError as e:
            log.error(f"Catalog request failed: {e.message}")
            raise CatalogUnavailableError(
                e.upstream_message,
                upstream_status=e.details.get("api_status_code"),
                upstream_error=(e.response_data or {}).get("error"),
            ) from e

        if payload is None:
            log.error("Catalog returned an empty body")
            raise CatalogUnavailableError("Catalog returned an empty body")

        try:
            records = _product_list.validate_python(payload)
        except PydanticValidationError as e:
            log.error(f"Catalog payload could not be parsed: {e.error_count()} error(s)")
            raise CatalogUnavailableError("Catalog returned an unparseable body") from e

        log.info(f"Catalog returned {len(records)} record(s)")
        return records
