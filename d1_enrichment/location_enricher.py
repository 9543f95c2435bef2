"""
Location Enricher

Best-effort replacement of location stubs with full addresses from the
location service. One batched lookup per call; any failure leaves the
records exactly as they came in.
"""

from core.logging import get_logger
from core.metrics import get_metrics_collector
from d0_gateway.providers.location import LocationClient

from .models import ServiceInventory, SiteLocation

logger = get_logger("enrichment.location", domain="d1")


class LocationEnricher:
    def __init__(self, location_client: LocationClient, tracking_id: str | None = None):
        self.location_client = location_client
        self.logger = logger.with_context(tracking_id=tracking_id)
        self.metrics = get_metrics_collector()

    async def enrich(self, records: list[ServiceInventory]) -> list[ServiceInventory]:
        """Never raises; returns a list of the same length and order"""
        try:
            site_ids = self._distinct_site_ids(records)
            if not site_ids:
                self.metrics.track_location_enrichment("skipped")
                return records

            entries = await self.location_client.get_locations(site_ids)
            index = self._build_index(entries)
            self.logger.info(f"Location service returned {len(index)} site(s) for {len(site_ids)} id(s)")

            enriched = [self._apply(record, index) for record in records]
        except Exception as e:
            self.logger.warning(f"Location enrichment skipped: {e}")
            self.metrics.track_location_enrichment("failed")
            return records

        self.metrics.track_location_enrichment("enriched")
        return enriched

    @staticmethod
    def _distinct_site_ids(records: list[ServiceInventory]) -> list[str]:
        seen: dict[str, str] = {}
        for record in records:
            if record.location is not None and record.location.master_siteid:
                seen.setdefault(record.location.master_siteid.lower(), record.location.master_siteid)
        return list(seen.values())

    @staticmethod
    def _build_index(entries) -> dict[str, SiteLocation]:
        index: dict[str, SiteLocation] = {}
        for entry in entries or []:
            site = SiteLocation.model_validate(entry)
            if site.master_site_id:
                index.setdefault(site.master_site_id.lower(), site)
        return index

    @staticmethod
    def _apply(record: ServiceInventory, index: dict[str, SiteLocation]) -> ServiceInventory:
        if record.location is None or not record.location.master_siteid:
            return record
        site = index.get(record.location.master_siteid.lower())
        if site is None:
            return record
        return record.model_copy(update={"location": site.to_address()})
