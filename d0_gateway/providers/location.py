"""
Location service API client

Batch lookup of site locations by master site id. Entries come back in the
upstream PascalCase shape (MasterSiteId, AddressLine1, Addresses, ...).
"""
from typing import Any, Dict, List, Optional

from core.config import get_settings
from d0_gateway.base import BaseAPIClient


class LocationClient(BaseAPIClient):
    """Site location batch lookup"""

    def __init__(self, timeout: Optional[float] = None, **kwargs):
        super().__init__(
            provider="location",
            timeout=timeout or get_settings().location_lookup_timeout,
            **kwargs,
        )

    def _get_base_url(self) -> str:
        return self.settings.location_base_url

    def _get_headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json", "Content-Type": "application/json"}
        if self.settings.location_api_token:
            headers["Authorization"] = f"Bearer {self.settings.location_api_token.get_secret_value()}"
        return headers

    async def get_locations(self, site_ids: List[str]) -> List[Dict[str, Any]]:
        """One POST for the whole id list; an empty body yields an empty list"""
        self.logger.info(f"Looking up {len(site_ids)} site location(s)")
        data = await self.make_request("POST", self.settings.location_lookup_path, json={"masterSiteIds": site_ids})
        return data or []
