"""
Catalog API client

System of record for customer products and services. The internet inventory
endpoint returns a JSON list of product records for one or more customers.
"""
import json
from typing import Any, Dict, List, Optional

import httpx

from d0_gateway.base import BaseAPIClient
from d0_gateway.exceptions import APIProviderError

DEFAULT_ERROR_MESSAGE = "Unable to process the request. Please try again later."

STATUS_MESSAGES = {
    404: "No Record Found for the provided information",
    500: "Catalog API internal server error",
    503: "Catalog API service unavailable",
}


def extract_error_message(body: Optional[str]) -> str:
    """Pull the ``error`` node out of a catalog error body"""
    if not body:
        return DEFAULT_ERROR_MESSAGE
    try:
        data = json.loads(body)
    except ValueError:
        return DEFAULT_ERROR_MESSAGE

    if not isinstance(data, dict) or "error" not in data:
        return DEFAULT_ERROR_MESSAGE

    error = data["error"]
    if isinstance(error, str):
        return error
    return json.dumps(error)


class CatalogClient(BaseAPIClient):
    """
    Catalog inventory API client

    Implements GET on the configured inventory path, authenticated with the
    App-Key / App-Secret / Username header triple.
    """

    def __init__(self, **kwargs):
        super().__init__(provider="catalog", **kwargs)

    def _get_base_url(self) -> str:
        return self.settings.catalog_base_url

    def _get_headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.settings.catalog_app_key:
            headers["App-Key"] = self.settings.catalog_app_key.get_secret_value()
        if self.settings.catalog_app_secret:
            headers["App-Secret"] = self.settings.catalog_app_secret.get_secret_value()
        if self.settings.catalog_username:
            headers["Username"] = self.settings.catalog_username
        return headers

    def _error_from_response(self, response: httpx.Response) -> APIProviderError:
        extracted = extract_error_message(response.text)
        self.logger.error(f"Error response from catalog API: {response.text[:500]}")

        return APIProviderError(
            provider=self.provider,
            message=STATUS_MESSAGES.get(response.status_code, extracted),
            status_code=response.status_code,
            response_data={"error": extracted},
        )

    async def get_internet_inventory(
        self,
        customer_numbers: List[str],
        page_number: Optional[int] = None,
        page_size: Optional[int] = None,
        max_page_size: Optional[int] = None,
        status: Optional[str] = None,
    ) -> Optional[List[Dict[str, Any]]]:
        """
        Fetch internet product records for the given customers

        Args:
            customer_numbers: Customer numbers, sent comma-joined
            page_number: Upstream page to fetch
            page_size: Records per page
            max_page_size: Upper bound the catalog enforces on page size
            status: Optional product status filter

        Returns:
            The parsed JSON payload, or None when the catalog sent an empty body
        """
        params: Dict[str, Any] = {
            "customerNumbers": ",".join(customer_numbers),
            "maxPageSize": max_page_size or self.settings.catalog_max_page_size,
        }
        if page_number is not None:
            params["pageNumber"] = page_number
        if page_size is not None:
            params["pageSize"] = page_size
        if status:
            params["status"] = status

        self.logger.info(f"Fetching internet inventory for {len(customer_numbers)} customer(s)")
        return await self.make_request("GET", self.settings.catalog_inventory_path, params=params)
