"""
Account management API client

Resolves a billing account number (BAN) to its billing accounts and the
owning customer number.
"""
from typing import Any, Dict, Optional

from core.config import get_settings
from d0_gateway.base import BaseAPIClient


class AccountClient(BaseAPIClient):
    """Billing accounts lookup, keyed by the ``x-customer-number`` header"""

    def __init__(self, timeout: Optional[float] = None, **kwargs):
        super().__init__(
            provider="account",
            timeout=timeout or get_settings().account_lookup_timeout,
            **kwargs,
        )

    def _get_base_url(self) -> str:
        return self.settings.account_base_url

    def _get_headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.settings.account_api_token:
            headers["Authorization"] = f"Bearer {self.settings.account_api_token.get_secret_value()}"
        return headers

    async def get_billing_accounts(self, ban: str) -> Optional[Dict[str, Any]]:
        """
        Look up the billing accounts behind one BAN

        Returns:
            ``{"customerNumber": ..., "billingAccounts": [{"id": ...}, ...]}``
            or None for an empty body
        """
        return await self.make_request(
            "GET",
            self.settings.account_billing_accounts_path,
            headers={"x-customer-number": ban},
        )
