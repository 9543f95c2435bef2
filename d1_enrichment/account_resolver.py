"""
Account Resolver

Resolves every billing account number in a request to its display id and
customer number with a bounded concurrent fan-out against the account
service. Failures never escape: a key that cannot be resolved maps to the
empty pair.
"""

import asyncio
from collections.abc import Iterable

from core.logging import get_logger
from core.metrics import get_metrics_collector
from d0_gateway.providers.account import AccountClient

from .models import EMPTY_PAIR, ResolvedAccountPair

logger = get_logger("enrichment.accounts", domain="d1")


class AccountResolver:
    """Per-request key to pair resolution against the account service"""

    def __init__(
        self,
        account_client: AccountClient,
        worker_count: int = 10,
        tracking_id: str | None = None,
    ):
        if worker_count < 1:
            raise ValueError("worker_count must be at least 1")
        self.account_client = account_client
        self.worker_count = worker_count
        self.logger = logger.with_context(tracking_id=tracking_id)
        self.metrics = get_metrics_collector()

    async def resolve(self, keys: Iterable[str]) -> dict[str, ResolvedAccountPair]:
        """
        Look up each distinct key once, at most ``worker_count`` at a time

        Returns a mapping that covers every input key. The mapping is built
        here in one pass and not touched again afterwards.
        """
        ordered = sorted(set(keys))
        if not ordered:
            return {}

        # Fresh per call so nothing is shared between requests
        semaphore = asyncio.Semaphore(min(self.worker_count, len(ordered)))

        async def bounded_lookup(key: str) -> ResolvedAccountPair:
            async with semaphore:
                return await self._lookup(key)

        self.logger.info(f"Resolving {len(ordered)} billing account(s) with {min(self.worker_count, len(ordered))} worker(s)")
        results = await asyncio.gather(*(bounded_lookup(key) for key in ordered), return_exceptions=True)

        mapping: dict[str, ResolvedAccountPair] = {}
        for key, result in zip(ordered, results):
            if isinstance(result, BaseException):
                self.logger.error(f"Account lookup for {key} raised {result.__class__.__name__}: {result}")
                result = EMPTY_PAIR
            existing = mapping.get(key)
            mapping[key] = existing.prefer(result) if existing is not None else result

        resolved = sum(1 for pair in mapping.values() if not pair.is_empty)
        self.logger.info(f"Resolved {resolved}/{len(mapping)} billing account(s)")
        return mapping

    async def _lookup(self, key: str) -> ResolvedAccountPair:
        try:
            data = await self.account_client.get_billing_accounts(key)
        except Exception as e:
            self.logger.warning(f"Account lookup failed for {key}: {e}")
            self.metrics.track_account_lookup("failed")
            return EMPTY_PAIR

        pair = ResolvedAccountPair.from_billing_response(data)
        self.metrics.track_account_lookup("empty" if pair.is_empty else "resolved")
        return pair
