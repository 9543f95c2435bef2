"""
Tests for the Location Enricher
"""
import asyncio
from unittest.mock import AsyncMock

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from d0_gateway.exceptions import UpstreamTimeoutError
from d1_enrichment.location_enricher import LocationEnricher
from d1_enrichment.models import Address, ServiceInventory


def record(service_id: str, site_id: str | None = None) -> ServiceInventory:
    location = Address(masterSiteid=site_id) if site_id else None
    return ServiceInventory(serviceId=service_id, serviceType="Internet", location=location)


class TestLocationEnricher:
    @pytest.mark.asyncio
    async def test_no_stubs_makes_no_call(self):
        client = AsyncMock()
        records = [record("P1"), record("P2")]

        result = await LocationEnricher(client).enrich(records)

        assert result == records
        client.get_locations.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_single_batched_lookup_with_distinct_ids(self, make_site_location):
        client = AsyncMock()
        client.get_locations.return_value = [make_site_location("S1"), make_site_location("S2")]
        records = [record("P1", "S1"), record("P2", "S2"), record("P3", "s1")]

        await LocationEnricher(client).enrich(records)

        client.get_locations.assert_awaited_once_with(["S1", "S2"])

    @pytest.mark.asyncio
    async def test_replaces_matched_stubs(self, make_site_location):
        client = AsyncMock()
        client.get_locations.return_value = [make_site_location("S1", city="Boulder")]
        records = [record("P1", "S1"), record("P2"), record("P3", "S-UNKNOWN")]

        result = await LocationEnricher(client).enrich(records)

        assert [r.service_id for r in result] == ["P1", "P2", "P3"]
        assert result[0].location.city == "Boulder"
        assert result[0].location.street_address == "100 Main St"
        assert result[1].location is None
        assert result[2].location == Address(masterSiteid="S-UNKNOWN")

    @pytest.mark.asyncio
    async def test_site_id_match_is_case_insensitive_and_first_entry_wins(self, make_site_location):
        client = AsyncMock()
        client.get_locations.return_value = [
            make_site_location("abc", city="First"),
            make_site_location("ABC", city="Second"),
        ]

        [result] = await LocationEnricher(client).enrich([record("P1", "AbC")])

        assert result.location.city == "First"

    @pytest.mark.asyncio
    async def test_numeric_postcode_does_not_drop_the_batch(self, make_site_location):
        numeric = make_site_location("S2", city="Boulder")
        numeric["Addresses"][0]["PostalCode"] = 80301
        client = AsyncMock()
        client.get_locations.return_value = [make_site_location("S1"), numeric]

        result = await LocationEnricher(client).enrich([record("P1", "S1"), record("P2", "S2")])

        assert result[0].location.city == "Denver"
        assert result[1].location.city == "Boulder"
        assert result[1].location.postcode == "80301"

    @pytest.mark.asyncio
    async def test_upstream_failure_leaves_batch_untouched(self):
        client = AsyncMock()
        client.get_locations.side_effect = UpstreamTimeoutError("location", 15.0)
        records = [record("P1", "S1"), record("P2", "S2")]

        result = await LocationEnricher(client).enrich(records)

        assert result == records

    @pytest.mark.asyncio
    async def test_malformed_entries_leave_batch_untouched(self):
        client = AsyncMock()
        client.get_locations.return_value = ["not-a-site"]
        records = [record("P1", "S1")]

        result = await LocationEnricher(client).enrich(records)

        assert result == records

    @pytest.mark.asyncio
    async def test_input_records_are_not_mutated(self, make_site_location):
        client = AsyncMock()
        client.get_locations.return_value = [make_site_location("S1")]
        original = record("P1", "S1")

        await LocationEnricher(client).enrich([original])

        assert original.location == Address(masterSiteid="S1")

    @settings(max_examples=25, deadline=None)
    @given(
        site_ids=st.lists(st.sampled_from(["S1", "S2", "s3", None]), max_size=15),
        fail=st.booleans(),
    )
    def test_never_raises_and_preserves_length_and_order(self, site_ids, fail):
        client = AsyncMock()
        if fail:
            client.get_locations.side_effect = RuntimeError("location service exploded")
        else:
            client.get_locations.return_value = [{"MasterSiteId": "S1", "Addresses": [{"City": "Denver"}]}]
        records = [record(f"P{i}", site_id) for i, site_id in enumerate(site_ids)]

        result = asyncio.run(LocationEnricher(client).enrich(records))

        assert [r.service_id for r in result] == [r.service_id for r in records]
        for before, after in zip(records, result):
            if before.location is None:
                assert after.location is None
            else:
                assert after.location.master_siteid.lower() == before.location.master_siteid.lower()
