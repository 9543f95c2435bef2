"""
Billing account key extraction
"""

from collections.abc import Iterable

from .models import PartyRole, Product


def extract_account_keys(records: Iterable[Product]) -> set[str]:
    """
    Collect the distinct billing account numbers referenced by the records

    Every Customer-tagged party reference with a non-empty id contributes
    its id. Records without such references contribute nothing.
    """
    keys: set[str] = set()
    for record in records:
        for party in record.related_party or ():
            if party.party_role is PartyRole.CUSTOMER and party.id:
                keys.add(party.id)
    return keys
