"""
Enrichment data models

Raw catalog records parse into frozen pydantic models; the enriched
``ServiceInventory`` record is what callers get back, serialized in camelCase.
Site locations keep the location service's PascalCase wire names as aliases.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PartyRole(str, Enum):
    """Closed set of party roles the pipeline acts on"""

    CUSTOMER = "Customer"

    @classmethod
    def from_tag(cls, tag: str | None) -> "PartyRole | None":
        """Case-insensitive lookup; unknown or missing tags give None"""
        if not tag:
            return None
        for role in cls:
            if role.value.lower() == tag.lower():
                return role
        return None


class _FrozenWireModel(BaseModel):
    # JSON numbers in str fields are kept as their string form
    model_config = ConfigDict(
        frozen=True, populate_by_name=True, extra="ignore", alias_generator=to_camel, coerce_numbers_to_str=True
    )


class ProductCharacteristic(_FrozenWireModel):
    """Named attribute of a product (name, valueType, value)"""

    name: str | None = None
    value_type: str | None = None
    value: Any = None


class RelatedParty(_FrozenWireModel):
    """Party reference on a product; the role tag is ``referredType``"""

    id: str | None = None
    href: str | None = None
    name: str | None = None
    role: str | None = None
    referred_type: str | None = Field(
        default=None,
        validation_alias=AliasChoices("referredType", "@referredType", "referred_type"),
    )

    @property
    def party_role(self) -> PartyRole | None:
        return PartyRole.from_tag(self.referred_type)


class PlaceRef(_FrozenWireModel):
    id: str | None = None
    role: str | None = None
    href: str | None = None


class Product(_FrozenWireModel):
    """Raw catalog record, immutable once parsed"""

    id: str | None = None
    name: str | None = None
    description: str | None = None
    status: str | None = None
    product_characteristic: tuple[ProductCharacteristic, ...] | None = None
    related_party: tuple[RelatedParty, ...] | None = None
    place: tuple[PlaceRef, ...] | None = None

    def customer_party(self) -> RelatedParty | None:
        """First party reference tagged Customer, if any"""
        for party in self.related_party or ():
            if party.party_role is PartyRole.CUSTOMER:
                return party
        return None

    def site_id(self) -> str | None:
        """Id of the first place reference that carries one"""
        for place in self.place or ():
            if place.id:
                return place.id
        return None


@dataclass(frozen=True)
class ResolvedAccountPair:
    """(display id, customer number) for one billing account number"""

    display_id: str = ""
    customer_number: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.display_id and not self.customer_number

    @classmethod
    def from_billing_response(cls, data: Any) -> "ResolvedAccountPair":
        """Build a pair from an account service body; anything unusable is the empty pair"""
        if not isinstance(data, dict):
            return EMPTY_PAIR
        accounts = data.get("billingAccounts") or []
        if not isinstance(accounts, list) or not accounts or not isinstance(accounts[0], dict):
            return EMPTY_PAIR
        return cls(
            display_id=str(accounts[0].get("id") or ""),
            customer_number=str(data.get("customerNumber") or ""),
        )

    def prefer(self, other: "ResolvedAccountPair") -> "ResolvedAccountPair":
        """Collision rule: keep whichever pair carries data, self on a tie"""
        if self.is_empty and not other.is_empty:
            return other
        return self


EMPTY_PAIR = ResolvedAccountPair()


class _OutputModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel, coerce_numbers_to_str=True)


class Address(_OutputModel):
    master_siteid: str | None = Field(default=None, alias="masterSiteid")
    street_address: str | None = None
    city: str | None = None
    state_or_province: str | None = None
    locality: str | None = None
    country: str | None = None
    postcode: str | None = None
    postcode_extension: str | None = None


class BillingAccountRef(_OutputModel):
    id: str | None = None


class ServiceInventory(_OutputModel):
    """Enriched inventory record returned to callers"""

    service_id: str | None = None
    service_type: str | None = None
    status: str | None = None
    billing_account: BillingAccountRef | None = None
    customer_number: str | None = None
    product_characteristic: list[ProductCharacteristic] | None = None
    location: Address | None = None


# Location service shapes (PascalCase on the wire)


class _SiteModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)


class SiteAddressLine(_SiteModel):
    address_block1: str | None = Field(default=None, alias="AddressBlock1")


class SiteAddress(_SiteModel):
    address_block1: str | None = Field(default=None, alias="AddressBlock1")
    address_block2: str | None = Field(default=None, alias="AddressBlock2")
    city: str | None = Field(default=None, alias="City")
    state_code: str | None = Field(default=None, alias="StateCode")
    postal_code: str | None = Field(default=None, alias="PostalCode")
    postal_code_extension: str | None = Field(default=None, alias="PostalCodeExtension")
    country: str | None = Field(default=None, alias="Country")
    locality: str | None = Field(default=None, alias="Locality")


class SiteLocation(_SiteModel):
    master_site_id: str | None = Field(default=None, alias="MasterSiteId")
    description: str | None = Field(default=None, alias="Description")
    us_zip4: str | None = Field(default=None, alias="USZip4")
    address_line1: SiteAddressLine | None = Field(default=None, alias="AddressLine1")
    addresses: list[SiteAddress] | None = Field(default=None, alias="Addresses")

    def to_address(self) -> Address:
        """Map to the outbound Address, preferring structured fields over free text"""
        primary = self.addresses[0] if self.addresses else SiteAddress()

        street = None
        if self.address_line1 and self.address_line1.address_block1:
            street = self.address_line1.address_block1
        street = street or primary.address_block1 or self.description

        postcode = primary.postal_code
        extension = primary.postal_code_extension
        if not postcode and self.us_zip4:
            postcode, _, zip4 = self.us_zip4.partition("-")
            extension = extension or zip4 or None

        return Address(
            masterSiteid=self.master_site_id,
            streetAddress=street,
            city=primary.city,
            stateOrProvince=primary.state_code,
            locality=primary.locality,
            country=primary.country,
            postcode=postcode,
            postcodeExtension=extension,
        )
