"""
Inventory API Schemas

Inbound query parameters and the response envelope for the inventory
endpoint. Wire names are camelCase.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from core.config import get_settings
from core.exceptions import ValidationError
from d1_enrichment.models import ServiceInventory

from .types import ServiceType


class InventoryQueryParams(BaseModel):
    """Validated inventory query"""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel, frozen=True)

    customer_numbers: list[str] = Field(..., description="Customer numbers to query inventory for")
    service_type: ServiceType | None = Field(default=None, description="Internet or Port")
    service_id: str | None = Field(default=None, description="Only return the service with this id")
    page_number: int | None = Field(default=None, description="Page to fetch (default 1)")
    page_size: int | None = Field(default=None, description="Records per page (default 20)")

    @field_validator("customer_numbers", mode="before")
    @classmethod
    def split_customer_numbers(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            v = [v]
        numbers = []
        for item in v:
            numbers.extend(part.strip() for part in str(item).split(",") if part.strip())
        return numbers

    @field_validator("customer_numbers")
    @classmethod
    def require_customer_numbers(cls, v):
        if not v:
            raise ValueError("At least one customer number is required")
        return v

    @field_validator("service_type", mode="before")
    @classmethod
    def parse_service_type(cls, v):
        if v is None or isinstance(v, ServiceType):
            return v
        if not str(v).strip():
            return None
        return ServiceType.parse(str(v))

    @field_validator("service_id", mode="before")
    @classmethod
    def blank_service_id(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def apply_paging_defaults(self):
        settings = get_settings()
        page_number = settings.default_page_number if self.page_number is None else self.page_number
        page_size = settings.default_page_size if self.page_size is None else self.page_size

        if page_number < 1:
            raise ValueError("pageNumber must be a positive integer")
        if page_size < 1 or page_size > settings.catalog_max_page_size:
            raise ValueError(f"pageSize must be between 1 and {settings.catalog_max_page_size}")

        # Frozen model, so defaults are written through object.__setattr__
        object.__setattr__(self, "page_number", page_number)
        object.__setattr__(self, "page_size", page_size)
        return self

    @classmethod
    def from_request(cls, **params) -> "InventoryQueryParams":
        """Build from raw request values, raising the service's ValidationError"""
        try:
            return cls(**params)
        except PydanticValidationError as e:
            error = e.errors()[0]
            message = str(error.get("msg", "Invalid request parameters")).removeprefix("Value error, ")
            field = ".".join(str(part) for part in error.get("loc", ())) or None
            raise ValidationError(message, field=field) from e

    def query_summary(self) -> str:
        service_type = self.service_type.value if self.service_type else "N/A"
        return (
            f"InventoryQuery: customerNumbers={self.customer_numbers}, "
            f"serviceType={service_type}, serviceId={self.service_id or 'N/A'}"
        )


class _EnvelopeModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class PaginationResponse(_EnvelopeModel):
    page_number: int
    page_size: int
    total_records: int


class GetInventoryResponse(_EnvelopeModel):
    """Inventory response envelope"""

    inventory_list: list[ServiceInventory] = Field(default_factory=list)
    page_number: int | None = None
    page_size: int | None = None
    result_count: int = 0
    pagination: list[PaginationResponse] = Field(default_factory=list)
