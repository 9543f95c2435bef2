"""
Immutable enrichment configuration handed to each pipeline stage
"""

from dataclasses import dataclass

from core.config import Settings, get_settings


@dataclass(frozen=True)
class EnrichmentConfig:
    valid_attributes: frozenset[str] = frozenset()
    service_type_label: str = "Internet"
    worker_count: int = 10

    def __post_init__(self):
        if self.worker_count < 1:
            raise ValueError("worker_count must be at least 1")

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "EnrichmentConfig":
        settings = settings or get_settings()
        return cls(
            valid_attributes=frozenset(settings.valid_attributes),
            service_type_label=settings.product_specification_name,
            worker_count=settings.inventory_thread_allocation_count,
        )
