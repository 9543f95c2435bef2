"""
Configuration management using Pydantic Settings
Handles environment variables and validation
"""
from functools import lru_cache
from typing import Dict, List, Optional

from pydantic import Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # Environment
    environment: str = Field(default="development")
    debug: bool = Field(default=False)

    # Application
    app_name: str = "ProductInventory"
    app_version: str = "2.0.0"

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")  # json or text

    # Performance
    request_timeout: float = Field(default=30.0, gt=0)

    # Catalog (system of record for products/services)
    catalog_base_url: str = Field(default="http://localhost:5010/catalog")
    catalog_inventory_path: str = Field(default="/api/naas/v1/inventory/internet")
    catalog_app_key: Optional[SecretStr] = Field(default=None)
    catalog_app_secret: Optional[SecretStr] = Field(default=None)
    catalog_username: Optional[str] = Field(default=None)
    catalog_max_page_size: int = Field(default=100, ge=1)

    # Account management
    account_base_url: str = Field(default="http://localhost:5010/account")
    account_billing_accounts_path: str = Field(default="/billingAccounts")
    account_api_token: Optional[SecretStr] = Field(default=None)
    account_lookup_timeout: float = Field(default=10.0, gt=0)

    # Location service
    location_base_url: str = Field(default="http://localhost:5010/location")
    location_lookup_path: str = Field(default="/locations/search")
    location_api_token: Optional[SecretStr] = Field(default=None)
    location_lookup_timeout: float = Field(default=15.0, gt=0)

    # Inventory enrichment
    inventory_thread_allocation_count: int = Field(default=10, ge=1)
    inventory_valid_attribute_list: str = Field(default="")
    product_specification_name: str = Field(default="Internet")
    default_page_number: int = Field(default=1, ge=1)
    default_page_size: int = Field(default=20, ge=1)

    # Inbound token header presence check
    token_validation_enabled: bool = Field(default=True)
    token_validation_header: str = Field(default="Authorization")

    # Monitoring
    prometheus_enabled: bool = Field(default=True)

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        allowed = ["development", "test", "staging", "production"]
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        if v not in ("json", "text"):
            raise ValueError("Log format must be 'json' or 'text'")
        return v

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Validate production-specific settings after all fields are set"""
        if self.environment == "production":
            if not self.catalog_app_key or not self.catalog_app_secret:
                raise ValueError("Catalog app key and secret required in production")
        return self

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def valid_attributes(self) -> List[str]:
        """Characteristic names allowed through to callers"""
        return [name.strip() for name in self.inventory_valid_attribute_list.split(",") if name.strip()]

    @property
    def api_base_urls(self) -> Dict[str, str]:
        """Get base URLs for upstream APIs"""
        return {
            "catalog": self.catalog_base_url,
            "account": self.account_base_url,
            "location": self.location_base_url,
        }

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    def model_dump(self, **kwargs):
        """Override to mask sensitive fields when serializing"""
        data = super().model_dump(**kwargs)

        sensitive_fields = [
            "catalog_app_key",
            "catalog_app_secret",
            "account_api_token",
            "location_api_token",
        ]

        for field in sensitive_fields:
            if field in data and data[field]:
                if hasattr(data[field], "get_secret_value"):
                    value = data[field].get_secret_value()
                else:
                    value = str(data[field])

                # Keep first 4 chars for identification
                if len(value) > 4:
                    data[field] = value[:4] + "*" * (len(value) - 4)
                else:
                    data[field] = "*" * len(value)

        return data


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
