"""
Inventory domain enums
"""

from enum import Enum


class ServiceType(Enum):
    """Service types the inventory endpoint accepts"""

    INTERNET = "Internet"
    PORT = "Port"

    @classmethod
    def parse(cls, value: str | None) -> "ServiceType":
        """Case-insensitive parse; a missing value means Internet"""
        if value is None or not value.strip():
            return cls.INTERNET
        for member in cls:
            if member.value.lower() == value.strip().lower():
                return member
        allowed = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid serviceType: {value}. Allowed values: {allowed}")
