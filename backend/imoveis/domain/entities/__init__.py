"""Entidades do domínio."""
from .base import Base, TimestampMixin
from .enums import (
    PropertyType,
    PriceType,
    PropertyStatus,
    UserRole,
)
from .models import Company, User
from .property import Property

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    # Enums
    "PropertyType",
    "PriceType",
    "PropertyStatus",
    "UserRole",
    # Models
    "Company",
    "User",
    "Property",
]
