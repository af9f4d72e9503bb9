"""Service and product catalog models."""

from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from salonassist.schemas.base import CamelModel


class ItemType(str, Enum):
    """Kind of catalog item a rule, recommendation or counter refers to."""

    SERVICE = "service"
    PRODUCT = "product"


class ServiceDraft(CamelModel):
    """Service fields supplied by catalog management."""

    name: str
    category: str = ""
    price: float = Field(ge=0)
    duration: int = Field(default=30, ge=0)
    active: bool = True

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name is required")
        return value


class Service(ServiceDraft):
    """Catalog service record."""

    id: int


class ProductDraft(CamelModel):
    """Product fields supplied by catalog management."""

    name: str
    category: str = ""
    price: float = Field(ge=0)
    use_case: Optional[str] = None
    active: bool = True

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name is required")
        return value


class Product(ProductDraft):
    """Catalog product record."""

    id: int


class ActiveToggle(CamelModel):
    """Body of a toggle-active request."""

    active: bool
