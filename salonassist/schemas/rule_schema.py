"""Cross-sell rule models.

A rule maps one trigger service to an ordered list of suggested services
(service rules) or products (product rules). Both kinds share one model
tagged with ``kind``.
"""

from typing import Optional

from pydantic import field_validator

from salonassist.schemas.base import CamelModel
from salonassist.schemas.catalog_schema import ItemType


class RuleDraft(CamelModel):
    """Validated rule data as submitted by salon staff."""

    trigger: str
    suggestions: list[str]
    reason: Optional[str] = None
    active: bool = True

    @field_validator("trigger")
    @classmethod
    def _trigger_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("trigger is required")
        return value

    @field_validator("suggestions")
    @classmethod
    def _at_least_one_suggestion(cls, value: list[str]) -> list[str]:
        cleaned: list[str] = []
        for name in value:
            name = name.strip()
            if name and name not in cleaned:
                cleaned.append(name)
        if not cleaned:
            raise ValueError("at least one suggestion is required")
        return cleaned

    @field_validator("reason")
    @classmethod
    def _blank_reason_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value.strip()


class CrossSellRule(RuleDraft):
    """Stored rule record."""

    id: int
    kind: ItemType


class RuleCollection(CamelModel):
    """Both rule kinds, as returned by the combined rules listing."""

    service_rules: list[CrossSellRule]
    product_rules: list[CrossSellRule]
