"""
Cross-sell rule endpoints.

Rule bodies are validated inside the handler rather than by FastAPI so
that a missing trigger or an empty suggestion list is reported as 400,
matching the rest of the rule management API.
"""

from enum import Enum
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from salonassist.api.dependencies import get_repo
from salonassist.logging_context import get_request_logger
from salonassist.schemas.catalog_schema import ActiveToggle, ItemType
from salonassist.schemas.rule_schema import CrossSellRule, RuleCollection, RuleDraft
from salonassist.store.repository import SalonRepository

logger = get_request_logger(__name__)

router = APIRouter(prefix="/api/rules", tags=["Rules"])


class RuleInput(BaseModel):
    """Unvalidated rule body; checked by ``RuleDraft``."""
    trigger: str = ""
    suggestions: list[str] = Field(default_factory=list)
    reason: Optional[str] = None
    active: bool = True


class RuleKind(str, Enum):
    """Path segment selecting service rules or product rules."""
    SERVICES = "services"
    PRODUCTS = "products"

    @property
    def item_type(self) -> ItemType:
        return ItemType.SERVICE if self is RuleKind.SERVICES else ItemType.PRODUCT


@router.get("", response_model=RuleCollection)
def list_all_rules(repo: SalonRepository = Depends(get_repo)):
    return RuleCollection(
        service_rules=repo.rules.list_rules(ItemType.SERVICE),
        product_rules=repo.rules.list_rules(ItemType.PRODUCT),
    )


@router.get("/{kind}", response_model=list[CrossSellRule])
def list_rules(kind: RuleKind, repo: SalonRepository = Depends(get_repo)):
    return repo.rules.list_rules(kind.item_type)


@router.post("/{kind}", response_model=CrossSellRule, status_code=201)
def create_rule(kind: RuleKind, body: RuleInput, repo: SalonRepository = Depends(get_repo)):
    draft = RuleDraft(**body.model_dump())
    return repo.rules.create(kind.item_type, draft)


@router.put("/{kind}/{rule_id}", response_model=CrossSellRule)
def update_rule(kind: RuleKind, rule_id: int, body: RuleInput, repo: SalonRepository = Depends(get_repo)):
    draft = RuleDraft(**body.model_dump())
    return repo.rules.update(kind.item_type, rule_id, draft)


@router.delete("/{kind}/{rule_id}")
def delete_rule(kind: RuleKind, rule_id: int, repo: SalonRepository = Depends(get_repo)):
    repo.rules.delete(kind.item_type, rule_id)
    return {"success": True, "id": rule_id}


@router.patch("/{kind}/{rule_id}/toggle", response_model=CrossSellRule)
def toggle_rule(kind: RuleKind, rule_id: int, body: ActiveToggle, repo: SalonRepository = Depends(get_repo)):
    return repo.rules.set_active(kind.item_type, rule_id, body.active)
