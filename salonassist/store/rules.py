"""
In-memory rule store for service and product cross-sell rules.

Rules are validated by ``RuleDraft`` before they reach the store, so a
stored rule always has a trigger and at least one suggestion.
"""

import logging

from salonassist.schemas.catalog_schema import ItemType
from salonassist.schemas.rule_schema import CrossSellRule, RuleDraft
from salonassist.store.errors import RecordNotFoundError

logger = logging.getLogger(__name__)


def _label(kind: ItemType) -> str:
    return "Service rule" if kind == ItemType.SERVICE else "Product rule"


class RuleStore:
    """Ordered collections of service rules and product rules."""

    def __init__(self) -> None:
        self._rules: dict[ItemType, dict[int, CrossSellRule]] = {
            ItemType.SERVICE: {},
            ItemType.PRODUCT: {},
        }
        self._next_id: dict[ItemType, int] = {ItemType.SERVICE: 1, ItemType.PRODUCT: 1}

    def create(self, kind: ItemType, draft: RuleDraft) -> CrossSellRule:
        rule_id = self._next_id[kind]
        self._next_id[kind] += 1
        rule = CrossSellRule(id=rule_id, kind=kind, **draft.model_dump())
        self._rules[kind][rule_id] = rule
        logger.info(
            "%s %d created: %s -> %s", _label(kind), rule_id, rule.trigger, rule.suggestions
        )
        return rule.model_copy(deep=True)

    def update(self, kind: ItemType, rule_id: int, draft: RuleDraft) -> CrossSellRule:
        self._require(kind, rule_id)
        rule = CrossSellRule(id=rule_id, kind=kind, **draft.model_dump())
        self._rules[kind][rule_id] = rule
        logger.info("%s %d updated", _label(kind), rule_id)
        return rule.model_copy(deep=True)

    def delete(self, kind: ItemType, rule_id: int) -> None:
        """Remove a rule together with its suggestion list."""
        self._require(kind, rule_id)
        del self._rules[kind][rule_id]
        logger.info("%s %d deleted", _label(kind), rule_id)

    def set_active(self, kind: ItemType, rule_id: int, active: bool) -> CrossSellRule:
        rule = self._require(kind, rule_id)
        rule.active = active
        logger.info("%s %d active=%s", _label(kind), rule_id, active)
        return rule.model_copy(deep=True)

    def get(self, kind: ItemType, rule_id: int) -> CrossSellRule:
        return self._require(kind, rule_id).model_copy(deep=True)

    def list_rules(self, kind: ItemType) -> list[CrossSellRule]:
        """All rules of a kind, ordered by trigger then creation."""
        rules = sorted(self._rules[kind].values(), key=lambda r: (r.trigger, r.id))
        return [r.model_copy(deep=True) for r in rules]

    def active_rules(self, kind: ItemType) -> list[CrossSellRule]:
        return [r for r in self.list_rules(kind) if r.active]

    def reset(self) -> None:
        """Clear all rules. Used by test fixtures for isolation."""
        for kind in self._rules:
            self._rules[kind].clear()
            self._next_id[kind] = 1

    def _require(self, kind: ItemType, rule_id: int) -> CrossSellRule:
        rule = self._rules[kind].get(rule_id)
        if rule is None:
            raise RecordNotFoundError(_label(kind), rule_id)
        return rule
