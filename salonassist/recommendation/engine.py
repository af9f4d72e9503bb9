"""
Rule-based cross-sell recommendation engine.

Given one appointment, walks its booked services in booking order, finds
every active rule triggered by each of them and accumulates the suggested
items that are not already booked, not dismissed for this appointment and
still active in the catalog. Each candidate keeps one reason entry per
(rule, booked service) pair that proposed it; candidates are then ranked
by that count.

The engine is a pure function: it performs no tracking or persistence and
never mutates its inputs. Callers record shown/accepted/dismissed events
separately (see ``salonassist.recommendation.service``).

Usage:
    result = recommend(appointment, service_rules, product_rules, dismissed,
                       catalog.is_service_active, catalog.is_product_active)
    for rec in result.service_recommendations:
        print(rec.name, rec.reason, rec.rule_count)
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable

from salonassist.schemas.appointment_schema import Appointment, DismissedItems
from salonassist.schemas.catalog_schema import ItemType
from salonassist.schemas.recommendation_schema import Recommendation, RecommendationSet
from salonassist.schemas.rule_schema import CrossSellRule

logger = logging.getLogger(__name__)

ActivePredicate = Callable[[str], bool]

FALLBACK_REASONS: dict[ItemType, str] = {
    ItemType.SERVICE: "Pairs well with {trigger}",
    ItemType.PRODUCT: "Recommended after {trigger}",
}
MULTI_RULE_REASON = "Suggested by {count} rules"


@dataclass(frozen=True)
class ReasonEntry:
    """One (rule, booked service) pair that proposed a candidate."""

    reason: str
    trigger: str


def _accumulate(
    kind: ItemType,
    booked_services: list[str],
    rules: Iterable[CrossSellRule],
    already_booked: list[str],
    dismissed: DismissedItems,
    is_active: ActivePredicate,
) -> dict[str, list[ReasonEntry]]:
    """Collect reason entries per candidate, in first-accumulation order."""
    rules = list(rules)
    accumulated: dict[str, list[ReasonEntry]] = {}
    for booked in booked_services:
        for rule in rules:
            if not rule.active or rule.trigger != booked:
                continue
            for suggestion in rule.suggestions:
                if (
                    suggestion in already_booked
                    or dismissed.contains(suggestion, kind)
                    or not is_active(suggestion)
                ):
                    continue
                reason = rule.reason or FALLBACK_REASONS[kind].format(trigger=booked)
                accumulated.setdefault(suggestion, []).append(ReasonEntry(reason, booked))
    return accumulated


def _rank(kind: ItemType, accumulated: dict[str, list[ReasonEntry]]) -> list[Recommendation]:
    candidates = []
    for name, entries in accumulated.items():
        if len(entries) == 1:
            reason = entries[0].reason
        else:
            reason = MULTI_RULE_REASON.format(count=len(entries))
        candidates.append(
            Recommendation(name=name, reason=reason, type=kind, rule_count=len(entries))
        )
    # sorted() is stable, so equal counts keep accumulation order
    return sorted(candidates, key=lambda rec: rec.rule_count, reverse=True)


def recommend(
    appointment: Appointment,
    service_rules: Iterable[CrossSellRule],
    product_rules: Iterable[CrossSellRule],
    dismissed: DismissedItems,
    is_service_active: ActivePredicate,
    is_product_active: ActivePredicate,
) -> RecommendationSet:
    """Compute ranked service and product additions for an appointment."""
    booked_services = list(appointment.services)
    booked_products = list(appointment.products)

    services = _accumulate(
        ItemType.SERVICE, booked_services, service_rules,
        booked_services, dismissed, is_service_active,
    )
    products = _accumulate(
        ItemType.PRODUCT, booked_services, product_rules,
        booked_products, dismissed, is_product_active,
    )

    result = RecommendationSet(
        service_recommendations=_rank(ItemType.SERVICE, services),
        product_recommendations=_rank(ItemType.PRODUCT, products),
    )
    logger.debug(
        "Appointment %s: %d service and %d product recommendation(s)",
        appointment.id,
        len(result.service_recommendations),
        len(result.product_recommendations),
    )
    return result
