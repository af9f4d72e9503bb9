"""
Cross-selling KPIs for the salon dashboard.

Computed from completed baskets (live appointments plus visit history)
and the recommendation tracking counters. Prices come from the catalog;
items missing from it fall back to the configured default prices.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Iterable, Optional

from salonassist.config import PricingConfig, settings
from salonassist.schemas.catalog_schema import ItemType
from salonassist.schemas.recommendation_schema import TrackingCounter
from salonassist.store.repository import SalonRepository
from salonassist.utils import to_date

logger = logging.getLogger(__name__)

COMPLETED_STATUS = "Completed"
TOP_COMBOS_LIMIT = 8
TOP_RECOMMENDATIONS_LIMIT = 10


@dataclass(frozen=True)
class Basket:
    """Services and products sold in one visit."""
    date: date
    status: str
    services: tuple[str, ...] = ()
    products: tuple[str, ...] = ()

    @property
    def is_cross_sell(self) -> bool:
        return bool(self.products) or len(self.services) > 1


@dataclass
class ComboStat:
    """How often two items were sold together, and the add-on revenue."""
    label: str
    kind: str  # "retail" for service -> product, "add-on" for service + service
    count: int = 0
    revenue: float = 0.0


@dataclass
class ItemPerformance:
    item_name: str
    item_type: ItemType
    shown: int
    accepted: int

    @property
    def acceptance_rate(self) -> float:
        return self.accepted / self.shown if self.shown else 0.0


@dataclass
class AnalyticsMetrics:
    """Calculated KPIs over a set of baskets."""

    completed_visits: int = 0

    # Revenue
    service_revenue: float = 0.0
    product_revenue: float = 0.0
    total_revenue: float = 0.0
    avg_ticket: float = 0.0

    # Cross-selling
    cross_sell_visits: int = 0
    cross_sell_rate: float = 0.0
    top_combos: list[ComboStat] = field(default_factory=list)

    # Recommendations
    total_shown: int = 0
    total_accepted: int = 0
    acceptance_rate: float = 0.0
    recommendation_performance: list[ItemPerformance] = field(default_factory=list)


class PriceLookup:
    """Catalog price lookup with configured fallbacks for unknown items."""

    def __init__(
        self,
        find_price: Callable[[ItemType, str], Optional[float]],
        pricing: PricingConfig = settings.pricing,
    ) -> None:
        self._find_price = find_price
        self._defaults = {
            ItemType.SERVICE: pricing.default_service_price,
            ItemType.PRODUCT: pricing.default_product_price,
        }

    def price(self, item_type: ItemType, name: str) -> float:
        found = self._find_price(item_type, name)
        if found is None:
            logger.debug("No catalog price for %s '%s', using default", item_type.value, name)
            return self._defaults[item_type]
        return found

    def service(self, name: str) -> float:
        return self.price(ItemType.SERVICE, name)

    def product(self, name: str) -> float:
        return self.price(ItemType.PRODUCT, name)


class AnalyticsCalculator:
    """Calculates dashboard KPIs from baskets and tracking counters."""

    def __init__(self, prices: PriceLookup) -> None:
        self._prices = prices

    def calculate(
        self, baskets: Iterable[Basket], tracking: Iterable[TrackingCounter]
    ) -> AnalyticsMetrics:
        metrics = AnalyticsMetrics()
        completed = [b for b in baskets if b.status == COMPLETED_STATUS]
        metrics.completed_visits = len(completed)

        # Revenue
        for basket in completed:
            metrics.service_revenue += sum(self._prices.service(s) for s in basket.services)
            metrics.product_revenue += sum(self._prices.product(p) for p in basket.products)
        metrics.total_revenue = metrics.service_revenue + metrics.product_revenue
        metrics.avg_ticket = metrics.total_revenue / len(completed) if completed else 0.0

        # Cross-selling
        metrics.cross_sell_visits = sum(1 for b in completed if b.is_cross_sell)
        metrics.cross_sell_rate = metrics.cross_sell_visits / len(completed) if completed else 0.0
        metrics.top_combos = self.top_combos(completed)

        # Recommendations
        counters = list(tracking)
        metrics.total_shown = sum(c.shown for c in counters)
        metrics.total_accepted = sum(c.accepted for c in counters)
        metrics.acceptance_rate = (
            metrics.total_accepted / metrics.total_shown if metrics.total_shown else 0.0
        )
        metrics.recommendation_performance = [
            ItemPerformance(c.item_name, c.type, c.shown, c.accepted)
            for c in sorted(
                (c for c in counters if c.shown > 0), key=lambda c: c.shown, reverse=True
            )[:TOP_RECOMMENDATIONS_LIMIT]
        ]

        logger.debug(
            "Analytics over %d completed visit(s): revenue %.2f, cross-sell %.1f%%",
            metrics.completed_visits, metrics.total_revenue, metrics.cross_sell_rate * 100,
        )
        return metrics

    def top_combos(self, completed: list[Basket], limit: int = TOP_COMBOS_LIMIT) -> list[ComboStat]:
        """Most frequent service -> product and service + service pairings."""
        combos: dict[str, ComboStat] = {}
        for basket in completed:
            for service in basket.services:
                for product in basket.products:
                    combo = combos.setdefault(
                        f"{service} → {product}", ComboStat(f"{service} → {product}", "retail")
                    )
                    combo.count += 1
                    combo.revenue += self._prices.product(product)
            for i, first in enumerate(basket.services):
                for addon in basket.services[i + 1:]:
                    combo = combos.setdefault(
                        f"{first} + {addon}", ComboStat(f"{first} + {addon}", "add-on")
                    )
                    combo.count += 1
                    combo.revenue += self._prices.service(addon)
        return sorted(combos.values(), key=lambda c: c.count, reverse=True)[:limit]

    def format_report(self, metrics: AnalyticsMetrics) -> str:
        """Format metrics into a human-readable report."""
        currency = "€"
        lines = [
            "=" * 60,
            f"{settings.app_name.upper()} CROSS-SELLING REPORT",
            "=" * 60,
            "",
            "REVENUE",
            f"  Completed visits:       {metrics.completed_visits}",
            f"  Total revenue:          {currency}{metrics.total_revenue:,.2f}",
            f"  Service revenue:        {currency}{metrics.service_revenue:,.2f}",
            f"  Product revenue:        {currency}{metrics.product_revenue:,.2f}",
            f"  Avg ticket:             {currency}{metrics.avg_ticket:,.2f}",
            "",
            "CROSS-SELLING",
            f"  Cross-sell rate:        {metrics.cross_sell_rate:.1%}"
            f"  ({metrics.cross_sell_visits}/{metrics.completed_visits})",
        ]
        if metrics.top_combos:
            lines.append("  Top combos:")
            for combo in metrics.top_combos:
                lines.append(
                    f"    {combo.label:<44} x{combo.count:<3} {currency}{combo.revenue:,.2f} ({combo.kind})"
                )
        else:
            lines.append("  No cross-sell data yet.")

        lines += [
            "",
            "RECOMMENDATIONS",
            f"  Shown / accepted:       {metrics.total_shown} / {metrics.total_accepted}",
            f"  Acceptance rate:        {metrics.acceptance_rate:.1%}",
        ]
        for item in metrics.recommendation_performance:
            lines.append(
                f"    {item.item_name:<30} {item.item_type.value:<8} "
                f"{item.shown:>4} shown {item.accepted:>4} accepted ({item.acceptance_rate:.0%})"
            )
        lines.append("=" * 60)
        return "\n".join(lines)


def collect_baskets(repo: SalonRepository) -> list[Basket]:
    """Live appointments plus recorded visit history, as baskets."""
    baskets = [
        Basket(
            date=to_date(apt.date),
            status=apt.status.value,
            services=tuple(apt.services),
            products=tuple(apt.products),
        )
        for apt in repo.appointments.list_all()
    ]
    baskets.extend(
        Basket(
            date=visit.date,
            status=visit.status,
            services=tuple(visit.services),
            products=tuple(visit.products),
        )
        for visit in repo.clients.all_visits()
    )
    return baskets


def calculate_for_repository(repo: SalonRepository) -> tuple[AnalyticsCalculator, AnalyticsMetrics]:
    calculator = AnalyticsCalculator(PriceLookup(repo.catalog.price_of))
    metrics = calculator.calculate(collect_baskets(repo), repo.tracking.all_counters().values())
    return calculator, metrics
