"""
Outreach suggestion generator.

Runs five passes over the client roster (win-back, product
recommendation, seasonal promotion, service upgrade, loyalty reward)
and returns the new drafts. Nothing is persisted here; the caller saves
the batch.

Every dedup check reads a ``PendingIndex`` built once from the pending
suggestions that existed before the run, so passes within one run do not
see each other's output.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Callable, Iterable, Optional

from salonassist.config import OutreachConfig, settings
from salonassist.outreach import templates
from salonassist.outreach.selection import Selector
from salonassist.schemas.client_schema import Client, VisitHistory
from salonassist.schemas.outreach_schema import (
    EmailSuggestion,
    GenerationResult,
    OutreachSettings,
    SuggestionDraft,
    SuggestionStatus,
    SuggestionType,
)
from salonassist.utils import days_since

logger = logging.getLogger(__name__)


@dataclass
class PendingIndex:
    """Lookup of pending suggestions keyed by client and type."""

    _by_client_type: dict[tuple[str, SuggestionType], list[str]] = field(default_factory=dict)

    @classmethod
    def build(cls, pending: Iterable[EmailSuggestion]) -> "PendingIndex":
        index = cls()
        for suggestion in pending:
            if suggestion.status != SuggestionStatus.PENDING:
                continue
            key = (suggestion.client_id, suggestion.type)
            index._by_client_type.setdefault(key, []).append(suggestion.reason)
        return index

    def has(
        self,
        client_id: str,
        suggestion_type: SuggestionType,
        reason_matches: Optional[Callable[[str], bool]] = None,
    ) -> bool:
        reasons = self._by_client_type.get((client_id, suggestion_type), [])
        if reason_matches is None:
            return bool(reasons)
        return any(reason_matches(reason) for reason in reasons)

    def any_reason(self, suggestion_type: SuggestionType, reason: str) -> bool:
        """True if any client has a pending suggestion of this type with this exact reason."""
        return any(
            reason in reasons
            for (_, kind), reasons in self._by_client_type.items()
            if kind == suggestion_type
        )


class OutreachGenerator:
    """Builds email suggestion drafts from client data and visit history."""

    def __init__(
        self,
        selector: Selector,
        today: Optional[date] = None,
        config: OutreachConfig = settings.outreach,
    ) -> None:
        self._selector = selector
        self._today = today
        self._config = config

    @property
    def today(self) -> date:
        return self._today or date.today()

    def generate(
        self,
        clients: list[Client],
        pending: Iterable[EmailSuggestion],
        outreach_settings: OutreachSettings,
        histories: dict[str, VisitHistory],
    ) -> GenerationResult:
        """
        Run all five passes and collect the new drafts.

        Args:
            clients: Full client roster, in the order passes should visit it.
            pending: Suggestions pending before this run.
            outreach_settings: Current tunable settings.
            histories: Visit history per client id; missing ids mean no visits.

        Returns:
            GenerationResult with the drafts, their count and per-type counts.
        """
        index = PendingIndex.build(pending)
        today = self.today

        drafts: list[SuggestionDraft] = []
        for name, run_pass in (
            ("win_back", lambda: self._win_back(clients, index, outreach_settings, today)),
            ("product_recommendation", lambda: self._product_recommendations(clients, index)),
            ("seasonal_promotion", lambda: self._seasonal_promotion(clients, index, today)),
            ("service_upgrade", lambda: self._service_upgrades(clients, index, histories)),
            ("loyalty_reward", lambda: self._loyalty_rewards(clients, index, histories)),
        ):
            created = run_pass()
            logger.debug("Pass %s produced %d suggestion(s)", name, len(created))
            drafts.extend(created)

        by_type = Counter(d.type.value for d in drafts)
        logger.info(
            "Outreach generation: %d new suggestion(s) for %d client(s) %s",
            len(drafts), len(clients), dict(by_type),
        )
        return GenerationResult(suggestions=drafts, generated=len(drafts), by_type=dict(by_type))

    def _win_back(
        self,
        clients: list[Client],
        index: PendingIndex,
        outreach_settings: OutreachSettings,
        today: date,
    ) -> list[SuggestionDraft]:
        threshold = outreach_settings.win_back_threshold_days
        valid_until = today + timedelta(days=self._config.offer_validity_days)
        drafts = []
        for client in clients:
            elapsed = days_since(client.last_visit, today)
            if elapsed is not None and elapsed < threshold:
                continue
            if index.has(client.id, SuggestionType.WIN_BACK):
                continue
            offer = self._selector.choose(templates.WIN_BACK_OFFERS)
            subject, body = templates.build_win_back_email(client.name, elapsed, offer, valid_until)
            drafts.append(SuggestionDraft(
                client_id=client.id,
                client_name=client.name,
                type=SuggestionType.WIN_BACK,
                reason=templates.win_back_reason(offer, elapsed),
                subject=subject,
                content=body,
            ))
        return drafts

    def _product_recommendations(
        self, clients: list[Client], index: PendingIndex
    ) -> list[SuggestionDraft]:
        drafts = []
        for client in clients:
            bundle = templates.find_product_bundle(client.primary_interest)
            if bundle is None:
                continue
            if index.has(client.id, SuggestionType.PRODUCT_RECOMMENDATION):
                continue
            subject, body = templates.build_product_email(client.name, bundle)
            drafts.append(SuggestionDraft(
                client_id=client.id,
                client_name=client.name,
                type=SuggestionType.PRODUCT_RECOMMENDATION,
                reason=templates.product_reason(bundle),
                subject=subject,
                content=body,
            ))
        return drafts

    def _seasonal_promotion(
        self, clients: list[Client], index: PendingIndex, today: date
    ) -> list[SuggestionDraft]:
        campaign = templates.campaign_for_month(today.month)
        if index.any_reason(SuggestionType.PROMOTION, campaign.reason):
            logger.debug("Campaign '%s' already pending, skipping seasonal pass", campaign.name)
            return []

        candidates = [c for c in clients if not index.has(c.id, SuggestionType.PROMOTION)]
        chosen = self._selector.sample(candidates, self._config.promotion_sample_size)
        valid_until = today + timedelta(days=self._config.promotion_validity_days)

        drafts = []
        for client in chosen:
            subject, body = templates.build_promotion_email(client.name, campaign, valid_until)
            drafts.append(SuggestionDraft(
                client_id=client.id,
                client_name=client.name,
                type=SuggestionType.PROMOTION,
                reason=campaign.reason,
                subject=subject,
                content=body,
            ))
        return drafts

    def _service_upgrades(
        self,
        clients: list[Client],
        index: PendingIndex,
        histories: dict[str, VisitHistory],
    ) -> list[SuggestionDraft]:
        drafts = []
        for client in clients:
            history = histories.get(client.id)
            if history is None:
                continue
            offer = templates.find_upgrade_offer(history.most_frequent_service())
            if offer is None:
                continue
            if index.has(
                client.id,
                SuggestionType.PROMOTION,
                lambda reason: reason.startswith(templates.UPGRADE_REASON_PREFIX),
            ):
                continue
            subject, body = templates.build_upgrade_email(client.name, offer)
            drafts.append(SuggestionDraft(
                client_id=client.id,
                client_name=client.name,
                type=SuggestionType.PROMOTION,
                reason=offer.reason,
                subject=subject,
                content=body,
            ))
        return drafts

    def _loyalty_rewards(
        self,
        clients: list[Client],
        index: PendingIndex,
        histories: dict[str, VisitHistory],
    ) -> list[SuggestionDraft]:
        drafts = []
        for client in clients:
            history = histories.get(client.id)
            if history is None or history.visit_count < self._config.loyalty_min_visits:
                continue
            if index.has(
                client.id,
                SuggestionType.PROMOTION,
                lambda reason: templates.LOYALTY_REASON_TAG in reason,
            ):
                continue
            subject, body = templates.build_loyalty_email(client.name, history.visit_count)
            drafts.append(SuggestionDraft(
                client_id=client.id,
                client_name=client.name,
                type=SuggestionType.PROMOTION,
                reason=templates.loyalty_reason(history.visit_count),
                subject=subject,
                content=body,
            ))
        return drafts
