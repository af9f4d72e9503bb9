"""Tests for the five-pass outreach suggestion generator."""

from datetime import date, datetime, timezone

import pytest

from salonassist.outreach import templates
from salonassist.outreach.generator import OutreachGenerator, PendingIndex
from salonassist.outreach.selection import RotatingSelector
from salonassist.schemas.outreach_schema import (
    EmailSuggestion,
    OutreachSettings,
    SuggestionStatus,
    SuggestionType,
)
from tests.conftest import TODAY, make_client, make_history, make_suggestion

SETTINGS = OutreachSettings(win_back_threshold_days=30)
CREATED_AT = datetime(2026, 1, 15, 9, 0, tzinfo=timezone.utc)


def as_pending(result, start_id: int = 100) -> list[EmailSuggestion]:
    """Turn generated drafts into the pending records the next run would see."""
    return [
        EmailSuggestion(id=start_id + i, created_at=CREATED_AT, **draft.model_dump())
        for i, draft in enumerate(result.suggestions)
    ]


def of_type(result, suggestion_type: SuggestionType):
    return [s for s in result.suggestions if s.type == suggestion_type]


class TestWinBack:
    def test_client_past_threshold_gets_one_suggestion(self, generator):
        client = make_client(days_since_visit=45)
        result = generator.generate([client], [], SETTINGS, {})

        win_backs = of_type(result, SuggestionType.WIN_BACK)
        assert len(win_backs) == 1
        assert win_backs[0].client_id == client.id
        assert "45 days" in win_backs[0].content

    def test_second_run_creates_no_duplicate(self, generator):
        client = make_client(days_since_visit=45)
        first = generator.generate([client], [], SETTINGS, {})
        second = generator.generate([client], as_pending(first), SETTINGS, {})
        assert of_type(second, SuggestionType.WIN_BACK) == []

    def test_threshold_is_inclusive(self, generator):
        client = make_client(days_since_visit=30)
        result = generator.generate([client], [], SETTINGS, {})
        assert len(of_type(result, SuggestionType.WIN_BACK)) == 1

    def test_one_day_short_is_not_eligible(self, generator):
        client = make_client(days_since_visit=29)
        result = generator.generate([client], [], SETTINGS, {})
        assert of_type(result, SuggestionType.WIN_BACK) == []

    def test_missing_last_visit_is_eligible(self, generator):
        client = make_client(days_since_visit=None)
        result = generator.generate([client], [], SETTINGS, {})
        assert len(of_type(result, SuggestionType.WIN_BACK)) == 1

    def test_threshold_comes_from_settings(self, generator):
        client = make_client(days_since_visit=45)
        result = generator.generate(
            [client], [], OutreachSettings(win_back_threshold_days=60), {}
        )
        assert of_type(result, SuggestionType.WIN_BACK) == []

    def test_offer_is_one_of_the_fixed_templates(self, generator):
        clients = [make_client(f"c-{i}", days_since_visit=40) for i in range(4)]
        result = generator.generate(clients, [], SETTINGS, {})
        codes = {offer.code for offer in templates.WIN_BACK_OFFERS}
        for suggestion in of_type(result, SuggestionType.WIN_BACK):
            assert any(code in suggestion.content for code in codes)

    def test_expiry_is_fourteen_days_out(self, generator):
        result = generator.generate([make_client(days_since_visit=40)], [], SETTINGS, {})
        assert "29.01.2026" in of_type(result, SuggestionType.WIN_BACK)[0].content

    def test_dismissed_suggestion_does_not_block(self, generator):
        client = make_client(days_since_visit=45)
        dismissed = make_suggestion(client.id, status=SuggestionStatus.DISMISSED)
        result = generator.generate([client], [dismissed], SETTINGS, {})
        assert len(of_type(result, SuggestionType.WIN_BACK)) == 1


class TestProductRecommendation:
    def test_known_interest_gets_bundle(self, generator):
        client = make_client(primary_interest="Beard Care")
        result = generator.generate([client], [], SETTINGS, {})

        (suggestion,) = of_type(result, SuggestionType.PRODUCT_RECOMMENDATION)
        for product in ("Beard Oil", "Beard Balm", "Beard Brush Set"):
            assert product in suggestion.content
        assert "CARE20" in suggestion.content

    @pytest.mark.parametrize("interest,products", [
        ("Hair Styling", ("Styling Pomade", "Sea Salt Spray", "Hair Wax")),
        ("Skincare", ("Face Moisturizer", "Anti-Aging Serum", "SPF Sunscreen")),
        ("Scalp Care", ("Scalp Treatment Oil", "Anti-Dandruff Shampoo", "Scalp Scrub")),
    ])
    def test_each_bundle_lists_three_products(self, generator, interest, products):
        result = generator.generate([make_client(primary_interest=interest)], [], SETTINGS, {})
        (suggestion,) = of_type(result, SuggestionType.PRODUCT_RECOMMENDATION)
        for product in products:
            assert product in suggestion.content

    def test_unknown_interest_is_skipped(self, generator):
        client = make_client(primary_interest="Full Grooming")
        result = generator.generate([client], [], SETTINGS, {})
        assert of_type(result, SuggestionType.PRODUCT_RECOMMENDATION) == []

    def test_pending_product_suggestion_blocks(self, generator):
        client = make_client(primary_interest="Skincare")
        pending = make_suggestion(client.id, SuggestionType.PRODUCT_RECOMMENDATION)
        result = generator.generate([client], [pending], SETTINGS, {})
        assert of_type(result, SuggestionType.PRODUCT_RECOMMENDATION) == []


class TestSeasonalPromotion:
    def test_january_uses_winter_campaign(self, generator):
        result = generator.generate([make_client()], [], SETTINGS, {})
        (promo,) = of_type(result, SuggestionType.PROMOTION)
        assert promo.reason == "Winter Care Special"

    @pytest.mark.parametrize("month,reason", [
        (12, "Winter Care Special"),
        (4, "Spring Campaign"),
        (7, "Summer Special"),
        (10, "Autumn Wellness"),
    ])
    def test_campaign_by_month(self, month, reason):
        generator = OutreachGenerator(RotatingSelector(), today=date(2026, month, 10))
        result = generator.generate([make_client()], [], SETTINGS, {})
        assert of_type(result, SuggestionType.PROMOTION)[0].reason == reason

    def test_sample_is_capped_at_five(self, generator):
        clients = [make_client(f"c-{i}") for i in range(8)]
        result = generator.generate(clients, [], SETTINGS, {})
        assert len(of_type(result, SuggestionType.PROMOTION)) == 5

    def test_clients_with_pending_promotion_are_not_sampled(self, generator):
        busy = make_client("busy")
        free = make_client("free")
        pending = make_suggestion("busy", SuggestionType.PROMOTION, reason="Upgrade: Haircut → Premium")
        result = generator.generate([busy, free], [pending], SETTINGS, {})
        assert [s.client_id for s in of_type(result, SuggestionType.PROMOTION)] == ["free"]

    def test_pending_campaign_skips_the_pass(self, generator):
        pending = make_suggestion("someone-else", SuggestionType.PROMOTION, reason="Winter Care Special")
        result = generator.generate([make_client()], [pending], SETTINGS, {})
        assert of_type(result, SuggestionType.PROMOTION) == []


class TestServiceUpgrade:
    def test_most_frequent_service_with_upgrade(self, generator):
        client = make_client()
        histories = {client.id: make_history(client.id, {"Haircut": 4, "Beard Trim": 2})}
        result = generator.generate([client], [], SETTINGS, histories)

        upgrades = [s for s in of_type(result, SuggestionType.PROMOTION)
                    if s.reason.startswith("Upgrade")]
        assert len(upgrades) == 1
        assert upgrades[0].reason == "Upgrade: Haircut → Premium"
        assert "Haircut + Deep Conditioning" in upgrades[0].content

    def test_service_without_upgrade_is_skipped(self, generator):
        client = make_client()
        histories = {client.id: make_history(client.id, {"Balayage": 3})}
        result = generator.generate([client], [], SETTINGS, histories)
        assert not any(s.reason.startswith("Upgrade") for s in result.suggestions)

    def test_tie_goes_to_alphabetically_first_service(self, generator):
        client = make_client()
        histories = {client.id: make_history(client.id, {"Manicure": 2, "Beard Trim": 2})}
        result = generator.generate([client], [], SETTINGS, histories)
        upgrade = next(s for s in result.suggestions if s.reason.startswith("Upgrade"))
        assert "Beard Trim + Hot Towel Shave" in upgrade.content

    def test_pending_upgrade_blocks(self, generator):
        client = make_client()
        histories = {client.id: make_history(client.id, {"Haircut": 4})}
        pending = make_suggestion(client.id, SuggestionType.PROMOTION, reason="Upgrade: Nail Combo")
        result = generator.generate([client], [pending], SETTINGS, histories)
        assert not any(s.reason.startswith("Upgrade") for s in result.suggestions)

    def test_pending_non_upgrade_promotion_does_not_block(self, generator):
        client = make_client()
        histories = {client.id: make_history(client.id, {"Haircut": 4})}
        pending = make_suggestion(client.id, SuggestionType.PROMOTION, reason="Winter Care Special")
        result = generator.generate([client], [pending], SETTINGS, histories)
        assert any(s.reason.startswith("Upgrade") for s in result.suggestions)


class TestLoyaltyReward:
    def test_five_visits_qualifies(self, generator):
        client = make_client()
        histories = {client.id: make_history(client.id, {"Balayage": 5})}
        result = generator.generate([client], [], SETTINGS, histories)
        loyalty = [s for s in result.suggestions if "Loyalty Bonus" in s.reason]
        assert len(loyalty) == 1
        assert loyalty[0].reason == "Loyalty Bonus - 5 visits"
        assert "€25" in loyalty[0].content

    def test_four_visits_does_not_qualify(self, generator):
        client = make_client()
        histories = {client.id: make_history(client.id, {"Balayage": 4})}
        result = generator.generate([client], [], SETTINGS, histories)
        assert not any("Loyalty Bonus" in s.reason for s in result.suggestions)

    def test_pending_loyalty_blocks(self, generator):
        client = make_client()
        histories = {client.id: make_history(client.id, {"Balayage": 6})}
        pending = make_suggestion(client.id, SuggestionType.PROMOTION, reason="Loyalty Bonus - 5 visits")
        result = generator.generate([client], [pending], SETTINGS, histories)
        assert not any("Loyalty Bonus" in s.reason for s in result.suggestions)


class TestWholeRun:
    def test_passes_do_not_see_each_other(self, generator):
        client = make_client(days_since_visit=45, primary_interest="Beard Care")
        histories = {client.id: make_history(client.id, {"Beard Trim": 6})}
        result = generator.generate([client], [], SETTINGS, histories)

        reasons = [s.reason for s in result.suggestions]
        assert len(of_type(result, SuggestionType.WIN_BACK)) == 1
        assert len(of_type(result, SuggestionType.PRODUCT_RECOMMENDATION)) == 1
        assert "Winter Care Special" in reasons
        assert "Upgrade: Beard → Luxury" in reasons
        assert "Loyalty Bonus - 6 visits" in reasons

    def test_counts_are_reported(self, generator):
        client = make_client(days_since_visit=45, primary_interest="Beard Care")
        result = generator.generate([client], [], SETTINGS, {})
        assert result.generated == len(result.suggestions) == 3
        assert result.by_type == {"win_back": 1, "product_recommendation": 1, "promotion": 1}

    def test_empty_roster(self, generator):
        result = generator.generate([], [], SETTINGS, {})
        assert result.generated == 0
        assert result.suggestions == []

    def test_second_immediate_run_is_empty(self, seeded_repo, generator):
        clients = seeded_repo.clients.list_all()
        histories = seeded_repo.clients.histories()

        first = generator.generate(clients, [], SETTINGS, histories)
        second = generator.generate(clients, as_pending(first), SETTINGS, histories)

        assert first.generated > 0
        assert second.generated == 0


class TestPendingIndex:
    def test_ignores_non_pending(self):
        index = PendingIndex.build([
            make_suggestion("a", status=SuggestionStatus.SENT),
            make_suggestion("b", status=SuggestionStatus.PENDING, suggestion_id=2),
        ])
        assert not index.has("a", SuggestionType.WIN_BACK)
        assert index.has("b", SuggestionType.WIN_BACK)

    def test_reason_predicate(self):
        index = PendingIndex.build([
            make_suggestion("a", SuggestionType.PROMOTION, reason="Upgrade: Nail Combo"),
        ])
        assert index.has("a", SuggestionType.PROMOTION, lambda r: r.startswith("Upgrade"))
        assert not index.has("a", SuggestionType.PROMOTION, lambda r: "Loyalty" in r)
