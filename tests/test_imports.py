"""Tests for import chains and module integrity.

Ensures all public modules can be imported without errors and
that re-exports from __init__.py files work correctly.
"""


class TestSchemaImports:
    def test_import_catalog_schema(self):
        from salonassist.schemas.catalog_schema import ItemType, Product, Service
        assert ItemType.SERVICE == "service"
        assert Service is not None and Product is not None

    def test_import_outreach_schema(self):
        from salonassist.schemas.outreach_schema import SuggestionStatus, SuggestionType
        assert SuggestionStatus.PENDING == "pending"
        assert SuggestionType.APPOINTMENT_REMINDER == "appointment_reminder"

    def test_camel_case_aliases(self):
        from salonassist.schemas.recommendation_schema import TrackingCounter
        counter = TrackingCounter(itemName="Beard Oil", type="product")
        assert counter.model_dump(by_alias=True)["itemName"] == "Beard Oil"


class TestPackageImports:
    def test_import_recommendation_package(self):
        from salonassist.recommendation import RecommendationService, recommend
        assert callable(recommend)
        assert RecommendationService is not None

    def test_import_outreach_package(self):
        from salonassist.outreach import (
            InvalidTransitionError, OutreachGenerator, OutreachService,
            PendingIndex, RandomSelector, RotatingSelector, SuggestionAction,
        )
        assert issubclass(InvalidTransitionError, Exception)
        assert len(SuggestionAction) == 2

    def test_import_analytics_package(self):
        from salonassist.analytics import AnalyticsCalculator, AnalyticsMetrics, PriceLookup
        assert AnalyticsMetrics().cross_sell_rate == 0.0

    def test_import_api(self):
        from salonassist.api import create_app
        assert callable(create_app)


class TestConfigImport:
    def test_import_config(self):
        from salonassist.config import settings
        assert settings.outreach.win_back_threshold_days >= 1
        assert settings.pricing.default_service_price >= 0
        assert settings.app_name


class TestConsoleDemo:
    def test_console_session_imports(self):
        from console_demo import ConsoleSession
        session = ConsoleSession()
        assert session.repo.appointments.exists("apt-001")
        assert "outreach" in ConsoleSession.SCENARIOS
