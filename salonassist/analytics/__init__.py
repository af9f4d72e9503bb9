from salonassist.analytics.metrics import AnalyticsCalculator, AnalyticsMetrics, PriceLookup

__all__ = ["AnalyticsCalculator", "AnalyticsMetrics", "PriceLookup"]
