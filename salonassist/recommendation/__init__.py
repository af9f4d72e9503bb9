from salonassist.recommendation.engine import recommend
from salonassist.recommendation.profile import suggest_services_for_client
from salonassist.recommendation.service import RecommendationService

__all__ = ["recommend", "suggest_services_for_client", "RecommendationService"]
