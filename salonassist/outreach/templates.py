"""
Offer tables and email builders for outreach suggestions.

Each builder returns ``(subject, body)``. The salon's sign-off name is
injected from configuration, not hardcoded.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from salonassist.config import settings
from salonassist.utils import format_display_date

SIGN_OFF = f"Warm regards,\nYour {settings.app_name} Team"
RULE = "━" * 28

UPGRADE_REASON_PREFIX = "Upgrade"
LOYALTY_REASON_TAG = "Loyalty Bonus"


@dataclass(frozen=True)
class WinBackOffer:
    discount: str
    service: str
    code: str


@dataclass(frozen=True)
class ProductBundle:
    interest: str
    products: tuple[str, ...]
    discount: str

    @property
    def code(self) -> str:
        return "CARE" + self.discount.rstrip("%")


@dataclass(frozen=True)
class SeasonalCampaign:
    key: str
    months: tuple[int, ...]
    name: str
    offer: str
    reason: str


@dataclass(frozen=True)
class UpgradeOffer:
    from_service: str
    to_service: str
    savings: str
    reason: str


WIN_BACK_OFFERS: tuple[WinBackOffer, ...] = (
    WinBackOffer("15%", "your next service", "COMEBACK15"),
    WinBackOffer("20%", "a hair treatment", "WELCOME20"),
    WinBackOffer("€10", "your next visit", "MISS10"),
)

PRODUCT_BUNDLES: tuple[ProductBundle, ...] = (
    ProductBundle("Hair Styling", ("Styling Pomade", "Sea Salt Spray", "Hair Wax"), "10%"),
    ProductBundle("Hair Color", ("Color Protection Shampoo", "Color Mask", "Olaplex Treatment"), "15%"),
    ProductBundle("Beard Care", ("Beard Oil", "Beard Balm", "Beard Brush Set"), "20%"),
    ProductBundle("Skincare", ("Face Moisturizer", "Anti-Aging Serum", "SPF Sunscreen"), "15%"),
    ProductBundle("Scalp Care", ("Scalp Treatment Oil", "Anti-Dandruff Shampoo", "Scalp Scrub"), "10%"),
)

# Checked in this order; the first campaign whose months include the current one wins.
SEASONAL_CAMPAIGNS: tuple[SeasonalCampaign, ...] = (
    SeasonalCampaign("winter", (12, 1, 2), "Winter Wellness",
                     "Free Deep Conditioning with every Haircut", "Winter Care Special"),
    SeasonalCampaign("spring", (3, 4, 5), "Spring Refresh",
                     "20% off all Color services", "Spring Campaign"),
    SeasonalCampaign("summer", (6, 7, 8), "Summer Glow",
                     "Free Scalp Treatment with any service over €50", "Summer Special"),
    SeasonalCampaign("autumn", (9, 10, 11), "Autumn Pampering",
                     "25% off Facial Treatments", "Autumn Wellness"),
)

UPGRADE_OFFERS: tuple[UpgradeOffer, ...] = (
    UpgradeOffer("Haircut", "Haircut + Deep Conditioning", "€15", "Upgrade: Haircut → Premium"),
    UpgradeOffer("Beard Trim", "Beard Trim + Hot Towel Shave", "€10", "Upgrade: Beard → Luxury"),
    UpgradeOffer("Manicure", "Manicure + Pedicure Combo", "€20", "Upgrade: Nail Combo"),
    UpgradeOffer("Facial Treatment", "Facial + Scalp Treatment", "€25", "Upgrade: Wellness Package"),
)

LOYALTY_FREE_PRODUCT_CAP = "€25"
LOYALTY_SERVICE_DISCOUNT = "10%"
LOYALTY_DISCOUNT_MONTHS = 3


def find_product_bundle(interest: Optional[str]) -> Optional[ProductBundle]:
    for bundle in PRODUCT_BUNDLES:
        if bundle.interest == interest:
            return bundle
    return None


def find_upgrade_offer(service: Optional[str]) -> Optional[UpgradeOffer]:
    for offer in UPGRADE_OFFERS:
        if offer.from_service == service:
            return offer
    return None


def campaign_for_month(month: int) -> SeasonalCampaign:
    for campaign in SEASONAL_CAMPAIGNS:
        if month in campaign.months:
            return campaign
    return SEASONAL_CAMPAIGNS[0]


def build_win_back_email(
    client_name: str, days_since_visit: Optional[int], offer: WinBackOffer, valid_until: date
) -> tuple[str, str]:
    subject = f"{client_name}, we miss you! {offer.discount} off is waiting for you"
    if days_since_visit is None:
        opening = "It has been a while since we last welcomed you. We miss you!"
    else:
        opening = f"It has been {days_since_visit} days since we last welcomed you. We miss you!"
    body = "\n".join([
        f"Hello {client_name},",
        "",
        opening,
        "",
        "EXCLUSIVE OFFER JUST FOR YOU:",
        RULE,
        f"{offer.discount} off {offer.service}",
        f"Voucher code: {offer.code}",
        f"Valid until: {format_display_date(valid_until)}",
        RULE,
        "",
        "Book your appointment now and let our team pamper you!",
        "",
        SIGN_OFF,
    ])
    return subject, body


def build_product_email(client_name: str, bundle: ProductBundle) -> tuple[str, str]:
    subject = f"{client_name}, new products for your {bundle.interest} routine!"
    body = "\n".join([
        f"Hello {client_name},",
        "",
        "Based on your preferences we picked the perfect products for you!",
        "",
        f"RECOMMENDED FOR YOU ({bundle.interest}):",
        RULE,
        *[f"  • {product}" for product in bundle.products],
        "",
        f"SPECIAL: {bundle.discount} OFF",
        f"all {bundle.interest} products with the code: {bundle.code}",
        "",
        "These products complement your regular treatments and help you keep the results at home.",
        "",
        SIGN_OFF,
    ])
    return subject, body


def build_promotion_email(
    client_name: str, campaign: SeasonalCampaign, valid_until: date
) -> tuple[str, str]:
    subject = f"{campaign.name} special for you, {client_name}!"
    body = "\n".join([
        f"Hello {client_name},",
        "",
        "We have an exclusive offer for you!",
        "",
        f"{campaign.name.upper()} SPECIAL",
        RULE,
        campaign.offer,
        RULE,
        "",
        "This offer is only available for a short time and is exclusive to loyal clients like you!",
        f"Valid until: {format_display_date(valid_until)}",
        "",
        SIGN_OFF,
    ])
    return subject, body


def build_upgrade_email(client_name: str, offer: UpgradeOffer) -> tuple[str, str]:
    subject = f"{client_name}, save {offer.savings} with an upgrade!"
    body = "\n".join([
        f"Hello {client_name},",
        "",
        f"We noticed you regularly book our {offer.from_service} service. Thank you for your loyalty!",
        "",
        "EXCLUSIVE UPGRADE OFFER:",
        RULE,
        f"Instead of: {offer.from_service}",
        f"Upgrade to: {offer.to_service}",
        "",
        f"YOU SAVE: {offer.savings}",
        RULE,
        "",
        'Just mention the keyword "UPGRADE" when you book.',
        "",
        SIGN_OFF,
    ])
    return subject, body


def build_loyalty_email(client_name: str, visit_count: int) -> tuple[str, str]:
    subject = f"Thank you for your loyalty, {client_name}! A gift is waiting"
    body = "\n".join([
        f"Hello {client_name},",
        "",
        f"You have visited us {visit_count} times already!",
        "",
        "As a thank you, we have a special gift for you:",
        "",
        "YOUR LOYALTY BONUS:",
        RULE,
        f"✓ A FREE product of your choice (up to {LOYALTY_FREE_PRODUCT_CAP} value)",
        "  at your next visit",
        "",
        f"✓ PLUS: {LOYALTY_SERVICE_DISCOUNT} off all services",
        f"  for the next {LOYALTY_DISCOUNT_MONTHS} months",
        RULE,
        "",
        "Simply show this email at your next appointment.",
        "",
        SIGN_OFF,
    ])
    return subject, body


def loyalty_reason(visit_count: int) -> str:
    return f"{LOYALTY_REASON_TAG} - {visit_count} visits"


def win_back_reason(offer: WinBackOffer, days_since_visit: Optional[int]) -> str:
    if days_since_visit is None:
        return f"{offer.discount} off - no recorded visit"
    return f"{offer.discount} off - last visit {days_since_visit} days ago"


def product_reason(bundle: ProductBundle) -> str:
    return f"{bundle.interest} products - {bundle.discount} off"
