"""
Demo data for the console demo, the report CLI and local API runs.

Visit dates are expressed as "days ago" so the data stays realistic
relative to whatever day it is loaded on.
"""

import logging
from datetime import date, timedelta
from typing import Optional

from salonassist.schemas.appointment_schema import AppointmentDraft, AppointmentStatus
from salonassist.schemas.catalog_schema import ItemType, ProductDraft, ServiceDraft
from salonassist.schemas.client_schema import Client, VisitRecord
from salonassist.schemas.rule_schema import RuleDraft
from salonassist.schemas.stylist_schema import Stylist
from salonassist.store.repository import SalonRepository

logger = logging.getLogger(__name__)

# name, category, duration (min), price, active
SERVICES: list[tuple[str, str, int, float, bool]] = [
    ("Haircut", "Hair", 30, 35, True),
    ("Hair Color", "Hair", 90, 85, True),
    ("Balayage", "Hair", 120, 150, True),
    ("Deep Conditioning", "Hair", 30, 40, True),
    ("Scalp Treatment", "Hair", 45, 55, True),
    ("Olaplex Treatment", "Hair", 45, 65, True),
    ("Keratin Treatment", "Hair", 150, 200, False),
    ("Beard Trim", "Beard", 20, 20, True),
    ("Hot Towel Shave", "Beard", 30, 35, True),
    ("Facial Treatment", "Face", 60, 75, True),
    ("Manicure", "Nails", 45, 30, True),
    ("Pedicure", "Nails", 60, 45, True),
]

# name, category, price, use case, active
PRODUCTS: list[tuple[str, str, float, str, bool]] = [
    ("Matte Styling Clay", "Hair", 24, "Hold", True),
    ("Sea Salt Spray", "Hair", 18, "Hold", True),
    ("Hair Serum", "Hair", 28, "Repair", True),
    ("Color Protection Shampoo", "Hair", 22, "Repair", True),
    ("Color Protection Conditioner", "Hair", 22, "Repair", True),
    ("Anti-Dandruff Shampoo", "Hair", 19, "Dandruff", True),
    ("Scalp Serum", "Hair", 32, "Dandruff", True),
    ("Volumizing Mousse", "Hair", 20, "Hold", True),
    ("Beard Oil", "Beard", 18, "Moisture", True),
    ("Beard Balm", "Beard", 20, "Hold", True),
    ("Aftershave Balm", "Beard", 15, "Moisture", True),
    ("Face Moisturizer", "Face", 35, "Moisture", True),
    ("SPF Cream", "Face", 38, "Protection", True),
    ("Cuticle Oil", "Nails", 12, "Moisture", True),
    ("Nail Strengthener", "Nails", 16, "Repair", True),
]

SERVICE_RULES: list[tuple[str, list[str], str]] = [
    ("Haircut", ["Deep Conditioning", "Scalp Treatment"], "Restores moisture and supports healthy growth"),
    ("Beard Trim", ["Hot Towel Shave"], "Completes the grooming experience"),
    ("Hair Color", ["Deep Conditioning", "Olaplex Treatment"], "Protects and repairs color-treated hair"),
    ("Balayage", ["Olaplex Treatment"], "Essential care for balayage"),
    ("Manicure", ["Pedicure"], "Complete nail care package"),
    ("Facial Treatment", ["Scalp Treatment"], "Head-to-face grooming"),
]

PRODUCT_RULES: list[tuple[str, list[str], str]] = [
    ("Beard Trim", ["Beard Oil", "Beard Balm"], "Keeps the beard soft and in shape after trimming"),
    ("Haircut", ["Matte Styling Clay", "Sea Salt Spray"], "Perfect for styling a fresh cut"),
    ("Scalp Treatment", ["Anti-Dandruff Shampoo", "Scalp Serum"], "Extends the treatment benefits at home"),
    ("Hair Color", ["Color Protection Shampoo", "Color Protection Conditioner"], "Keeps color vibrant"),
    ("Balayage", ["Color Protection Shampoo", "Hair Serum"], "Protects highlights and adds shine"),
    ("Facial Treatment", ["Face Moisturizer", "SPF Cream"], "Maintains treatment results"),
    ("Deep Conditioning", ["Hair Serum"], "Extra nourishment at home"),
    ("Hot Towel Shave", ["Aftershave Balm", "Face Moisturizer"], "Soothes and hydrates after shaving"),
    ("Manicure", ["Cuticle Oil", "Nail Strengthener"], "Keeps nails healthy between visits"),
    ("Pedicure", ["Cuticle Oil"], ""),
]

# item, type, shown, accepted, dismissed
TRACKING: list[tuple[str, ItemType, int, int, int]] = [
    ("Beard Oil", ItemType.PRODUCT, 45, 28, 8),
    ("Beard Balm", ItemType.PRODUCT, 38, 15, 12),
    ("Matte Styling Clay", ItemType.PRODUCT, 52, 31, 10),
    ("Sea Salt Spray", ItemType.PRODUCT, 35, 12, 15),
    ("Color Protection Shampoo", ItemType.PRODUCT, 28, 18, 5),
    ("Face Moisturizer", ItemType.PRODUCT, 22, 14, 4),
    ("Aftershave Balm", ItemType.PRODUCT, 30, 22, 3),
    ("Cuticle Oil", ItemType.PRODUCT, 25, 16, 6),
    ("Deep Conditioning", ItemType.SERVICE, 40, 18, 12),
    ("Hot Towel Shave", ItemType.SERVICE, 32, 20, 7),
    ("Scalp Treatment", ItemType.SERVICE, 28, 10, 10),
    ("Olaplex Treatment", ItemType.SERVICE, 18, 8, 5),
    ("Pedicure", ItemType.SERVICE, 20, 12, 4),
]

CLIENTS: list[dict] = [
    {"id": "client-001", "name": "Mark Ross", "tags": ["Hair Styling", "Beard Care"],
     "primary_interest": "Hair Styling", "preferences": "Prefers matte products. Quick appointments.",
     "issues": "Dry scalp in winter"},
    {"id": "client-002", "name": "Julia White", "tags": ["Skincare", "Hair Styling"],
     "primary_interest": "Skincare", "preferences": "Sensitive skin. Fragrance-free products only.",
     "issues": "Skin prone to redness"},
    {"id": "client-003", "name": "Frances Marsh", "tags": ["Nails", "Skincare"],
     "primary_interest": "Nails", "preferences": "Gel polish only. Neutral colors.",
     "issues": "Brittle nails"},
    {"id": "client-004", "name": "Sophie Collins", "tags": ["Hair Styling", "Hair Color"],
     "primary_interest": "Hair Color", "preferences": "Balayage specialist. Books long slots.",
     "issues": "Color fades quickly"},
    {"id": "client-005", "name": "Alex Smith", "tags": ["Beard Care"],
     "primary_interest": "Beard Care", "preferences": "Full beard maintenance. Natural oils.",
     "issues": "Patchy growth on the left side"},
    {"id": "client-006", "name": "Luke Rowe", "tags": ["Hair Styling", "Scalp Care"],
     "primary_interest": "Scalp Care", "preferences": "Short appointments. Minimal styling.",
     "issues": "Dandruff, oily scalp"},
    {"id": "client-007", "name": "Isabel Rich", "tags": ["Skincare", "Nails"],
     "primary_interest": "Full Grooming", "preferences": "Monthly spa package. Premium products only.",
     "issues": "None noted"},
    {"id": "client-008", "name": "Joseph Green", "tags": ["Hair Styling"],
     "primary_interest": "Hair Styling", "preferences": "Classic cuts only. No products.",
     "issues": "Thinning hair"},
    {"id": "client-009", "name": "Valerie Stone", "tags": ["Hair Color", "Hair Styling"],
     "primary_interest": "Hair Color", "preferences": "Bold colors.",
     "issues": "Ends damaged from bleaching"},
]

# client id -> (days ago, time, services, products)
HISTORY: dict[str, list[tuple[int, str, list[str], list[str]]]] = {
    "client-001": [
        (9, "10:00", ["Haircut", "Beard Trim"], ["Matte Styling Clay"]),
        (23, "11:30", ["Haircut"], ["Beard Oil"]),
        (37, "09:00", ["Beard Trim", "Hot Towel Shave"], ["Aftershave Balm"]),
        (51, "14:00", ["Haircut", "Scalp Treatment"], []),
        (65, "10:30", ["Haircut", "Beard Trim"], ["Beard Balm", "Matte Styling Clay"]),
        (79, "15:00", ["Beard Trim"], ["Beard Oil"]),
    ],
    "client-002": [
        (4, "13:00", ["Facial Treatment"], ["Face Moisturizer"]),
        (19, "11:00", ["Haircut", "Facial Treatment"], ["SPF Cream"]),
        (34, "14:30", ["Facial Treatment"], []),
        (48, "10:00", ["Haircut"], []),
        (62, "15:00", ["Facial Treatment", "Scalp Treatment"], ["Scalp Serum"]),
    ],
    "client-003": [
        (7, "11:00", ["Manicure", "Pedicure"], ["Cuticle Oil"]),
        (21, "14:00", ["Manicure"], ["Nail Strengthener"]),
        (35, "10:30", ["Manicure", "Pedicure"], ["Cuticle Oil"]),
        (49, "13:00", ["Manicure"], []),
        (63, "11:00", ["Manicure", "Facial Treatment"], ["Face Moisturizer"]),
        (77, "15:30", ["Pedicure"], ["Cuticle Oil"]),
    ],
    "client-004": [
        (45, "09:00", ["Balayage", "Deep Conditioning"], ["Color Protection Shampoo"]),
        (73, "10:00", ["Hair Color", "Haircut"], ["Color Protection Conditioner"]),
        (101, "09:30", ["Balayage"], ["Hair Serum", "Color Protection Shampoo"]),
    ],
    "client-005": [
        (5, "12:00", ["Beard Trim"], ["Beard Oil"]),
        (12, "12:00", ["Beard Trim", "Hot Towel Shave"], ["Beard Balm", "Aftershave Balm"]),
        (19, "11:30", ["Beard Trim"], []),
        (26, "10:00", ["Beard Trim", "Haircut"], ["Beard Oil", "Matte Styling Clay"]),
        (33, "12:30", ["Beard Trim"], ["Beard Oil"]),
        (40, "11:00", ["Beard Trim", "Hot Towel Shave"], ["Aftershave Balm"]),
    ],
    "client-006": [
        (14, "16:00", ["Haircut", "Scalp Treatment"], ["Anti-Dandruff Shampoo"]),
        (28, "15:30", ["Haircut"], []),
        (42, "14:00", ["Scalp Treatment"], ["Scalp Serum"]),
        (56, "16:30", ["Haircut", "Scalp Treatment"], ["Anti-Dandruff Shampoo"]),
    ],
    "client-007": [
        (8, "10:00", ["Facial Treatment", "Manicure", "Pedicure"], ["Face Moisturizer", "Cuticle Oil"]),
        (36, "10:00", ["Facial Treatment", "Manicure"], ["Nail Strengthener"]),
        (64, "10:00", ["Facial Treatment", "Manicure", "Pedicure"], ["SPF Cream", "Cuticle Oil"]),
        (92, "10:00", ["Facial Treatment", "Pedicure"], ["Face Moisturizer"]),
        (120, "10:00", ["Facial Treatment", "Manicure"], []),
    ],
    "client-008": [
        (62, "09:30", ["Haircut"], []),
        (90, "10:00", ["Haircut"], []),
        (118, "09:00", ["Haircut", "Scalp Treatment"], ["Volumizing Mousse"]),
    ],
}

# id, name, specialties, active
STYLISTS: list[tuple[str, str, list[str], bool]] = [
    ("stylist-001", "Anna", ["Hair", "Beard"], True),
    ("stylist-002", "Marta", ["Hair", "Color"], True),
    ("stylist-003", "Chiara", ["Nails", "Face"], True),
    ("stylist-004", "Paolo", ["Hair", "Beard"], True),
    ("stylist-005", "Luca", ["Beard"], False),
]

# client id, stylist id, days from today, time, status, services, products
APPOINTMENTS: list[tuple[str, str, int, str, AppointmentStatus, list[str], list[str]]] = [
    ("client-001", "stylist-001", 0, "10:00", AppointmentStatus.SCHEDULED, ["Haircut", "Beard Trim"], []),
    ("client-004", "stylist-002", 0, "11:30", AppointmentStatus.IN_PROGRESS, ["Hair Color"], []),
    ("client-003", "stylist-003", 0, "14:00", AppointmentStatus.SCHEDULED, ["Manicure"], ["Cuticle Oil"]),
    ("client-009", "stylist-002", 1, "09:00", AppointmentStatus.SCHEDULED, ["Balayage"], []),
    ("client-005", "stylist-004", -1, "12:00", AppointmentStatus.COMPLETED, ["Beard Trim", "Hot Towel Shave"], ["Beard Oil"]),
    ("client-006", "stylist-001", -2, "16:00", AppointmentStatus.NO_SHOW, ["Haircut"], []),
]


def seed_repository(repo: SalonRepository, today: Optional[date] = None) -> None:
    """Load the demo catalog, rules, stylists, clients, history and appointments."""
    today = today or date.today()

    for name, category, duration, price, active in SERVICES:
        repo.catalog.add_service(
            ServiceDraft(name=name, category=category, duration=duration, price=price, active=active)
        )
    for name, category, price, use_case, active in PRODUCTS:
        repo.catalog.add_product(
            ProductDraft(name=name, category=category, price=price, use_case=use_case, active=active)
        )

    for trigger, suggestions, reason in SERVICE_RULES:
        repo.rules.create(ItemType.SERVICE, RuleDraft(trigger=trigger, suggestions=suggestions, reason=reason))
    for trigger, suggestions, reason in PRODUCT_RULES:
        repo.rules.create(ItemType.PRODUCT, RuleDraft(trigger=trigger, suggestions=suggestions, reason=reason))

    for item_name, item_type, shown, accepted, dismissed in TRACKING:
        for event, amount in (("shown", shown), ("accepted", accepted), ("dismissed", dismissed)):
            if amount:
                repo.tracking.increment(item_name, item_type, event, amount)

    for stylist_id, name, specialties, active in STYLISTS:
        repo.stylists.add(Stylist(id=stylist_id, name=name, specialties=specialties, active=active))

    for data in CLIENTS:
        repo.clients.add(Client(**data))
    for client_id, visits in HISTORY.items():
        for days_ago, time, services, products in visits:
            repo.clients.add_visit(VisitRecord(
                client_id=client_id,
                date=today - timedelta(days=days_ago),
                time=time,
                services=services,
                products=products,
            ))

    for index, (client_id, stylist_id, offset, time, status, services, products) in enumerate(
        APPOINTMENTS, start=1
    ):
        client = repo.clients.get(client_id)
        stylist = repo.stylists.get(stylist_id)
        repo.appointments.create(
            AppointmentDraft(
                client_id=client_id,
                client_name=client.name,
                stylist_id=stylist.id,
                stylist_name=stylist.name,
                date=(today + timedelta(days=offset)).isoformat(),
                time=time,
                status=status,
                services=services,
                products=products,
            ),
            appointment_id=f"apt-{index:03d}",
        )

    logger.info(
        "Seeded %d services, %d products, %d stylists, %d clients, %d appointments",
        len(SERVICES), len(PRODUCTS), len(STYLISTS), len(CLIENTS), len(APPOINTMENTS),
    )
