"""
In-memory service and product catalog.

In production this is backed by the salon's SQL store; here it keeps
records in dicts keyed by id. Item names are unique per kind.
"""

import logging
from typing import Optional, Union

from salonassist.schemas.catalog_schema import (
    ItemType,
    Product,
    ProductDraft,
    Service,
    ServiceDraft,
)
from salonassist.store.errors import DuplicateRecordError, RecordNotFoundError

logger = logging.getLogger(__name__)

CatalogItem = Union[Service, Product]


class CatalogStore:
    """Services and products, with active-status and price lookups by name."""

    def __init__(self) -> None:
        self._items: dict[ItemType, dict[int, CatalogItem]] = {
            ItemType.SERVICE: {},
            ItemType.PRODUCT: {},
        }
        self._next_id = 1

    # --- services ---

    def add_service(self, draft: ServiceDraft) -> Service:
        return self._add(ItemType.SERVICE, Service(id=self._take_id(), **draft.model_dump()))

    def update_service(self, service_id: int, draft: ServiceDraft) -> Service:
        return self._update(ItemType.SERVICE, service_id, Service(id=service_id, **draft.model_dump()))

    def get_service(self, service_id: int) -> Service:
        return self._get(ItemType.SERVICE, service_id)

    def list_services(self, active_only: bool = False) -> list[Service]:
        return self._list(ItemType.SERVICE, active_only)

    # --- products ---

    def add_product(self, draft: ProductDraft) -> Product:
        return self._add(ItemType.PRODUCT, Product(id=self._take_id(), **draft.model_dump()))

    def update_product(self, product_id: int, draft: ProductDraft) -> Product:
        return self._update(ItemType.PRODUCT, product_id, Product(id=product_id, **draft.model_dump()))

    def get_product(self, product_id: int) -> Product:
        return self._get(ItemType.PRODUCT, product_id)

    def list_products(self, active_only: bool = False) -> list[Product]:
        return self._list(ItemType.PRODUCT, active_only)

    # --- shared ---

    def set_active(self, item_type: ItemType, item_id: int, active: bool) -> CatalogItem:
        item = self._items[item_type].get(item_id)
        if item is None:
            raise RecordNotFoundError(item_type.value.capitalize(), item_id)
        item.active = active
        logger.info("%s '%s' active=%s", item_type.value.capitalize(), item.name, active)
        return item.model_copy()

    def find_by_name(self, item_type: ItemType, name: str) -> Optional[CatalogItem]:
        for item in self._items[item_type].values():
            if item.name == name:
                return item.model_copy()
        return None

    def is_active(self, item_type: ItemType, name: str) -> bool:
        """True only for items that exist and are active."""
        item = self.find_by_name(item_type, name)
        return item is not None and item.active

    def is_service_active(self, name: str) -> bool:
        return self.is_active(ItemType.SERVICE, name)

    def is_product_active(self, name: str) -> bool:
        return self.is_active(ItemType.PRODUCT, name)

    def price_of(self, item_type: ItemType, name: str) -> Optional[float]:
        item = self.find_by_name(item_type, name)
        return item.price if item else None

    def reset(self) -> None:
        """Clear the catalog. Used by test fixtures for isolation."""
        for items in self._items.values():
            items.clear()
        self._next_id = 1

    def _take_id(self) -> int:
        item_id = self._next_id
        self._next_id += 1
        return item_id

    def _add(self, item_type: ItemType, item: CatalogItem) -> CatalogItem:
        if self.find_by_name(item_type, item.name) is not None:
            raise DuplicateRecordError(
                f"{item_type.value.capitalize()} '{item.name}' already exists."
            )
        self._items[item_type][item.id] = item
        logger.info("%s added: %s (%.2f)", item_type.value.capitalize(), item.name, item.price)
        return item.model_copy()

    def _update(self, item_type: ItemType, item_id: int, item: CatalogItem) -> CatalogItem:
        if item_id not in self._items[item_type]:
            raise RecordNotFoundError(item_type.value.capitalize(), item_id)
        existing = self.find_by_name(item_type, item.name)
        if existing is not None and existing.id != item_id:
            raise DuplicateRecordError(
                f"{item_type.value.capitalize()} '{item.name}' already exists."
            )
        self._items[item_type][item_id] = item
        logger.info("%s updated: %s", item_type.value.capitalize(), item.name)
        return item.model_copy()

    def _get(self, item_type: ItemType, item_id: int) -> CatalogItem:
        item = self._items[item_type].get(item_id)
        if item is None:
            raise RecordNotFoundError(item_type.value.capitalize(), item_id)
        return item.model_copy()

    def _list(self, item_type: ItemType, active_only: bool) -> list:
        items = sorted(self._items[item_type].values(), key=lambda i: (i.category, i.name))
        return [i.model_copy() for i in items if i.active or not active_only]
