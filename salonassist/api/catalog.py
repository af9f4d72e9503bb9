"""Service and product catalog endpoints."""

from fastapi import APIRouter, Depends

from salonassist.api.dependencies import get_repo
from salonassist.logging_context import get_request_logger
from salonassist.schemas.catalog_schema import (
    ActiveToggle,
    ItemType,
    Product,
    ProductDraft,
    Service,
    ServiceDraft,
)
from salonassist.store.repository import SalonRepository

logger = get_request_logger(__name__)

services_router = APIRouter(prefix="/api/services", tags=["Catalog"])
products_router = APIRouter(prefix="/api/products", tags=["Catalog"])


@services_router.get("", response_model=list[Service])
def list_services(active_only: bool = False, repo: SalonRepository = Depends(get_repo)):
    return repo.catalog.list_services(active_only=active_only)


@services_router.get("/{service_id}", response_model=Service)
def get_service(service_id: int, repo: SalonRepository = Depends(get_repo)):
    return repo.catalog.get_service(service_id)


@services_router.post("", response_model=Service, status_code=201)
def create_service(draft: ServiceDraft, repo: SalonRepository = Depends(get_repo)):
    return repo.catalog.add_service(draft)


@services_router.put("/{service_id}", response_model=Service)
def update_service(service_id: int, draft: ServiceDraft, repo: SalonRepository = Depends(get_repo)):
    return repo.catalog.update_service(service_id, draft)


@services_router.patch("/{service_id}/toggle", response_model=Service)
def toggle_service(service_id: int, body: ActiveToggle, repo: SalonRepository = Depends(get_repo)):
    """Activate or deactivate a service. Inactive services are never recommended."""
    return repo.catalog.set_active(ItemType.SERVICE, service_id, body.active)


@products_router.get("", response_model=list[Product])
def list_products(active_only: bool = False, repo: SalonRepository = Depends(get_repo)):
    return repo.catalog.list_products(active_only=active_only)


@products_router.get("/{product_id}", response_model=Product)
def get_product(product_id: int, repo: SalonRepository = Depends(get_repo)):
    return repo.catalog.get_product(product_id)


@products_router.post("", response_model=Product, status_code=201)
def create_product(draft: ProductDraft, repo: SalonRepository = Depends(get_repo)):
    return repo.catalog.add_product(draft)


@products_router.put("/{product_id}", response_model=Product)
def update_product(product_id: int, draft: ProductDraft, repo: SalonRepository = Depends(get_repo)):
    return repo.catalog.update_product(product_id, draft)


@products_router.patch("/{product_id}/toggle", response_model=Product)
def toggle_product(product_id: int, body: ActiveToggle, repo: SalonRepository = Depends(get_repo)):
    return repo.catalog.set_active(ItemType.PRODUCT, product_id, body.active)
