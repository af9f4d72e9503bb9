"""Stylist endpoints. Read-only; the roster comes from seed data."""

from fastapi import APIRouter, Depends

from salonassist.api.dependencies import get_repo
from salonassist.schemas.stylist_schema import Stylist
from salonassist.store.repository import SalonRepository

router = APIRouter(prefix="/api/stylists", tags=["Stylists"])


@router.get("", response_model=list[Stylist])
def list_stylists(repo: SalonRepository = Depends(get_repo)):
    return repo.stylists.list_all()


@router.get("/active", response_model=list[Stylist])
def list_active_stylists(repo: SalonRepository = Depends(get_repo)):
    return repo.stylists.list_all(active_only=True)


@router.get("/{stylist_id}", response_model=Stylist)
def get_stylist(stylist_id: str, repo: SalonRepository = Depends(get_repo)):
    return repo.stylists.get(stylist_id)
