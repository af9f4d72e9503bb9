"""Stylist records."""

from pydantic import Field

from salonassist.schemas.base import CamelModel


class Stylist(CamelModel):
    id: str
    name: str
    active: bool = True
    specialties: list[str] = Field(default_factory=list)
