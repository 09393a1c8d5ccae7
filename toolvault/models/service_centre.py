"""
Service Centre Model

Authorised repair agents where warranty claims are lodged.
"""

from typing import List
from pydantic import BaseModel, ConfigDict, Field


DIRECTIONS_URL = "https://www.google.com/maps/dir/?api=1&destination={lat},{lng}"


class ServiceCentre(BaseModel):
    """An authorised service centre for one or more brands."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    address: str
    suburb: str
    state: str
    postcode: str
    lat: float
    lng: float
    distance_km: float = Field(ge=0, description="Distance from the Brisbane CBD")
    phone: str
    hours: str
    authorized_brands: List[str] = Field(default_factory=list)

    @property
    def directions_url(self) -> str:
        return DIRECTIONS_URL.format(lat=self.lat, lng=self.lng)

    def services(self, brand_id: str) -> bool:
        return brand_id.strip().lower() in self.authorized_brands
