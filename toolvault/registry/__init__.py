"""Registry Package - Static brand, warranty policy and service centre tables."""

from .brands import BRANDS, DEFAULT_WARRANTY_YEARS, SERIAL_PREFIXES, brand_name, get_brand
from .policies import DEFAULT_COMMON_ISSUES, WARRANTY_POLICIES, get_policy
from .service_centres import SERVICE_CENTRES, get_service_centres

__all__ = [
    "BRANDS",
    "DEFAULT_COMMON_ISSUES",
    "DEFAULT_WARRANTY_YEARS",
    "SERIAL_PREFIXES",
    "SERVICE_CENTRES",
    "WARRANTY_POLICIES",
    "brand_name",
    "get_brand",
    "get_policy",
    "get_service_centres",
]
