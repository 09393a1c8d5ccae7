"""
Brand Registry

Static catalogue of supported manufacturers and the serial prefix table
used for brand detection. Loaded once at import and exposed read-only.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from toolvault.models import Brand, SerialPrefixEntry


SERIAL_PREFIXES: Tuple[SerialPrefixEntry, ...] = (
    SerialPrefixEntry(brand_id="milwaukee", prefixes=["M18", "M12", "2"]),
    SerialPrefixEntry(brand_id="makita", prefixes=["DH", "DF", "BL", "HP", "GA"]),
    SerialPrefixEntry(brand_id="dewalt", prefixes=["DCD", "DCF", "DCS", "DWE"]),
    SerialPrefixEntry(brand_id="bosch", prefixes=["GBH", "GSB", "GWS", "PSB"]),
    SerialPrefixEntry(brand_id="stihl", prefixes=["MS", "HS", "BG", "BR"]),
    SerialPrefixEntry(brand_id="husqvarna", prefixes=["HUS", "115", "120", "125", "130"]),
)

_PREFIXES_BY_BRAND = {entry.brand_id: list(entry.prefixes) for entry in SERIAL_PREFIXES}

# Default warranty used when the brand is unknown at save time
DEFAULT_WARRANTY_YEARS = 3

BRANDS: Mapping[str, Brand] = MappingProxyType({
    "milwaukee": Brand(
        id="milwaukee",
        name="Milwaukee",
        color="#DB011C",
        serial_prefixes=_PREFIXES_BY_BRAND["milwaukee"],
        default_warranty_years=5,
        policy_text="5-year limited warranty on power tools from date of purchase. "
                    "M18 and M12 REDLITHIUM batteries are covered for 2 years.",
    ),
    "makita": Brand(
        id="makita",
        name="Makita",
        color="#008C95",
        serial_prefixes=_PREFIXES_BY_BRAND["makita"],
        default_warranty_years=3,
        policy_text="3-year warranty when registered on MyMakita within 30 days of purchase, "
                    "otherwise 1 year.",
    ),
    "dewalt": Brand(
        id="dewalt",
        name="DeWalt",
        color="#FEBD17",
        serial_prefixes=_PREFIXES_BY_BRAND["dewalt"],
        default_warranty_years=3,
        policy_text="3-year limited warranty with 1 year of free service.",
    ),
    "bosch": Brand(
        id="bosch",
        name="Bosch",
        color="#005691",
        serial_prefixes=_PREFIXES_BY_BRAND["bosch"],
        default_warranty_years=3,
        policy_text="3-year professional warranty through Bosch Authorised Service Agents.",
    ),
    "stihl": Brand(
        id="stihl",
        name="Stihl",
        color="#F37A1F",
        serial_prefixes=_PREFIXES_BY_BRAND["stihl"],
        default_warranty_years=2,
        policy_text="2-year domestic warranty, claims lodged through an authorised Stihl dealer.",
    ),
    "husqvarna": Brand(
        id="husqvarna",
        name="Husqvarna",
        color="#273A60",
        serial_prefixes=_PREFIXES_BY_BRAND["husqvarna"],
        default_warranty_years=2,
        policy_text="2-year consumer warranty, extendable to 5 years when registered online "
                    "within 30 days.",
    ),
})


def get_brand(brand_id: Optional[str]) -> Optional[Brand]:
    """Look up a brand by id (case-insensitive). Returns None when unknown."""
    if not brand_id:
        return None
    return BRANDS.get(brand_id.strip().lower())


def brand_name(brand_id: Optional[str], fallback: str = "the manufacturer") -> str:
    brand = get_brand(brand_id)
    return brand.name if brand else fallback
