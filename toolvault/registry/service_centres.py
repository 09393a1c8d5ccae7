"""
Service Centre Registry

Authorised service centres around Brisbane, nearest first.
"""

from typing import List, Optional, Tuple

from toolvault.models import ServiceCentre


SERVICE_CENTRES: Tuple[ServiceCentre, ...] = (
    ServiceCentre(
        id="sc-total-tools-brendale",
        name="Total Tools Brendale",
        address="2/25 Leitchs Rd",
        suburb="Brendale",
        state="QLD",
        postcode="4500",
        lat=-27.3262,
        lng=152.9848,
        distance_km=17.2,
        phone="(07) 3205 6455",
        hours="Mon-Fri 6:30am-5pm, Sat 7am-4pm",
        authorized_brands=["milwaukee", "makita", "dewalt"],
    ),
    ServiceCentre(
        id="sc-sydney-tools-geebung",
        name="Sydney Tools Geebung",
        address="1/312 Newman Rd",
        suburb="Geebung",
        state="QLD",
        postcode="4034",
        lat=-27.3727,
        lng=153.0476,
        distance_km=11.4,
        phone="(07) 3265 1877",
        hours="Mon-Fri 7am-5pm, Sat 7am-3pm",
        authorized_brands=["makita", "dewalt", "bosch"],
    ),
    ServiceCentre(
        id="sc-coopers-plains-power-tools",
        name="Coopers Plains Power Tool Repairs",
        address="14 Orange Grove Rd",
        suburb="Coopers Plains",
        state="QLD",
        postcode="4108",
        lat=-27.5651,
        lng=153.0398,
        distance_km=12.8,
        phone="(07) 3345 2210",
        hours="Mon-Fri 7:30am-4:30pm",
        authorized_brands=["milwaukee", "bosch", "makita"],
    ),
    ServiceCentre(
        id="sc-windsor-mower-centre",
        name="Windsor Mower & Chainsaw Centre",
        address="88 Lutwyche Rd",
        suburb="Windsor",
        state="QLD",
        postcode="4030",
        lat=-27.4331,
        lng=153.0321,
        distance_km=4.6,
        phone="(07) 3357 4411",
        hours="Mon-Fri 8am-5pm, Sat 8am-12pm",
        authorized_brands=["stihl", "husqvarna"],
    ),
    ServiceCentre(
        id="sc-capalaba-outdoor-power",
        name="Capalaba Outdoor Power Equipment",
        address="5 Redland Bay Rd",
        suburb="Capalaba",
        state="QLD",
        postcode="4157",
        lat=-27.5280,
        lng=153.1936,
        distance_km=19.5,
        phone="(07) 3390 6120",
        hours="Mon-Fri 7:30am-5pm, Sat 8am-1pm",
        authorized_brands=["stihl", "husqvarna", "makita"],
    ),
    ServiceCentre(
        id="sc-rocklea-tool-service",
        name="Rocklea Tool Service",
        address="1520 Ipswich Rd",
        suburb="Rocklea",
        state="QLD",
        postcode="4106",
        lat=-27.5437,
        lng=152.9987,
        distance_km=9.7,
        phone="(07) 3277 3098",
        hours="Mon-Fri 7am-4pm",
        authorized_brands=["dewalt", "milwaukee", "bosch"],
    ),
)


def get_service_centres(brand_id: Optional[str] = None) -> List[ServiceCentre]:
    """
    Service centres authorised for a brand, nearest first.

    Args:
        brand_id: Brand to filter by; None or "all" returns every centre
    """
    centres = list(SERVICE_CENTRES)
    if brand_id and brand_id.strip().lower() != "all":
        centres = [centre for centre in centres if centre.services(brand_id)]
    return sorted(centres, key=lambda centre: centre.distance_km)
