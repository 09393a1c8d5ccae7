"""
Warranty Policy Registry

Manufacturer warranty policies keyed by brand id: clauses, exclusions,
common issues offered as quick picks in the claim flow, and the
Australian Consumer Law note.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from toolvault.models import WarrantyClause, WarrantyPolicy


POWER_TOOL_ISSUES = [
    "Won't start",
    "Overheating",
    "Chuck/blade issue",
    "Battery problem",
    "Unusual noise",
    "Loss of power",
]

OUTDOOR_ISSUES = [
    "Chain tension",
    "Starting issues",
    "Oil leak",
    "Bar wear",
    "Vibration",
    "Loss of power",
]

# Offered when a tool's brand has no policy on file
DEFAULT_COMMON_ISSUES = [
    "Won't start",
    "Overheating",
    "Unusual noise",
    "Loss of power",
]


WARRANTY_POLICIES: Mapping[str, WarrantyPolicy] = MappingProxyType({
    "milwaukee": WarrantyPolicy(
        brand_id="milwaukee",
        title="Milwaukee 5-Year Limited Warranty",
        duration_years=5,
        clauses=[
            WarrantyClause(
                section="Section 3.1 - Coverage",
                text="Milwaukee warrants to the original purchaser that each power tool will be free "
                     "from defects in material and workmanship for a period of five (5) years from "
                     "date of purchase.",
            ),
            WarrantyClause(
                section="Section 3.2 - Repair or Replacement",
                text="Defects in materials or workmanship within the warranty period are covered for "
                     "repair or replacement at manufacturer's discretion.",
            ),
            WarrantyClause(
                section="Section 3.3 - Battery Warranty",
                text="Milwaukee M18 and M12 REDLITHIUM batteries are covered for defects for a period "
                     "of two (2) years from date of purchase.",
            ),
            WarrantyClause(
                section="Section 4.1 - Proof of Purchase",
                text="A valid proof of purchase (receipt or tax invoice) showing date of purchase and "
                     "retailer is required for all warranty claims.",
            ),
        ],
        exclusions=[
            "Damage resulting from misuse, abuse, neglect, or unauthorized modification",
            "Normal wear and tear including brushes, blades, bits, and other consumable parts",
            "Damage caused by use of non-Milwaukee accessories or attachments",
        ],
        common_issues=POWER_TOOL_ISSUES,
        consumer_law_note="This warranty is in addition to your rights under the Australian Consumer "
                          "Law. Our goods come with guarantees that cannot be excluded under the "
                          "Australian Consumer Law. You are entitled to a replacement or refund for a "
                          "major failure and compensation for any other reasonably foreseeable loss "
                          "or damage.",
    ),
    "makita": WarrantyPolicy(
        brand_id="makita",
        title="Makita 3-Year Warranty (Registered)",
        duration_years=3,
        clauses=[
            WarrantyClause(
                section="Section 2.1 - Standard Coverage",
                text="Makita Australia warrants this product against defects in material and "
                     "workmanship for three (3) years from date of purchase when registered within "
                     "30 days, otherwise one (1) year.",
            ),
            WarrantyClause(
                section="Section 2.2 - Scope of Warranty",
                text="This warranty covers the repair or replacement of the product or any part found "
                     "to be defective in material or workmanship under normal use.",
            ),
            WarrantyClause(
                section="Section 2.3 - Warranty Service",
                text="Warranty service must be carried out by a Makita Authorised Service Centre. The "
                     "product must be presented with valid proof of purchase.",
            ),
        ],
        exclusions=[
            "Damage caused by misuse, abuse, abnormal conditions, or unauthorized repair",
            "Normal wear of consumable parts such as carbon brushes, blades, and drill bits",
            "Products used for hire or commercial rental purposes beyond normal trade use",
        ],
        common_issues=POWER_TOOL_ISSUES,
        consumer_law_note="This warranty is provided in addition to statutory rights under the "
                          "Australian Consumer Law. Makita Australia Pty Ltd guarantees this product "
                          "against defects as required by law.",
    ),
    "husqvarna": WarrantyPolicy(
        brand_id="husqvarna",
        title="Husqvarna 2-Year Consumer Warranty",
        duration_years=2,
        clauses=[
            WarrantyClause(
                section="Section 1.1 - Warranty Period",
                text="Husqvarna warrants this product to the original purchaser for a period of two "
                     "(2) years from date of purchase for domestic consumer use.",
            ),
            WarrantyClause(
                section="Section 1.2 - Extended Registration",
                text="The warranty may be extended up to five (5) years for eligible products when "
                     "registered online within 30 days of purchase.",
            ),
            WarrantyClause(
                section="Section 1.3 - Coverage",
                text="This warranty covers defects in material and workmanship. Husqvarna will, at its "
                     "discretion, repair or replace the defective product or component.",
            ),
        ],
        exclusions=[
            "Damage resulting from improper maintenance, misuse, or unauthorized modification",
            "Normal wear on consumable items including chains, bars, spark plugs, and filters",
            "Products used for commercial or professional purposes beyond domestic use",
        ],
        common_issues=OUTDOOR_ISSUES,
        consumer_law_note="This warranty does not exclude or limit the application of any condition "
                          "or warranty implied by the Australian Consumer Law. You are entitled to a "
                          "replacement or refund for a major failure.",
    ),
    "stihl": WarrantyPolicy(
        brand_id="stihl",
        title="Stihl 2-Year Domestic Warranty",
        duration_years=2,
        clauses=[
            WarrantyClause(
                section="Section 1 - Warranty Coverage",
                text="Stihl warrants to the original purchaser that this product will be free from "
                     "defects in material and workmanship for a period of two (2) years for "
                     "domestic consumer use.",
            ),
            WarrantyClause(
                section="Section 2 - Warranty Claims",
                text="All warranty claims must be submitted through an authorised Stihl dealer with "
                     "valid proof of purchase showing date and place of purchase.",
            ),
            WarrantyClause(
                section="Section 3 - Remedies",
                text="Stihl will, at its sole discretion, repair or replace any product or component "
                     "found to be defective under this warranty.",
            ),
        ],
        exclusions=[
            "Damage caused by misuse, neglect, accident, or unauthorized modification or repair",
            "Normal wear and tear on consumable parts including chains, bars, spark plugs, air "
            "filters, and fuel filters",
            "Failure resulting from use of non-Stihl replacement parts or accessories",
        ],
        common_issues=OUTDOOR_ISSUES,
        consumer_law_note="Stihl products come with guarantees that cannot be excluded under the "
                          "Australian Consumer Law. You are entitled to a replacement or refund for a "
                          "major failure and compensation for any other reasonably foreseeable loss.",
    ),
    "dewalt": WarrantyPolicy(
        brand_id="dewalt",
        title="DeWalt 3-Year Limited Warranty",
        duration_years=3,
        clauses=[
            WarrantyClause(
                section="Section A - Coverage Period",
                text="DeWalt will repair or replace, at DeWalt's option, any product that is defective "
                     "in material or workmanship for a period of three (3) years from date of "
                     "purchase.",
            ),
            WarrantyClause(
                section="Section B - Free Service",
                text="DeWalt will maintain the tool and replace worn parts caused by normal use, free "
                     "of charge, for a period of one (1) year from date of purchase.",
            ),
            WarrantyClause(
                section="Section C - Proof of Purchase",
                text="Original proof of purchase (receipt or tax invoice) is required for all warranty "
                     "claims. The product must be returned to a DeWalt authorised service centre.",
            ),
        ],
        exclusions=[
            "Damage caused by misuse, abuse, negligence, or unauthorized modification",
            "Normal wear of consumable accessories and parts",
            "Products that have been used in rental or commercial hire operations",
        ],
        common_issues=POWER_TOOL_ISSUES,
        consumer_law_note="This warranty is in addition to rights and remedies available under the "
                          "Australian Consumer Law. Our goods come with guarantees that cannot be "
                          "excluded under the ACL.",
    ),
    "bosch": WarrantyPolicy(
        brand_id="bosch",
        title="Bosch 3-Year Professional Warranty",
        duration_years=3,
        clauses=[
            WarrantyClause(
                section="Section 1 - Warranty",
                text="Bosch warrants this professional power tool against defects in materials and "
                     "workmanship for a period of three (3) years from the date of purchase.",
            ),
            WarrantyClause(
                section="Section 2 - Service",
                text="Warranty service is available through any Bosch Authorised Service Agent. "
                     "Products must be accompanied by proof of purchase.",
            ),
        ],
        exclusions=[
            "Damage from misuse, abuse, negligence, or failure to follow operating instructions",
            "Normal wear on consumable parts and accessories",
            "Unauthorized modification or repair by non-Bosch service agents",
        ],
        common_issues=POWER_TOOL_ISSUES,
        consumer_law_note="This warranty is provided in addition to your rights under the Australian "
                          "Consumer Law. Robert Bosch (Australia) Pty Ltd guarantees its products as "
                          "required by law.",
    ),
})


def get_policy(brand_id: Optional[str]) -> Optional[WarrantyPolicy]:
    """Return the warranty policy for a brand, or None if none is on file."""
    if not brand_id:
        return None
    return WARRANTY_POLICIES.get(brand_id.strip().lower())
