"""
Vault Tools

Functions exposed by the ToolVault MCP server:
- detect_brand: Brand from a serial number
- parse_receipt_text: Structured fields from raw receipt text
- calculate_warranty: Warranty window, status and warnings
- get_warranty_policy: Policy clauses and exclusions for a brand
- list_tools / get_tool / delete_tool: Registered tools, filtered and searched
- analyse_claim: Claim verdict and document for a registered tool
- find_service_centres: Authorised service centres for a brand

Every function returns the {"status": "ok", "data": ...} envelope, or
{"status": "error", "error_code": ..., "message": ...}.
"""

import logging
from datetime import date
from typing import Annotated, Any, Dict, Optional

from pydantic import Field

from toolvault.compute import build_claim_analysis, filter_tools, get_warranty_status, parse_receipt
from toolvault.compute import service as compute
from toolvault.config import config
from toolvault.documents import render_claim_document
from toolvault.registry import get_brand, get_policy, get_service_centres
from toolvault.storage import ToolRepository
from toolvault.utils import generate_claim_reference


logger = logging.getLogger(__name__)

_repository: Optional[ToolRepository] = None


def get_repository() -> ToolRepository:
    """Repository shared by the tools, created from config on first use."""
    global _repository
    if _repository is None:
        _repository = ToolRepository.from_config(config)
    return _repository


def set_repository(repository: Optional[ToolRepository]) -> None:
    global _repository
    _repository = repository


def _tool_not_found(tool_id: str) -> Dict[str, Any]:
    return {
        "status": "error",
        "error_code": "TOOL_NOT_FOUND",
        "message": f"Tool {tool_id} not found."
    }


def detect_brand(
    serial_number: Annotated[str, Field(description="Serial number as printed on the tool")]
) -> dict:
    """Detect the manufacturer of a tool from its serial number."""
    result = compute.detect_brand(serial_number)
    brand = get_brand(result["data"]["brand_id"])
    result["data"]["brand_name"] = brand.name if brand else None
    return result


def parse_receipt_text(
    raw_text: Annotated[str, Field(description="Multi-line text recognized from a receipt")]
) -> dict:
    """Extract store, date, price and item description from raw receipt text."""
    parsed = parse_receipt(raw_text)
    return {"status": "ok", "data": parsed.model_dump(mode="json")}


def calculate_warranty(
    brand_id: Annotated[str, Field(description="Brand id, e.g. milwaukee or makita")],
    purchase_date: Annotated[str, Field(description="Purchase date in YYYY-MM-DD format")],
    category: Annotated[str, Field(description="Tool category, e.g. drill, saw or battery")] = "other",
    is_registered: Annotated[bool, Field(description="Registered with the manufacturer")] = False
) -> dict:
    """Calculate warranty end date, duration, status and registration warnings."""
    return compute.calculate_warranty(
        brand_id=brand_id,
        category=category,
        purchase_date=purchase_date,
        is_registered=is_registered,
    )


def get_warranty_policy(
    brand_id: Annotated[str, Field(description="Brand id, e.g. milwaukee or makita")]
) -> dict:
    """Get the manufacturer warranty policy for a brand."""
    policy = get_policy(brand_id)
    if policy is None:
        return {
            "status": "error",
            "error_code": "UNKNOWN_BRAND",
            "message": f"No warranty policy on file for brand '{brand_id}'."
        }
    return {"status": "ok", "data": policy.model_dump(mode="json")}


def list_tools(
    status: Annotated[str, Field(description="all, active, expiring or expired")] = "all",
    query: Annotated[str, Field(description="Search over name, brand, serial number and store")] = ""
) -> dict:
    """List registered tools with their current warranty status."""
    today = date.today()
    try:
        matched = filter_tools(get_repository().list(), status=status, query=query, today=today)
    except ValueError:
        return {
            "status": "error",
            "error_code": "INVALID_STATUS",
            "message": f"Unknown status filter '{status}'. Use all, active, expiring or expired."
        }

    tools = []
    for tool in matched:
        record = tool.model_dump(mode="json")
        record["warranty_status"] = get_warranty_status(tool.warranty_end_date, today).value
        tools.append(record)
    return {"status": "ok", "data": {"count": len(tools), "tools": tools}}


def get_tool(
    tool_id: Annotated[str, Field(description="Id of a registered tool")]
) -> dict:
    """Get a single registered tool."""
    tool = get_repository().get(tool_id)
    if tool is None:
        return _tool_not_found(tool_id)
    record = tool.model_dump(mode="json")
    record["warranty_status"] = get_warranty_status(tool.warranty_end_date).value
    return {"status": "ok", "data": record}


def delete_tool(
    tool_id: Annotated[str, Field(description="Id of a registered tool")]
) -> dict:
    """Remove a registered tool from the vault."""
    repository = get_repository()
    tool = repository.get(tool_id)
    if tool is None or not repository.delete(tool_id):
        return _tool_not_found(tool_id)
    logger.info(f"Tool removed - tool_id={tool_id}")
    return {"status": "ok", "data": {"deleted": tool_id, "name": tool.name}}


def find_service_centres(
    brand_id: Annotated[str, Field(description="Brand id, e.g. stihl, or all")] = "all"
) -> dict:
    """Find authorised service centres for a brand, nearest first."""
    if brand_id.strip().lower() != "all" and get_brand(brand_id) is None:
        return {
            "status": "error",
            "error_code": "UNKNOWN_BRAND",
            "message": f"Unknown brand '{brand_id}'."
        }
    centres = []
    for centre in get_service_centres(brand_id):
        record = centre.model_dump(mode="json")
        record["directions_url"] = centre.directions_url
        centres.append(record)
    return {"status": "ok", "data": {"count": len(centres), "service_centres": centres}}


def analyse_claim(
    tool_id: Annotated[str, Field(description="Id of a registered tool")],
    issue_description: Annotated[str, Field(description="What is wrong with the tool")]
) -> dict:
    """Analyse a warranty claim for a registered tool and draft the claim document."""
    tool = get_repository().get(tool_id)
    if tool is None:
        return _tool_not_found(tool_id)

    analysis = build_claim_analysis(tool, issue_description)
    reference = generate_claim_reference()
    document = render_claim_document(
        tool=tool,
        analysis=analysis,
        issue_description=issue_description,
        claim_reference=reference,
        user_name=config.user_name,
        user_email=config.user_email,
    )
    logger.info(f"Claim drafted - tool_id={tool_id}, verdict={analysis.verdict}")
    return {
        "status": "ok",
        "data": {
            "claim_reference": reference,
            "analysis": analysis.model_dump(mode="json"),
            "document": document,
        }
    }
