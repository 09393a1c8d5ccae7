"""
Integration Tests for the ToolVault MCP Server

Tests the tool functions exposed over MCP and their status envelopes.
"""

import pytest

from toolvault.mcp_servers import vault_tools
from toolvault.storage import ToolRepository


@pytest.fixture(autouse=True)
def vault_repository():
    repository = ToolRepository(path=None)
    vault_tools.set_repository(repository)
    yield repository
    vault_tools.set_repository(None)


class TestBrandAndReceiptTools:

    def test_detect_brand_includes_name(self):
        result = vault_tools.detect_brand("DCD791-55")

        assert result["status"] == "ok"
        assert result["data"]["brand_id"] == "dewalt"
        assert result["data"]["brand_name"] == "DeWalt"

    def test_detect_brand_no_match(self):
        result = vault_tools.detect_brand("XQ-55120")

        assert result["status"] == "ok"
        assert result["data"]["matched"] is False
        assert result["data"]["brand_name"] is None

    def test_parse_receipt_text(self):
        result = vault_tools.parse_receipt_text("Sydney Tools\n1 Feb 2025\nTOTAL $89.00")

        assert result["status"] == "ok"
        assert result["data"]["store_name"] == "Sydney Tools"
        assert result["data"]["purchase_date"] == "01/02/2025"
        assert result["data"]["price"] == "$89.00"


class TestWarrantyTools:

    def test_calculate_warranty(self):
        result = vault_tools.calculate_warranty("husqvarna", "2024-05-01", category="chainsaw", is_registered=True)

        assert result["status"] == "ok"
        assert result["data"]["duration_years"] == 5
        assert result["data"]["warranty_end_date"] == "2029-05-01"

    def test_calculate_warranty_invalid_date(self):
        result = vault_tools.calculate_warranty("makita", "yesterday")

        assert result["status"] == "error"
        assert result["error_code"] == "INVALID_DATE"

    def test_get_warranty_policy(self):
        result = vault_tools.get_warranty_policy("Stihl")

        assert result["status"] == "ok"
        assert result["data"]["brand_id"] == "stihl"
        assert result["data"]["duration_years"] == 2
        assert len(result["data"]["clauses"]) >= 2

    def test_get_warranty_policy_unknown_brand(self):
        result = vault_tools.get_warranty_policy("acme")

        assert result["status"] == "error"
        assert result["error_code"] == "UNKNOWN_BRAND"


class TestToolRecords:

    def test_list_tools(self):
        result = vault_tools.list_tools()

        assert result["status"] == "ok"
        assert result["data"]["count"] == 5
        statuses = {tool["id"]: tool["warranty_status"] for tool in result["data"]["tools"]}
        assert statuses["tool-default-dewalt-driver"] == "expired"
        assert statuses["tool-default-milwaukee-drill"] == "active"

    def test_get_tool(self):
        result = vault_tools.get_tool("tool-default-stihl-chainsaw")

        assert result["status"] == "ok"
        assert result["data"]["brand"] == "stihl"
        assert result["data"]["purchase_date"] == "2025-02-08"

    def test_get_tool_not_found(self):
        result = vault_tools.get_tool("tool-missing")

        assert result["status"] == "error"
        assert result["error_code"] == "TOOL_NOT_FOUND"

    def test_analyse_claim(self):
        result = vault_tools.analyse_claim("tool-default-dewalt-driver", "Trigger sticks")

        assert result["status"] == "ok"
        data = result["data"]
        assert data["analysis"]["verdict"] == "not_covered"
        assert data["claim_reference"].startswith("TV-")
        assert data["claim_reference"] in data["document"]

    def test_analyse_claim_unknown_tool(self):
        result = vault_tools.analyse_claim("tool-missing", "Trigger sticks")

        assert result["error_code"] == "TOOL_NOT_FOUND"

    def test_repository_is_shared(self, vault_repository, tool_factory):
        vault_repository.add(tool_factory(id="tool-added"))

        assert vault_tools.get_tool("tool-added")["status"] == "ok"


class TestListFiltersAndRemoval:
    """Status filter, search and delete."""

    def test_list_tools_status_filter(self):
        result = vault_tools.list_tools(status="expired")

        ids = [tool["id"] for tool in result["data"]["tools"]]
        assert "tool-default-dewalt-driver" in ids
        assert "tool-default-milwaukee-drill" not in ids
        assert all(tool["warranty_status"] == "expired" for tool in result["data"]["tools"])

    def test_list_tools_search_is_case_insensitive(self):
        result = vault_tools.list_tools(query="BUNNINGS")

        ids = [tool["id"] for tool in result["data"]["tools"]]
        assert ids == ["tool-default-dewalt-driver", "tool-default-stihl-chainsaw"]

    def test_list_tools_search_matches_serial(self):
        result = vault_tools.list_tools(query="ms261")

        assert result["data"]["count"] == 1
        assert result["data"]["tools"][0]["id"] == "tool-default-stihl-chainsaw"

    def test_list_tools_invalid_status(self):
        result = vault_tools.list_tools(status="broken")

        assert result["status"] == "error"
        assert result["error_code"] == "INVALID_STATUS"

    def test_delete_tool(self, vault_repository):
        result = vault_tools.delete_tool("tool-default-bosch-hammer")

        assert result["status"] == "ok"
        assert result["data"]["deleted"] == "tool-default-bosch-hammer"
        assert vault_repository.get("tool-default-bosch-hammer") is None
        assert vault_tools.list_tools()["data"]["count"] == 4

    def test_delete_unknown_tool(self):
        result = vault_tools.delete_tool("tool-missing")

        assert result["error_code"] == "TOOL_NOT_FOUND"


class TestServiceCentreTools:

    def test_by_brand(self):
        result = vault_tools.find_service_centres("stihl")

        assert result["status"] == "ok"
        centres = result["data"]["service_centres"]
        assert result["data"]["count"] == len(centres) == 2
        assert all("stihl" in centre["authorized_brands"] for centre in centres)
        assert centres[0]["distance_km"] <= centres[1]["distance_km"]
        assert centres[0]["directions_url"].startswith("https://www.google.com/maps/dir/?api=1&destination=")

    def test_all_brands(self):
        result = vault_tools.find_service_centres()

        assert result["data"]["count"] == 6

    def test_unknown_brand(self):
        result = vault_tools.find_service_centres("ryobi")

        assert result["status"] == "error"
        assert result["error_code"] == "UNKNOWN_BRAND"


class TestServerRegistration:

    def test_server_name(self):
        from toolvault.servers.vault.main import mcp

        assert mcp.name == "toolvault"
