"""ToolVault MCP Server - FastMCP HTTP"""
import logging
import sys

from fastmcp import FastMCP

from toolvault.config import config
from toolvault.mcp_servers import vault_tools


logger = logging.getLogger(__name__)

mcp = FastMCP("toolvault")

for _tool in (
    vault_tools.detect_brand,
    vault_tools.parse_receipt_text,
    vault_tools.calculate_warranty,
    vault_tools.get_warranty_policy,
    vault_tools.list_tools,
    vault_tools.get_tool,
    vault_tools.delete_tool,
    vault_tools.analyse_claim,
    vault_tools.find_service_centres,
):
    mcp.tool(_tool)


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stdout
    )
    logger.info(f"Starting ToolVault MCP server on port {config.mcp_port}")
    mcp.run(transport="http", host="127.0.0.1", port=config.mcp_port)
