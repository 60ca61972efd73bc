import asyncio

from fastapi.testclient import TestClient
from fastmcp import Client

from app import build_http_app, build_server
from core.config import Settings
from tools import TOOL_SPECS


def test_list_tools_serves_catalog_schemas():
    mcp = build_server(Settings(api_key="rr_test"))

    async def listing():
        async with Client(mcp) as client:
            return await client.list_tools()

    tools = asyncio.run(listing())
    assert {t.name for t in tools} == set(TOOL_SPECS)
    by_name = {t.name: t for t in tools}
    assert by_name["get_person"].inputSchema["required"] == ["id"]
    assert by_name["get_person"].description == TOOL_SPECS["get_person"]["description"]
    assert set(by_name["get_tasks"].inputSchema["properties"]) == {"page", "itemsPerPage", "status"}


def test_call_tool_returns_error_text_not_protocol_error():
    mcp = build_server(Settings(api_key="rr_test"))

    async def call():
        async with Client(mcp) as client:
            return await client.call_tool("get_person", {})

    result = asyncio.run(call())
    assert result.content[0].type == "text"
    assert result.content[0].text == "Error: Missing required parameter: id"


def test_call_tool_goes_through_http(fake_http):
    fake_http.reply(200, [{"id": "t1", "name": "vip"}])
    mcp = build_server(Settings(api_key="rr_test", base_url="https://crm.example"))

    async def call():
        async with Client(mcp) as client:
            return await client.call_tool("get_tags", {"page": 3})

    result = asyncio.run(call())
    assert fake_http.calls[0]["url"] == "https://crm.example/tags?page=3"
    assert '"name": "vip"' in result.content[0].text


def test_health_endpoints():
    settings = Settings(api_key="", service_name="rogerroger-mcp", version="9.9.9")
    client = TestClient(build_http_app(build_server(settings), settings))

    health = client.get("/health").json()
    assert health["ok"] is True
    assert health["version"] == "9.9.9"

    root = client.get("/").json()
    assert root["api_key_set"] is False
    assert root["mcp"] == "/mcp"
