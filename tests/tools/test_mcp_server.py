import json

import pytest
from fastmcp import Client

import tools.mcp_server as mcp_server
from tools.mcp_server import create_server
from tools.registry import get_descriptor, tool_names


def advertised_types(prop):
    """JSON types a FastMCP property accepts, unwrapping Optional's anyOf."""
    variants = prop.get("anyOf", [prop])
    return {variant["type"] for variant in variants if "type" in variant}


@pytest.mark.asyncio
async def test_server_advertises_registry_tools(fake_api):
    client, _ = fake_api({})

    async with Client(create_server(client)) as mcp_client:
        tools = await mcp_client.list_tools()

    by_name = {tool.name: tool for tool in tools}
    assert set(by_name) == set(tool_names())
    for name, tool in by_name.items():
        descriptor = get_descriptor(name)
        assert tool.description == descriptor.description
        assert sorted(tool.inputSchema.get("required", [])) == sorted(descriptor.required)
        assert set(tool.inputSchema.get("properties", {})) == set(descriptor.parameters)
        for param, prop in tool.inputSchema.get("properties", {}).items():
            assert descriptor.input_schema["properties"][param]["type"] in advertised_types(prop)

    assert "mobile" in json.dumps(by_name["get_market_share"].inputSchema)


@pytest.mark.asyncio
async def test_call_tool_returns_formatted_text(fake_api):
    client, requests = fake_api({
        "data": [{"source": "Nike", "7d_market_share": 0.42, "7d_prev_market_share": 0.40}],
        "total_results": 1,
    })

    async with Client(create_server(client)) as mcp_client:
        result = await mcp_client.call_tool_mcp("get_market_share", {"project_number": 1, "source": "Nike"})

    assert not result.isError
    text = result.content[0].text
    assert "42.0%" in text
    assert "↑5.0%" in text
    assert dict(requests[0].url.params) == {"source": "Nike"}


@pytest.mark.asyncio
async def test_call_tool_failure_sets_is_error(fake_api):
    client, _ = fake_api(status_code=502, body="bad gateway")

    async with Client(create_server(client)) as mcp_client:
        result = await mcp_client.call_tool_mcp("list_accounts", {})

    assert result.isError
    assert "API error 502: bad gateway" in result.content[0].text


def test_main_exits_without_api_key(monkeypatch):
    monkeypatch.setattr(mcp_server, "load_dotenv", lambda: None)
    monkeypatch.delenv("ROBINHOOD_API_KEY", raising=False)

    with pytest.raises(SystemExit) as exc_info:
        mcp_server.main()

    assert exc_info.value.code == 1


def test_main_runs_server_with_settings(monkeypatch):
    started = {}

    class FakeServer:
        def run(self):
            started["run"] = True

    def fake_create_server(client):
        started["client"] = client
        return FakeServer()

    monkeypatch.setattr(mcp_server, "load_dotenv", lambda: None)
    monkeypatch.setattr(mcp_server, "create_server", fake_create_server)
    monkeypatch.setenv("ROBINHOOD_API_KEY", "secret")
    monkeypatch.setenv("ROBINHOOD_API_URL", "https://staging.test/prod/")

    mcp_server.main()

    assert started["run"] is True
    assert started["client"].api_key == "secret"
    assert started["client"].base_url == "https://staging.test/prod"
