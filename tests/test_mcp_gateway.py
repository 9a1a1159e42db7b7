import json

from fastapi.testclient import TestClient

from solana_mcp.server import app
from solana_mcp.stdio import MCP_SERVER_NAME, MCP_SERVER_VERSION

TOOL_NAMES = {
    "get_balance",
    "get_account_info",
    "get_token_accounts",
    "get_transaction_history",
    "get_token_info",
    "get_network_stats",
}


def _rpc(client, method, params=None, rpc_id=1):
    body = {"jsonrpc": "2.0", "id": rpc_id, "method": method}
    if params is not None:
        body["params"] = params
    return client.post("/mcp", json=body)


def test_health_endpoint():
    client = TestClient(app)
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
    assert resp.headers.get("X-Request-ID")


def test_mcp_list_tools():
    client = TestClient(app)
    resp = _rpc(client, "tools/list")
    assert resp.status_code == 200
    tools = resp.json()["result"]["tools"]
    assert {tool["name"] for tool in tools} == TOOL_NAMES
    history = next(t for t in tools if t["name"] == "get_transaction_history")
    assert history["inputSchema"]["properties"]["limit"]["maximum"] == 100
    assert history["inputSchema"]["required"] == ["address"]
    stats = next(t for t in tools if t["name"] == "get_network_stats")
    assert stats["inputSchema"]["properties"] == {}


def test_mcp_initialize():
    client = TestClient(app)
    resp = _rpc(client, "initialize", {"protocolVersion": "2025-06-18", "capabilities": {}}, rpc_id=10)
    result = resp.json()["result"]
    assert result["protocolVersion"] == "2025-06-18"
    assert result["serverInfo"] == {"name": MCP_SERVER_NAME, "version": MCP_SERVER_VERSION}


def test_mcp_call_tool_validation_error_is_in_band():
    client = TestClient(app)
    resp = _rpc(client, "tools/call", {"name": "get_transaction_history", "arguments": {"address": "x", "limit": 0}})
    assert resp.status_code == 200
    result = resp.json()["result"]
    assert result["isError"] is True
    assert "between 1 and 100" in result["content"][0]["text"]


def test_mcp_call_tool_invalid_address_is_in_band():
    client = TestClient(app)
    resp = _rpc(client, "call_tool", {"tool": "get_balance", "params": {"address": "not-an-address"}})
    result = resp.json()["result"]
    assert result == {
        "content": [{"type": "text", "text": "Error getting balance: Invalid public key input"}],
        "isError": True,
    }


def test_mcp_call_unknown_tool():
    client = TestClient(app)
    resp = _rpc(client, "tools/call", {"name": "send_sol", "arguments": {}})
    result = resp.json()["result"]
    assert result["isError"] is True
    assert result["content"][0]["text"] == "Unknown tool: send_sol"


def test_mcp_call_tool_missing_name_is_invalid_params():
    client = TestClient(app)
    resp = _rpc(client, "tools/call", {"arguments": {}}, rpc_id=13)
    assert resp.json()["error"]["code"] == -32602


def test_mcp_unknown_method_returns_error():
    client = TestClient(app)
    resp = _rpc(client, "not_a_real_method", rpc_id=7)
    assert resp.json()["error"]["code"] == -32601


def test_mcp_parse_error_invalid_json():
    client = TestClient(app)
    resp = client.post("/mcp", content="{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == -32700


def test_mcp_initialized_notification_has_no_body():
    client = TestClient(app)
    resp = client.post("/mcp", json={"jsonrpc": "2.0", "method": "notifications/initialized"})
    assert resp.status_code == 204
    assert resp.text == ""


def test_metrics_count_tool_outcomes():
    client = TestClient(app)
    _rpc(client, "tools/call", {"name": "get_balance", "arguments": {}})
    data = client.get("/metrics").json()
    assert data["requests"] >= 2
    assert data["tools"]["get_balance"]["calls"] == 1
    assert data["tools"]["get_balance"]["errors"] == 1
    json.dumps(data)
