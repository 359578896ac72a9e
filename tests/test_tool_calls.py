"""Tests for the voice-platform tool-call webhook."""

import json

import pytest

from utility_csr_api.app.core.errors import InvalidInput
from utility_csr_api.app.services.tool_call_service import normalize_tool_name, parse_arguments


def envelope(*calls):
    return {"message": {"type": "tool-calls", "toolCalls": list(calls)}}


def call(call_id, name, arguments):
    return {"id": call_id, "type": "function", "function": {"name": name, "arguments": arguments}}


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("check_balance", "check_balance"),
        ("checkBalance", "check_balance"),
        ("check-balance", "check_balance"),
        ("analyzeBills", "analyze_bills"),
        (" createTicket ", "create_ticket"),
    ],
)
def test_normalize_tool_name(raw, expected):
    assert normalize_tool_name(raw) == expected


def test_parse_arguments():
    assert parse_arguments({"utility": "zapco"}).utility == "zapco"
    assert parse_arguments('{"zip_code": "97201"}').zip_code == "97201"
    assert parse_arguments(None).utility is None
    assert parse_arguments({"value": 5551234, "zip_code": 97201.0}).value == "5551234"
    with pytest.raises(InvalidInput):
        parse_arguments("[1, 2]")
    with pytest.raises(InvalidInput):
        parse_arguments("{not json")
    with pytest.raises(InvalidInput) as excinfo:
        parse_arguments({"value": ["555"], "utility": {"code": "zapco"}})
    assert excinfo.value.message == "Tool call arguments must be strings: utility, value"


class TestWebhook:
    def test_single_call(self, client):
        response = client.post(
            "/csr-utilities/tool-calls",
            json=envelope(call("call_1", "checkMeter", {"utility": "zapco", "account_number": "87234-HTG-2019"})),
        )
        assert response.status_code == 200
        results = response.json()["results"]
        assert len(results) == 1
        assert results[0]["toolCallId"] == "call_1"
        assert results[0]["result"]["current_reading"] == 843381

    def test_string_arguments(self, client):
        arguments = json.dumps({"utility": "greenleaf", "account_number": "GLE-2019-PHX-0847"})
        response = client.post("/csr-utilities/tool-calls", json=envelope(call("c", "analyze_meter", arguments)))
        assert response.json()["results"][0]["result"]["trend"] == "stable"

    def test_results_keep_call_order(self, client):
        response = client.post(
            "/csr-utilities/tool-calls",
            json=envelope(
                call("a", "check-outages", {"utility": "aquaflow", "zip_code": "97330"}),
                call("b", "checkBalance", {"utility": "zapco", "identifier": "phone", "value": "555-ZAPS"}),
            ),
        )
        results = response.json()["results"]
        assert [r["toolCallId"] for r in results] == ["a", "b"]
        assert results[1]["result"]["customer_name"] == "Bartholomew Skittles"

    def test_partial_failure_is_reported_in_result(self, client):
        response = client.post(
            "/csr-utilities/tool-calls",
            json=envelope(
                call("ok", "checkMeter", {"utility": "zapco", "account_number": "87234-HTG-2019"}),
                call("bad", "checkMeter", {"utility": "zapco", "account_number": "NOPE"}),
            ),
        )
        assert response.status_code == 200
        assert response.json()["results"][1]["result"] == {"error": "No meter data found"}

    def test_all_failed_uses_first_failure_status(self, client):
        response = client.post(
            "/csr-utilities/tool-calls",
            json=envelope(
                call("x", "checkMeter", {"utility": "zapco", "account_number": "NOPE"}),
                call("y", "checkMeter", {"utility": "electricco", "account_number": "NOPE"}),
            ),
        )
        assert response.status_code == 404
        results = response.json()["results"]
        assert results[1]["result"] == {"error": "Invalid utility specified"}

    def test_unknown_tool(self, client):
        response = client.post("/csr-utilities/tool-calls", json=envelope(call("z", "launchRocket", {})))
        assert response.status_code == 400
        assert response.json()["results"][0]["result"] == {"error": "Unknown tool 'launchRocket'"}

    def test_create_ticket_via_tool_call(self, client):
        arguments = {
            "utility": "greenleaf",
            "account_number": "GLE-2019-PHX-0847",
            "issue_type": "outage",
            "description": "No gas since this morning",
            "priority": "high",
        }
        response = client.post("/csr-utilities/tool-calls", json=envelope(call("t", "createTicket", arguments)))
        ticket = response.json()["results"][0]["result"]
        assert ticket["ticket_id"].startswith("TKT-")
        assert ticket["priority"] == "high"
        assert "spiritual_message" in ticket

    def test_numeric_arguments_are_strings(self, client):
        response = client.post(
            "/csr-utilities/tool-calls",
            json=envelope(
                call("bal", "checkBalance", {"utility": "zapco", "identifier": "phone", "value": 5551234}),
                call("out", "checkOutages", {"utility": "zapco", "zip_code": 97201}),
            ),
        )
        assert response.status_code == 200
        results = response.json()["results"]
        assert results[0]["result"] == {"error": "Customer not found"}
        assert results[1]["result"]["zip_code"] == "97201"
        assert results[1]["result"]["current_outages"] == 0

    def test_numeric_ticket_account_number(self, client):
        arguments = {"utility": "zapco", "account_number": 42, "issue_type": "x", "description": "y"}
        response = client.post("/csr-utilities/tool-calls", json=envelope(call("t", "createTicket", arguments)))
        assert response.status_code == 200
        assert response.json()["results"][0]["result"]["account_number"] == "42"

    def test_non_scalar_argument_keeps_sibling_result(self, client):
        response = client.post(
            "/csr-utilities/tool-calls",
            json=envelope(
                call("bad", "checkBalance", {"utility": "zapco", "identifier": "phone", "value": ["555"]}),
                call("ok", "checkMeter", {"utility": "zapco", "account_number": "87234-HTG-2019"}),
            ),
        )
        assert response.status_code == 200
        results = response.json()["results"]
        assert results[0]["result"] == {"error": "Tool call arguments must be strings: value"}
        assert results[1]["result"]["usage"] == 1247

    def test_empty_tool_call_list(self, client):
        response = client.post("/csr-utilities/tool-calls", json=envelope())
        assert response.status_code == 400
        assert response.json() == {"error": "No tool calls in message"}

    def test_malformed_envelope(self, client):
        response = client.post("/csr-utilities/tool-calls", json={"toolCalls": []})
        assert response.status_code == 400
        assert response.json()["error"] == "Missing required parameters: message"
