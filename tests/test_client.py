"""Tests for the requests-based CSR API client."""

from unittest.mock import MagicMock

import requests

from csr_utilities_client import CSRUtilitiesAPI


def fake_response(status_code=200, payload=None):
    response = MagicMock()
    response.status_code = status_code
    response.content = b"{}"
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(response=response)
    return response


def make_api(response):
    session = MagicMock()
    session.request.return_value = response
    return CSRUtilitiesAPI(base_url="http://localhost:3000/", prefix="/api/v1", session=session), session


def test_success_returns_data():
    api, session = make_api(fake_response(payload={"current_balance": 234.56}))
    data, error = api.check_balance("zapco", "555-ZAPS", identifier="phone")
    assert error is None
    assert data == {"current_balance": 234.56}
    session.request.assert_called_once_with(
        method="GET",
        url="http://localhost:3000/api/v1/csr-utilities/check-balance",
        params={"utility": "zapco", "identifier": "phone", "value": "555-ZAPS"},
        json=None,
        timeout=15,
    )


def test_http_error_returns_message():
    api, _ = make_api(fake_response(404, {"error": "Customer not found"}))
    data, error = api.check_meter("zapco", "NOPE")
    assert data is None
    assert error == {"status_code": 404, "message": "Customer not found"}


def test_connection_error():
    session = MagicMock()
    session.request.side_effect = requests.ConnectionError("refused")
    api = CSRUtilitiesAPI(base_url="http://localhost:3000", session=session)
    data, error = api.health()
    assert data is None
    assert error["status_code"] is None
    assert "refused" in error["message"]


def test_create_ticket_omits_empty_priority():
    api, session = make_api(fake_response(payload={"ticket_id": "TKT-1-ABCDEF"}))
    api.create_ticket("zapco", "87234-HTG-2019", "billing", "High bill")
    body = session.request.call_args.kwargs["json"]
    assert "priority" not in body
    assert body["issue_type"] == "billing"


def test_send_tool_calls_wraps_envelope():
    api, session = make_api(fake_response(payload={"results": []}))
    calls = [{"id": "c1", "function": {"name": "checkOutages", "arguments": {"utility": "zapco"}}}]
    api.send_tool_calls(calls)
    body = session.request.call_args.kwargs["json"]
    assert body == {"message": {"type": "tool-calls", "toolCalls": calls}}
