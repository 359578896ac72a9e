"""Tests for the GreenLeaf partner API mock."""


def test_health(client):
    response = client.get("/greenleaf/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ENLIGHTENED"


def test_lookup_by_exact_phone(client):
    response = client.get("/greenleaf/api/v2/customer/lookup/by-phone", params={"phone": "+1-503-555-STEL"})
    assert response.status_code == 200
    body = response.json()
    assert body["acct_ref"] == "GLE-2021-STK-1923"
    assert body["cust_uuid"] == "GL-2b4f6a8c-9d1e-3f5a-7b9c-4d6e8f0a1b2c"
    assert body["name_first"] == "Stanley"
    assert body["balance_current_cents"] == 0
    assert body["meditation_bonus"] == "+5 mindfulness points for account lookup"


def test_lookup_requires_exact_match(client):
    response = client.get("/greenleaf/api/v2/customer/lookup/by-phone", params={"phone": "555-STEL"})
    assert response.status_code == 404
    assert response.json() == {
        "error": "Customer consciousness not detected",
        "meditation_recommendation": "Perhaps meditate on the correct phone number",
    }


def test_lookup_without_phone(client):
    response = client.get("/greenleaf/api/v2/customer/lookup/by-phone")
    assert response.status_code == 400
    assert response.json() == {"error": "Missing required parameters: phone"}
