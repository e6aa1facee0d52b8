"""
Tests for the HTTP layer: health, authentication, request validation,
source normalisation and the response envelope.
"""

import pytest


LOTTERY_SCAM = (
    "Congratulations! You have won Rs. 10,00,000 in the lottery. Claim your "
    "prize now by depositing Rs. 10,000 processing fees."
)


def _payload(**overrides):
    body = {
        "sessionId": "session-123",
        "message": {"sender": "  +919876543210 ", "text": f"  {LOTTERY_SCAM}  "},
        "source": "email",
    }
    body.update(overrides)
    return body


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["service"] == "AuraShield API"
    assert data["version"] == "1.0.0"
    assert data["timestamp"]


def test_analyze_requires_api_key(client):
    resp = client.post("/analyze", json=_payload())
    assert resp.status_code == 401
    assert resp.json()["error"] == "UNAUTHORIZED"


def test_analyze_rejects_unknown_key(client):
    resp = client.post("/analyze", json=_payload(), headers={"x-api-key": "wrong"})
    assert resp.status_code == 403
    assert resp.json() == {"error": "FORBIDDEN", "message": "Invalid API key"}


def test_analyze_accepts_bearer_token(client, api_keys):
    resp = client.post(
        "/analyze",
        json=_payload(),
        headers={"Authorization": f"Bearer {api_keys[0]}"},
    )
    assert resp.status_code == 200


def test_analyze_success_envelope(client, auth_headers):
    resp = client.post("/analyze", json=_payload(), headers=auth_headers)
    assert resp.status_code == 200

    body = resp.json()
    assert body["status"] == "success"
    assert body["message"] == "Request processed successfully"

    data = body["data"]
    assert data["sessionId"] == "session-123"
    assert data["sender"] == "+919876543210"
    assert data["source"] == "email"
    assert data["timestamp"]

    analysis = data["analysis"]
    assert set(analysis) == {
        "is_scam", "confidence_score", "scam_type", "risk_level",
        "cognitive_exploitation", "reasoning", "extracted_entities", "recommendation",
    }
    assert analysis["scam_type"] == "lottery_fraud"
    assert analysis["is_scam"] is True
    assert analysis["cognitive_exploitation"]["reward_bait"] > 0
    assert analysis["extracted_entities"]["channel"] == "email"


@pytest.mark.parametrize("source, expected", [
    (" SMS ", "sms"),
    ("Chat", "chat"),
    ("fax", "unknown"),
    (42, "unknown"),
])
def test_source_normalised(client, auth_headers, source, expected):
    resp = client.post("/analyze", json=_payload(source=source), headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["source"] == expected
    assert resp.json()["data"]["analysis"]["extracted_entities"]["channel"] == expected


def test_missing_source_defaults_to_unknown(client, auth_headers):
    body = _payload()
    del body["source"]
    resp = client.post("/analyze", json=body, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["source"] == "unknown"


def test_missing_session_id(client, auth_headers):
    body = _payload()
    del body["sessionId"]
    resp = client.post("/analyze", json=body, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json() == {"error": "INVALID_REQUEST_BODY", "message": "sessionId missing"}


@pytest.mark.parametrize("body", [
    _payload(sessionId="   "),
    _payload(sessionId=123),
    _payload(message="just a string"),
    _payload(message={"sender": "x"}),
    _payload(message={"sender": "x", "text": "   "}),
    _payload(message={"sender": "", "text": "hello"}),
])
def test_invalid_bodies_rejected(client, auth_headers, body):
    resp = client.post("/analyze", json=body, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json()["error"] == "INVALID_REQUEST_BODY"


def test_malformed_json_rejected(client, auth_headers):
    headers = dict(auth_headers, **{"Content-Type": "application/json"})
    resp = client.post("/analyze", content=b'{"sessionId": ', headers=headers)
    assert resp.status_code == 400
    assert resp.json() == {"error": "INVALID_REQUEST_BODY", "message": "Invalid JSON in request body"}


def test_unknown_route(client):
    resp = client.get("/does-not-exist")
    assert resp.status_code == 404
    assert resp.json() == {
        "error": "NOT_FOUND",
        "message": "Endpoint GET /does-not-exist not found",
    }


@pytest.mark.parametrize("method, path", [
    ("GET", "/analyze"),
    ("POST", "/health"),
    ("DELETE", "/analyze"),
])
def test_wrong_method_reported_as_unknown_endpoint(client, method, path):
    resp = client.request(method, path)
    assert resp.status_code == 404
    assert resp.json() == {
        "error": "NOT_FOUND",
        "message": f"Endpoint {method} {path} not found",
    }


def test_analysis_fault_still_returns_safe_result(client, auth_headers, monkeypatch):
    from aurashield import detector

    def _boom(message):
        raise RuntimeError("broken stage")

    monkeypatch.setattr(detector, "detect_intent", _boom)
    resp = client.post("/analyze", json=_payload(), headers=auth_headers)
    assert resp.status_code == 200
    analysis = resp.json()["data"]["analysis"]
    assert analysis["is_scam"] is False
    assert analysis["risk_level"] == "low"
    assert analysis["reasoning"] == ["Error occurred during analysis, defaulting to non-scam"]
