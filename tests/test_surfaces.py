import json

import pytest
from fastapi.testclient import TestClient

from coingecko_adapter import adapter
from coingecko_adapter.clients.requester import UpstreamResponse
from coingecko_adapter.handlers import handler, handler_v2
from coingecko_adapter.main import app

from conftest import VALID, job


@pytest.fixture(autouse=True)
def fake_upstream(monkeypatch, ok_requester):
    monkeypatch.setattr(adapter, "Requester", lambda: ok_requester)
    return ok_requester


def test_http_endpoint():
    client = TestClient(app)
    r = client.post("/", json=job(**VALID))
    assert r.status_code == 200
    assert r.json()["result"] == {"average": 20}


def test_http_endpoint_validation_error():
    client = TestClient(app)
    r = client.post("/", json={"id": "abc", "data": {}})
    assert r.status_code == 400
    assert r.json()["jobRunID"] == "abc"


def test_health():
    assert TestClient(app).get("/health").json() == {"status": "ok"}


def test_lambda_handler():
    payload = handler(job(**VALID), None)
    assert payload["jobRunID"] == "job-1"
    assert payload["data"]["result"]["average"] == 20


def test_lambda_handler_v2():
    response = handler_v2({"body": json.dumps(job(**VALID, withDetails=True))}, None)
    assert response["statusCode"] == 200
    assert response["isBase64Encoded"] is False
    body = json.loads(response["body"])
    assert body["data"]["prices"] == [[1000, 10], [2000, 20], [3000, 30]]


def test_lambda_handler_v2_bad_body(fake_upstream):
    response = handler_v2({"body": "not json"}, None)
    assert response["statusCode"] == 400
    assert json.loads(response["body"])["jobRunID"] == "1"
    assert fake_upstream.calls == []


def test_http_endpoint_invalid_json(fake_upstream):
    client = TestClient(app)
    r = client.post("/", content=b"not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json()["jobRunID"] == "1"
    assert r.json()["status"] == "errored"
    assert fake_upstream.calls == []


def test_http_endpoint_non_finite_average(fake_upstream):
    fake_upstream.response = UpstreamResponse(status_code=200, data={"prices": [[1, float("nan")]]})
    client = TestClient(app)
    r = client.post("/", json=job(**VALID))
    assert r.status_code == 500
    assert r.json()["jobRunID"] == "job-1"
    assert r.json()["status"] == "errored"
