import json

import pytest
import requests

from instagram_client.client import InstagramClient
from instagram_client.errors import InstagramError
from instagram_client.http import VERSION, HttpClient


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        self._body = body
        self.text = text if text is not None else json.dumps(body)

    def json(self):
        if self._body is None:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._body


def _record(monkeypatch, method, response):
    calls = []

    def fake(url, **kwargs):
        calls.append((url, kwargs))
        return response

    monkeypatch.setattr(requests, method, fake)
    return calls


def test_url_for_joins_slashes():
    http = HttpClient(base_url="https://api.instagram.com/v1/")
    assert http.url_for("users/self") == "https://api.instagram.com/v1/users/self"
    assert http.url_for("/users/self") == "https://api.instagram.com/v1/users/self"


def test_get_sends_access_token_and_params(monkeypatch):
    calls = _record(monkeypatch, "get", FakeResponse(body={"data": {"id": "4"}}))
    client = InstagramClient(access_token="tok", client_id="cid")

    assert client.users.get_follows(4, {"count": 10}) == {"id": "4"}

    url, kwargs = calls[0]
    assert url == "https://api.instagram.com/v1/users/4/follows"
    assert kwargs["params"] == {"access_token": "tok", "count": 10}
    assert kwargs["headers"]["Accept"] == "application/json"
    assert kwargs["timeout"] == 30.0


def test_get_falls_back_to_client_id(monkeypatch):
    calls = _record(monkeypatch, "get", FakeResponse(body={"data": []}))
    client = InstagramClient(client_id="cid")
    client.users.search_users("shayne")
    assert calls[0][1]["params"] == {"client_id": "cid", "q": "shayne"}


def test_caller_auth_param_wins(monkeypatch):
    calls = _record(monkeypatch, "get", FakeResponse(body={"data": {}}))
    client = InstagramClient(access_token="tok")
    client.get("users/self", {"access_token": "mine"})
    assert calls[0][1]["params"] == {"access_token": "mine"}


def test_user_agent_carries_version(monkeypatch):
    calls = _record(monkeypatch, "get", FakeResponse(body={"data": {}}))
    InstagramClient(client_id="cid").get("users/self")
    assert calls[0][1]["headers"]["User-Agent"] == f"instagram-client/{VERSION}"


def test_post_is_form_encoded(monkeypatch):
    calls = _record(monkeypatch, "post", FakeResponse(body={"data": {"outgoing_status": "follows"}}))
    client = InstagramClient(access_token="tok", api_url="https://example.test/v1")

    data = client.users.set_relationship(4, "follow")

    url, kwargs = calls[0]
    assert url == "https://example.test/v1/users/4/relationship"
    assert kwargs["data"] == {"access_token": "tok", "action": "follow"}
    assert "json" not in kwargs
    assert data == {"outgoing_status": "follows"}


def test_error_envelope_is_surfaced(monkeypatch):
    body = {
        "meta": {
            "code": 400,
            "error_type": "OAuthAccessTokenException",
            "error_message": "The access_token provided is invalid.",
        }
    }
    _record(monkeypatch, "get", FakeResponse(status_code=400, body=body))
    client = InstagramClient(access_token="bad")

    with pytest.raises(InstagramError) as excinfo:
        client.users.get_user()

    err = excinfo.value
    assert err.status_code == 400
    assert err.error_type == "OAuthAccessTokenException"
    assert "access_token provided is invalid" in str(err)
    assert "users/self" in str(err)


def test_error_without_envelope_uses_body_text(monkeypatch):
    _record(monkeypatch, "get", FakeResponse(status_code=503, text="Service Unavailable"))
    client = InstagramClient(client_id="cid")

    with pytest.raises(InstagramError) as excinfo:
        client.get("users/self")

    assert excinfo.value.status_code == 503
    assert excinfo.value.error_type is None
    assert "Service Unavailable" in str(excinfo.value)


def test_undecodable_body_raises(monkeypatch):
    _record(monkeypatch, "get", FakeResponse(status_code=200, text="<html>"))
    client = InstagramClient(client_id="cid")

    with pytest.raises(InstagramError, match="Failed to decode JSON"):
        client.users.get_requested_by()


def test_network_errors_propagate(monkeypatch):
    def boom(url, **kwargs):
        raise requests.ConnectionError("down")

    monkeypatch.setattr(requests, "get", boom)
    client = InstagramClient(client_id="cid")

    with pytest.raises(requests.ConnectionError):
        client.users.get_user(1)
