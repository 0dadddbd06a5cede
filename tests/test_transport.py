import pytest
import requests

from py_bitcoin_rpc.outcome import ErrorKind
from py_bitcoin_rpc.rpc import Client
from py_bitcoin_rpc.transport import HttpTransport, TransportResponse, is_json


class FakeResponse:

    def __init__(self, status_code, text, content_type="application/json"):
        self.status_code = status_code
        self.text = text
        self.headers = {"Content-Type": content_type}

    @property
    def ok(self):
        return self.status_code < 400


@pytest.fixture
def posted(monkeypatch):
    calls = []
    replies = []

    def post(url, **kwargs):
        calls.append((url, kwargs))
        reply = replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    monkeypatch.setattr(requests, "post", post)
    return calls, replies


def send(transport, body='{"method": "ping"}'):
    return transport.post(
        "http://127.0.0.1:8332/",
        body,
        "alice",
        "secret",
        {"Content-Type": "application/json"},
        True,
    )


def test_post_arguments(posted):
    calls, replies = posted
    replies.append(FakeResponse(200, '{"result": null, "error": null, "id": "x"}'))
    send(HttpTransport(timeout=2.5))
    ((url, kwargs),) = calls
    assert url == "http://127.0.0.1:8332/"
    assert kwargs["data"] == b'{"method": "ping"}'
    assert kwargs["auth"] == ("alice", "secret")
    assert kwargs["headers"] == {"Content-Type": "application/json"}
    assert kwargs["verify"] is True
    assert kwargs["timeout"] == 2.5


def test_success(posted):
    _, replies = posted
    replies.append(FakeResponse(200, "body"))
    response = send(HttpTransport())
    assert response == TransportResponse("body", True)
    body, ok = response[:2]
    assert (body, ok) == ("body", True)


def test_rpc_error_status_is_delivered(posted):
    _, replies = posted
    body = '{"result": null, "error": {"code": -32601, "message": "Method not found"}, "id": "x"}'
    replies.append(FakeResponse(404, body, "application/json; charset=utf-8"))
    assert send(HttpTransport()).ok


def test_unauthorized_is_failure(posted):
    _, replies = posted
    replies.append(FakeResponse(401, "", "text/html"))
    response = send(HttpTransport())
    assert not response.ok
    assert response.reason == "http query failed with status code 401"


def test_server_error_without_json_is_failure(posted):
    _, replies = posted
    replies.append(FakeResponse(500, "<html>", "text/html"))
    assert not send(HttpTransport()).ok


def test_connection_error_is_failure(posted):
    _, replies = posted
    replies.append(requests.ConnectionError("refused"))
    response = send(HttpTransport())
    assert response == TransportResponse("", False, "ConnectionError: refused")


def test_timeout_is_failure(posted):
    _, replies = posted
    replies.append(requests.Timeout("read timed out"))
    assert not send(HttpTransport(timeout=0.1)).ok


def test_is_json():
    assert is_json("application/json")
    assert is_json("Application/JSON; charset=utf-8")
    assert not is_json("text/plain")
    assert not is_json("")


def test_client_over_http(posted):
    _, replies = posted
    replies.append(FakeResponse(500, '{"result": null, "error": {"code": -5, "message": "Block not found"}, "id": "x"}'))
    replies.append(requests.ConnectionError("refused"))
    client = Client("alice", "secret")
    outcome = client.dispatch("getblock", ["00"])
    assert outcome.kind is ErrorKind.REMOTE_ERROR
    assert outcome.code == -5
    outcome = client.dispatch("getblock", ["00"])
    assert outcome.kind is ErrorKind.TRANSPORT_FAILURE
    assert "refused" in outcome.detail
