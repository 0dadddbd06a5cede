import json

import pytest

from py_bitcoin_rpc.node import Node
from py_bitcoin_rpc.rpc import Client


class StubTransport:
    """Records posted requests and replies with a canned body."""

    def __init__(self, body="", ok=True):
        self.body = body
        self.ok = ok
        self.requests = []

    def post(self, url, body, username, password, headers, verify):
        self.requests.append({
            "url": url,
            "body": body,
            "username": username,
            "password": password,
            "headers": headers,
            "verify": verify,
        })
        return self.body, self.ok

    @property
    def last_request(self):
        return json.loads(self.requests[-1]["body"])


class RecordingLogger:
    """Collects log events instead of emitting them."""

    def __init__(self):
        self.events = []

    def info(self, msg, *args):
        self.events.append(("info", msg % args))

    def debug(self, msg, *args):
        self.events.append(("debug", msg % args))

    def error(self, msg, *args):
        self.events.append(("error", msg % args))

    def messages(self, level):
        return [m for lvl, m in self.events if lvl == level]


def envelope(result=None, error=None):
    return json.dumps({"result": result, "error": error, "id": "x"})


@pytest.fixture
def transport():
    return StubTransport(envelope(None))


@pytest.fixture
def recorder():
    return RecordingLogger()


@pytest.fixture
def client(transport, recorder):
    return Client("alice", "secret", transport=transport, log=recorder)


@pytest.fixture
def node(transport, recorder):
    return Node("alice", "secret", transport=transport, log=recorder)
