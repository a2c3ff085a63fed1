import json

import pytest

from fom.connector import FluidConnector, FluidResponse
from fom.gateway import CallGateway


def json_response(status_code, payload=None, reason="", content_type="application/json", headers=None):
    content = json.dumps(payload) if payload is not None else ""
    return FluidResponse(
        status_code=status_code,
        reason=reason,
        content_type=content_type if payload is not None else "",
        content=content,
        headers=headers or {},
    )


class FakeConnector(FluidConnector):
    """Connector that replays queued responses and records every request."""

    def __init__(self, username="alice", password="secret"):
        super().__init__("http://fluiddb.test", username, password)
        self.responses = []
        self.requests = []

    def queue(self, *responses):
        self.responses.extend(responses)

    def issue_request(self, method, path, body="", args=None, content_type="application/json; charset=utf-8"):
        self.requests.append({
            "method": method,
            "path": path,
            "body": body,
            "args": dict(args or {}),
            "content_type": content_type,
        })
        return self.responses.pop(0)

    @property
    def last(self):
        return self.requests[-1]


@pytest.fixture
def connector():
    return FakeConnector()


@pytest.fixture
def gateway(connector):
    return CallGateway(connector)
