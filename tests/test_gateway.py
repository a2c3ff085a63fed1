"""
Test: Call Gateway

Validates:
- Exact status matching (a 200 is a failure when 204 is expected)
- RemoteCallError carries the connector's description and the status code
- Transport errors are not masked
- JSON conversion only for exact application/json
"""

from unittest.mock import patch

import pytest

from conftest import json_response
from fom.connector import FluidResponse, Method
from fom.exceptions import RemoteCallError, TransportError, UnsupportedContentTypeError
from fom.gateway import parse_json


def test_call_returns_response_on_expected_status(gateway, connector):
    connector.queue(FluidResponse(status_code=204, reason="No Content"))
    response = gateway.call(Method.PUT, 204, '{"description": "a test"}', path="/namespaces/alice")

    assert response.status_code == 204
    assert connector.last["method"] == Method.PUT
    assert connector.last["path"] == "/namespaces/alice"
    assert connector.last["content_type"] == "application/json; charset=utf-8"
    assert connector.last["args"] == {}


def test_call_rejects_other_success_codes(gateway, connector):
    connector.queue(json_response(200, {"id": "1"}, reason="OK"))
    with pytest.raises(RemoteCallError) as excinfo:
        gateway.call(Method.PUT, 204, "{}", path="/namespaces/alice")

    assert excinfo.value.status_code == 200
    assert "200 (OK)" in str(excinfo.value)


def test_call_error_message_from_connector(gateway, connector):
    connector.queue(FluidResponse(
        status_code=401,
        reason="Unauthorized",
        headers={"X-FluidDB-Error-Class": "TPathPermissionDenied", "X-FluidDB-Request-Id": "r1"},
    ))
    with pytest.raises(RemoteCallError) as excinfo:
        gateway.call(Method.PUT, 204, '{"description": "a test"}', path="/namespaces/fluiddb")

    assert str(excinfo.value).startswith(
        "FluidDB returned the following problematic response: 401 (Unauthorized) TPathPermissionDenied"
    )
    assert excinfo.value.response.status_code == 401


def test_call_passes_args_and_content_type(gateway, connector):
    connector.queue(FluidResponse(status_code=200))
    gateway.call(Method.GET, 200, args={"returnDescription": "True"}, path="/tags/alice/rating",
                 content_type="application/vnd.fluiddb.value+json")

    assert connector.last["args"] == {"returnDescription": "True"}
    assert connector.last["content_type"] == "application/vnd.fluiddb.value+json"


def test_transport_error_propagates_unchanged(gateway, connector):
    error = TransportError("down")
    with patch.object(connector, "issue_request", side_effect=error):
        with pytest.raises(TransportError) as excinfo:
            gateway.call(Method.GET, 200, path="/users/alice")

    assert excinfo.value is error


def test_parse_json():
    response = FluidResponse(status_code=200, content_type="application/json", content='{ "foo": "bar"}')
    assert parse_json(response) == {"foo": "bar"}


@pytest.mark.parametrize("content_type", ["plain/text", "application/json; charset=utf-8", ""])
def test_parse_json_requires_exact_content_type(content_type):
    response = FluidResponse(status_code=200, content_type=content_type, content='{ "foo": "bar"}')
    with pytest.raises(UnsupportedContentTypeError):
        parse_json(response)
