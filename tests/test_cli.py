"""
Test: Permission CLI
"""

import json
from unittest.mock import patch

from conftest import FakeConnector, json_response
from fom import cli
from fom.connector import FluidResponse
from fom.fluiddb import FluidDB


def _run(argv, *responses):
    fdb = FluidDB(connector=FakeConnector())
    fdb.connector.queue(*responses)
    with patch.object(cli.FluidDB, "from_config", return_value=fdb):
        code = cli.main(argv)
    return code, fdb.connector


def test_get(tmp_path, capsys):
    code, connector = _run(
        ["--config", str(tmp_path / "config.json"), "get", "/permissions/namespaces/alice", "--action", "create"],
        json_response(200, {"policy": "closed", "exceptions": ["bob"]}),
    )
    assert code == 0
    assert connector.last["args"] == {"action": "create"}
    assert json.loads(capsys.readouterr().out) == {"policy": "closed", "exceptions": ["bob"]}


def test_get_not_authorized(tmp_path, capsys):
    code, _ = _run(
        ["--config", str(tmp_path / "config.json"), "get", "/permissions/namespaces/fluiddb"],
        FluidResponse(status_code=401),
    )
    assert code == 0
    assert "Not authorized" in capsys.readouterr().out


def test_set(tmp_path, capsys):
    code, connector = _run(
        ["--config", str(tmp_path / "config.json"), "set", "/policies/alice/tags/update",
         "--policy", "open", "--exceptions", "bob, carol"],
        FluidResponse(status_code=204),
    )
    assert code == 0
    assert connector.last["args"] == {}
    assert json.loads(connector.last["body"]) == {"exceptions": ["bob", "carol"], "policy": "open"}
    assert capsys.readouterr().out.strip() == "OK"


def test_remote_error_exit_code(tmp_path, capsys):
    code, _ = _run(
        ["--config", str(tmp_path / "config.json"), "set", "/policies/alice/tags/update", "--policy", "closed"],
        FluidResponse(status_code=500, reason="Internal Server Error"),
    )
    assert code == 1
    assert "500" in capsys.readouterr().err


def test_lowercase_log_level(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"system": {"log_level": "debug"}}), encoding="utf-8")
    with patch.object(cli.logging, "basicConfig") as basic_config:
        code, _ = _run(
            ["--config", str(path), "get", "/permissions/namespaces/alice"],
            json_response(200, {"policy": "open", "exceptions": []}),
        )
    assert code == 0
    assert basic_config.call_args.kwargs["level"] == "DEBUG"


def test_malformed_payload_exit_code(tmp_path, capsys):
    code, _ = _run(
        ["--config", str(tmp_path / "config.json"), "get", "/permissions/namespaces/alice"],
        json_response(200, {"policy": "open"}),
    )
    assert code == 1
    assert "exceptions" in capsys.readouterr().err


def test_invalid_json_exit_code(tmp_path, capsys):
    code, _ = _run(
        ["--config", str(tmp_path / "config.json"), "get", "/permissions/namespaces/alice"],
        FluidResponse(status_code=200, content_type="application/json", content="{not json"),
    )
    assert code == 1
    assert capsys.readouterr().err.startswith("Error:")
