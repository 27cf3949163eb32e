from __future__ import annotations

import asyncio
import sys

import pytest
from fastapi.testclient import TestClient

from initdemo.config.models import ServerConfig
from initdemo.server import RequestHandler, create_app
from initdemo.server.models import ResponseEnvelope

from .conftest import SAMPLE_TEXT


@pytest.fixture(params=["process", "inline"])
def invoke(request):
    return request.param


def _client(base_dir, **kw) -> TestClient:
    return TestClient(create_app(ServerConfig(base_dir=base_dir, **kw)))


def test_get_root_returns_sample(sample_dir, invoke):
    res = _client(sample_dir, invoke=invoke).get("/")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("application/json")
    assert res.json() == {"status": "success", "data": {"output": SAMPLE_TEXT}}


def test_get_root_is_idempotent(sample_dir, invoke):
    client = _client(sample_dir, invoke=invoke)
    first = client.get("/").json()
    second = client.get("/").json()
    assert first == second
    assert (sample_dir / "sample.txt").read_text(encoding="utf-8") == SAMPLE_TEXT


def test_missing_sample_is_500(tmp_path, invoke):
    res = _client(tmp_path, invoke=invoke).get("/")
    assert res.status_code == 500
    body = res.json()
    assert body["status"] == "error"
    assert body["error"]["message"] == "script execution failed"
    assert "File not found" in body["error"]["details"]
    assert str(tmp_path / "sample.txt") in body["error"]["details"]
    assert "data" not in body


def test_unreadable_sample_is_500(tmp_path, invoke):
    (tmp_path / "sample.txt").mkdir()
    res = _client(tmp_path, invoke=invoke).get("/")
    assert res.status_code == 500
    assert "Error reading file" in res.json()["error"]["details"]


def test_configured_sample_file(tmp_path):
    (tmp_path / "other.txt").write_text("other\n", encoding="utf-8")
    res = _client(tmp_path, sample_file="other.txt").get("/")
    assert res.json()["data"]["output"] == "other\n"


def test_custom_reader_command_nonzero_exit(tmp_path):
    cmd = [sys.executable, "-c", "import sys; sys.stderr.write('boom'); sys.exit(2)"]
    res = _client(tmp_path, reader_command=cmd).get("/")
    assert res.status_code == 500
    assert res.json() == {
        "status": "error",
        "error": {"message": "script execution failed", "details": "boom"},
    }


def test_spawn_failure_is_500(tmp_path):
    res = _client(tmp_path, reader_command=[str(tmp_path / "no-such-binary")]).get("/")
    assert res.status_code == 500
    body = res.json()
    assert body["error"]["message"] == "script execution failed"
    assert "failed to launch reader" in body["error"]["details"]


def test_query_parameters_are_ignored(sample_dir):
    res = _client(sample_dir).get("/", params={"file": "/etc/passwd"})
    assert res.json()["data"]["output"] == SAMPLE_TEXT


def test_envelope_omits_absent_members():
    assert ResponseEnvelope.success("x").to_json() == {"status": "success", "data": {"output": "x"}}
    assert ResponseEnvelope.failure(None).to_json() == {
        "status": "error",
        "error": {"message": "script execution failed"},
    }


def test_concurrent_requests_are_independent(sample_dir, invoke):
    handler = RequestHandler(ServerConfig(base_dir=sample_dir, invoke=invoke))

    async def _burst():
        return await asyncio.gather(*(handler.handle() for _ in range(5)))

    results = asyncio.run(_burst())
    assert [status for status, _ in results] == [200] * 5
    assert {env.data.output for _, env in results} == {SAMPLE_TEXT}
