"""Tests for the /api/tools endpoints."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from conftest import FULL_TOML, MINIMAL_TOML
from hwtools.dependencies import get_tool_registry, reset_services
from hwtools.routers import tools_router


@pytest.fixture
def client(write_plugin):
    reset_services()
    get_tool_registry([write_plugin("pwm_set", FULL_TOML), write_plugin("i2c_scan", MINIMAL_TOML)])
    app = FastAPI()
    app.include_router(tools_router)
    yield TestClient(app)
    reset_services()


class TestToolsRouter:
    """Tests for tools router."""

    def test_list_tools(self, client):
        response = client.get("/api/tools/")
        assert response.status_code == 200
        names = [t["name"] for t in response.json()["tools"]]
        assert names == ["pwm_set", "i2c_scan"]

    def test_get_tool(self, client):
        response = client.get("/api/tools/i2c_scan")
        assert response.status_code == 200
        assert response.json()["parameters"]["required"] == ["device"]

    def test_get_unknown_tool(self, client):
        assert client.get("/api/tools/nope").status_code == 404

    def test_normalize_arguments(self, client):
        response = client.post(
            "/api/tools/pwm_set/arguments",
            json={"arguments": {"device": "pico0", "pin": 4}},
        )
        assert response.status_code == 200
        assert response.json() == {
            "tool": "pwm_set",
            "arguments": {"device": "pico0", "pin": 4, "duty": 50},
        }

    def test_rejected_arguments(self, client):
        response = client.post(
            "/api/tools/pwm_set/arguments",
            json={"arguments": {"device": "pico0", "pin": 4, "duty": "fast"}},
        )
        assert response.status_code == 422
        body = response.json()
        assert body["tool"] == "pwm_set"
        assert [i["kind"] for i in body["issues"]] == ["type_mismatch"]

    def test_json_string_arguments(self, client):
        response = client.post(
            "/api/tools/pwm_set/arguments",
            json={"arguments": '{"device": "pico0", "pin": 4}'},
        )
        assert response.status_code == 200
        assert response.json()["arguments"] == {"device": "pico0", "pin": 4, "duty": 50}

    def test_invalid_json_string_arguments(self, client):
        response = client.post("/api/tools/pwm_set/arguments", json={"arguments": "{oops"})
        assert response.status_code == 422
        assert [i["kind"] for i in response.json()["issues"]] == ["invalid_payload"]

    def test_missing_arguments_body(self, client):
        response = client.post("/api/tools/i2c_scan/arguments", json={})
        assert response.status_code == 422
        assert response.json()["message"] == "missing required parameter: device"

    def test_normalize_unknown_tool(self, client):
        response = client.post("/api/tools/nope/arguments", json={"arguments": {}})
        assert response.status_code == 404
