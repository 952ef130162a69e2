"""Tests for FastAPI endpoints."""

import inspect

import pytest
from fastapi.testclient import TestClient

from lsystem3d import config
from lsystem3d.api import routes
from lsystem3d.api.main import app
from lsystem3d.rules.presets import PRESETS

client = TestClient(app)


class TestHealthEndpoint:
    def test_health(self):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestGenerateEndpoint:
    def test_generate(self):
        resp = client.post(
            "/api/generate",
            json={"axiom": "[F]F", "rules": ["F -> M"], "iterations": 1, "seed": 5},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["iterations"] == 1
        assert data["seed"] == 5
        segments = data["result"]["segments"]
        assert len(segments) == 2
        assert segments[0]["start"] == {"x": 0.0, "y": 0.0, "z": 0.0}
        assert segments[1]["start"] == {"x": 0.0, "y": 0.0, "z": 0.0}
        assert data["result"]["stats"]["segments"] == 2
        assert data["result"]["bounds"]["max"]["z"] == pytest.approx(1.0)

    def test_rules_as_text(self):
        resp = client.post(
            "/api/generate",
            json={"axiom": "A", "rules": "# tree\nA = M[+A]L", "iterations": 2},
        )
        assert resp.status_code == 200
        assert resp.json()["result"]["stats"]["leaves"] == 2

    def test_parameters_and_params(self):
        resp = client.post(
            "/api/generate",
            json={
                "axiom": "+(a)M",
                "parameters": {"a": 90},
                "params": {"default_move": 2},
            },
        )
        assert resp.status_code == 200
        end = resp.json()["result"]["segments"][0]["end"]
        assert end["x"] == pytest.approx(2.0)
        assert end["z"] == pytest.approx(0.0, abs=1e-9)

    def test_empty_bounds(self):
        resp = client.post("/api/generate", json={"axiom": "A"})
        assert resp.status_code == 200
        assert resp.json()["result"]["bounds"] == {"min": None, "max": None}

    def test_reproducible(self):
        body = {"axiom": "F", "rules": ["F = 1 M[+F]F, 1 M[-F]L"], "iterations": 5, "seed": 9}
        first = client.post("/api/generate", json=body).json()
        second = client.post("/api/generate", json=body).json()
        assert first == second

    def test_parse_error_is_400(self):
        resp = client.post("/api/generate", json={"axiom": "F", "rules": ["F = M[M"]})
        assert resp.status_code == 400
        assert "Unbalanced" in resp.json()["detail"]

    def test_duplicate_rule_is_400(self):
        resp = client.post("/api/generate", json={"axiom": "F", "rules": ["F = M", "F = N"]})
        assert resp.status_code == 400

    def test_capacity_is_422(self):
        resp = client.post(
            "/api/generate",
            json={"axiom": "F", "rules": ["F = FF"], "iterations": 8, "params": {"buffer_capacity": 16}},
        )
        assert resp.status_code == 422
        assert "capacity" in resp.json()["detail"]

    def test_stack_underflow_is_422(self):
        resp = client.post("/api/generate", json={"axiom": "M]"})
        assert resp.status_code == 422

    @pytest.mark.parametrize("body", [
        {"axiom": ""},
        {"axiom": "F", "iterations": -1},
        {"axiom": "F", "iterations": config.MAX_ITERATIONS + 1},
        {"axiom": "F", "parameters": {"A": 1}},
        {"axiom": "F", "params": {"buffer_capacity": config.MAX_BUFFER_CAPACITY + 1}},
    ])
    def test_request_validation(self, body):
        resp = client.post("/api/generate", json=body)
        assert resp.status_code == 422


class TestExpandEndpoint:
    def test_expand(self):
        resp = client.post(
            "/api/expand",
            json={"axiom": "A", "rules": ["A = AB", "B = A"], "iterations": 4},
        )
        assert resp.status_code == 200
        assert resp.json() == {"symbols": "ABAABABA", "length": 8}

    def test_expand_parse_error(self):
        resp = client.post("/api/expand", json={"axiom": "A", "rules": ["A = ?"]})
        assert resp.status_code == 400


class TestPresetEndpoints:
    def test_list(self):
        resp = client.get("/api/presets")
        assert resp.status_code == 200
        names = {p["name"] for p in resp.json()}
        assert names == set(PRESETS)

    def test_generate_preset_defaults(self):
        resp = client.post("/api/presets/bush/generate")
        assert resp.status_code == 200
        data = resp.json()
        assert data["iterations"] == PRESETS["bush"].iterations
        assert data["result"]["stats"]["segments"] > 0

    def test_generate_preset_with_options(self):
        resp = client.post("/api/presets/stochastic_tree/generate", json={"iterations": 2, "seed": 3})
        assert resp.status_code == 200
        assert resp.json()["iterations"] == 2

    def test_unknown_preset(self):
        resp = client.post("/api/presets/nope/generate")
        assert resp.status_code == 404


class TestRouteExecution:
    @pytest.mark.parametrize("endpoint", [routes.generate, routes.expand, routes.generate_preset])
    def test_generation_routes_run_off_the_event_loop(self, endpoint):
        assert not inspect.iscoroutinefunction(endpoint)
