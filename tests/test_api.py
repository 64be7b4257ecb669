"""Tests for the HTTP surface."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from social_signals.main import app
from social_signals.schemas.signals import SignalSource
from social_signals.services.dispatch import Dispatcher, get_dispatcher
from social_signals.services.entrypoints import build_registry
from tests.helpers import FakeUpstreamClient, upstream_failure


@pytest.fixture
def api(make_sources, billing):
    """Test client whose dispatcher talks to a fake upstream."""

    def _make(client: FakeUpstreamClient = None) -> TestClient:
        sources = make_sources(client or FakeUpstreamClient())
        dispatcher = Dispatcher(build_registry(sources), billing)
        app.dependency_overrides[get_dispatcher] = lambda: dispatcher
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


class TestMeta:
    def test_health(self, api):
        resp = api().get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"

    def test_root(self, api):
        resp = api().get("/")
        assert resp.json()["entrypoints"] == "/api/v1/entrypoints"


class TestEntrypointListing:
    def test_lists_all_entrypoints(self, api):
        resp = api().get("/api/v1/entrypoints")

        assert resp.status_code == 200
        data = resp.json()
        assert [e["key"] for e in data["entrypoints"]] == [
            "overview",
            "hn-top",
            "news",
            "search",
            "news-multi",
            "all-signals",
        ]
        assert "enabled" in data["payments"]

    def test_describe_single(self, api):
        resp = api().get("/api/v1/entrypoints/search")

        assert resp.status_code == 200
        assert resp.json()["price"] == 2000

    def test_describe_unknown(self, api):
        assert api().get("/api/v1/entrypoints/nope").status_code == 404


class TestInvoke:
    def test_success(self, api, billing):
        resp = api().post("/api/v1/entrypoints/news/invoke", json={"input": {"category": "science", "limit": 2}})

        assert resp.status_code == 200
        output = resp.json()["output"]
        assert output["category"] == "science"
        assert output["count"] == 2
        assert billing.reports[0].price == 1000

    def test_without_body(self, api):
        resp = api().post("/api/v1/entrypoints/overview/invoke")

        assert resp.status_code == 200
        assert resp.json()["output"]["summary"]["hn_stories"] == 3

    def test_validation_error(self, api):
        resp = api().post("/api/v1/entrypoints/search/invoke", json={"input": {"query": ""}})

        assert resp.status_code == 400
        error = resp.json()["error"]
        assert error["code"] == "validation_error"
        assert error["field"] == "query"

    def test_unknown_entrypoint(self, api):
        resp = api().post("/api/v1/entrypoints/nope/invoke", json={"input": {}})

        assert resp.status_code == 404
        assert resp.json()["error"]["code"] == "not_found"

    def test_upstream_error(self, api):
        client = FakeUpstreamClient({"hackernews": upstream_failure(SignalSource.DISCUSSION, 500)})
        resp = api(client).post("/api/v1/entrypoints/hn-top/invoke", json={"input": {"limit": 5}})

        assert resp.status_code == 502
        assert resp.json() == {
            "error": {
                "code": "upstream_error",
                "message": "API error: 500",
                "source": "hackernews",
                "status_code": 500,
            }
        }

    def test_unexpected_error(self, make_sources, billing):
        dispatcher = Dispatcher(build_registry(make_sources(FakeUpstreamClient())), billing)
        dispatcher.registry.get("news").execute = AsyncMock(side_effect=KeyError("articles"))
        app.dependency_overrides[get_dispatcher] = lambda: dispatcher
        try:
            resp = TestClient(app).post("/api/v1/entrypoints/news/invoke", json={"input": {}})
        finally:
            app.dependency_overrides.clear()

        assert resp.status_code == 500
        assert resp.json() == {"error": {"code": "internal_error", "message": "Internal error"}}
