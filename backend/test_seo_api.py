"""
Tests for the SEO API endpoint.

The app is built through create_app() with explicit settings and a fake
completion engine, so no network access or API key is needed.
"""

import json

import pytest
from fastapi.testclient import TestClient

from backend.src.api.main import create_app
from backend.src.core.config import Settings
from backend.src.core.seo.errors import ConfigurationError


class FakeEngine:
    """Records prompts and returns a canned completion (or raises)."""

    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.prompts = []

    def complete(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.content, {"choices": [{"message": {"content": self.content}}]}


def make_client(engine):
    settings = Settings(api_key="test-key", log_provider_payloads=False)
    return TestClient(create_app(settings=settings, engine=engine))


def test_empty_rows_returns_400_without_calling_provider():
    engine = FakeEngine(content="{}")
    response = make_client(engine).post("/api/generate-seo", json={"rows": []})

    assert response.status_code == 400
    assert response.json() == {"error": "No rows provided."}
    assert engine.prompts == []


def test_missing_rows_key_returns_400():
    engine = FakeEngine(content="{}")
    response = make_client(engine).post("/api/generate-seo", json={})

    assert response.status_code == 400
    assert response.json() == {"error": "No rows provided."}


def test_provider_failure_returns_500():
    engine = FakeEngine(error=RuntimeError("upstream exploded: secret detail"))
    response = make_client(engine).post("/api/generate-seo", json={"rows": [{"email": "a@x.com"}]})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate SEO descriptions."}
    assert "secret detail" not in response.text


def test_non_json_completion_returns_500():
    engine = FakeEngine(content="Sure! Here are your descriptions: ...")
    response = make_client(engine).post("/api/generate-seo", json={"rows": [{"email": "a@x.com"}]})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate SEO descriptions."}


def test_non_string_values_are_rejected():
    engine = FakeEngine(content=json.dumps({"x.com": {"text": "nested"}}))
    response = make_client(engine).post("/api/generate-seo", json={"rows": [{"email": "a@x.com"}]})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate SEO descriptions."}


def test_success_returns_mapping_and_prompt_lists_domains():
    mapping = {"foo.com": "Desc F.", "bar.com": "Desc B."}
    engine = FakeEngine(content=json.dumps(mapping))
    rows = [{"email": "a@foo.com", "seo": ""}, {"email": "c@bar.com", "seo": ""}]

    response = make_client(engine).post("/api/generate-seo", json={"rows": rows})

    assert response.status_code == 200
    assert response.json() == mapping
    assert len(engine.prompts) == 1
    assert engine.prompts[0].endswith("Return as JSON key-value pairs: foo.com, bar.com")


def test_missing_content_is_treated_as_empty_mapping():
    engine = FakeEngine(content=None)
    response = make_client(engine).post("/api/generate-seo", json={"rows": [{"email": "a@x.com"}]})

    assert response.status_code == 200
    assert response.json() == {}


def test_rows_without_domain_are_skipped():
    engine = FakeEngine(content=json.dumps({"ok.com": "Fine."}))
    rows = [{"email": "broken"}, {"email": "a@ok.com"}, {"name": "no email"}]

    response = make_client(engine).post("/api/generate-seo", json={"rows": rows})

    assert response.status_code == 200
    assert response.json() == {"ok.com": "Fine."}
    assert engine.prompts[0].endswith(": ok.com")


def test_batch_without_any_domain_skips_provider():
    engine = FakeEngine(content=json.dumps({"unused.com": "x"}))
    response = make_client(engine).post("/api/generate-seo", json={"rows": [{"email": "nobody"}]})

    assert response.status_code == 200
    assert response.json() == {}
    assert engine.prompts == []


def test_health_endpoint():
    response = make_client(FakeEngine(content="{}")).get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_create_app_without_api_key_fails_fast(monkeypatch):
    monkeypatch.delenv("SEO_OPEN_AI_API_KEY", raising=False)
    monkeypatch.setattr("backend.src.core.config.load_dotenv", lambda *args, **kwargs: False)

    with pytest.raises(ConfigurationError):
        create_app()
