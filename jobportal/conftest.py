"""Shared fixtures: a fake data store and AI gateway behind httpx.MockTransport."""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from jobportal.config import Settings
from jobportal.main import create_app

AI_HOST = "ai.test"

SETTINGS = Settings(
    supabase_url="https://db.test",
    supabase_service_role_key="service-key",
    ai_gateway_api_key="ai-key",
    ai_gateway_url=f"https://{AI_HOST}/v1/chat/completions",
)


class FakeUpstream:
    """Records every outbound request and answers like PostgREST / the AI gateway."""

    def __init__(self):
        self.jobs = []
        self.profiles = []
        self.jobs_status = 200
        self.completion_status = 200
        self.completion_body = {"choices": [{"message": {"content": "Hello from the assistant"}}]}
        self.completion_error = None
        self.requests = []

    # ── Inspection ───────────────────────────────────────────

    def completion_calls(self):
        return [json.loads(r.content) for r in self.requests if r.url.host == AI_HOST]

    def store_calls(self):
        return [r for r in self.requests if r.url.host != AI_HOST]

    # ── Transport handler ────────────────────────────────────

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == AI_HOST:
            if self.completion_error is not None:
                raise self.completion_error
            if self.completion_status != 200:
                return httpx.Response(self.completion_status, text="upstream said no")
            return httpx.Response(200, json=self.completion_body)

        if request.url.path == "/rest/v1/jobs":
            if request.method == "POST":
                row = {"id": f"job-{len(self.jobs) + 1}", "created_at": "2026-10-19T10:00:00Z"}
                row.update(json.loads(request.content))
                self.jobs.insert(0, row)
                return httpx.Response(201, json=[row])
            if self.jobs_status != 200:
                return httpx.Response(self.jobs_status, json={"message": "relation unavailable"})
            return httpx.Response(200, json=_filter(self.jobs, request.url.params))

        if request.url.path == "/rest/v1/profiles":
            return httpx.Response(200, json=_filter(self.profiles, request.url.params))

        return httpx.Response(404, json={"message": "no such table"})


def _filter(rows, params):
    # rows are kept newest first, so ordering is left as stored
    for column, value in params.items():
        if column in ("select", "order") or not value.startswith("eq."):
            continue
        rows = [row for row in rows if str(row.get(column)) == value[3:]]
    return rows


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def make_client(upstream):
    def _make(settings: Settings = SETTINGS) -> TestClient:
        app = create_app(settings, transport=httpx.MockTransport(upstream.handler))
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client):
    return make_client()


def frontend_job(**overrides):
    job = {
        "id": "job-frontend",
        "employer_id": "employer-1",
        "title": "Frontend Engineer",
        "company_name": "Acme Labs",
        "role": "Engineering",
        "salary": "₹12-18 LPA",
        "location": "Bengaluru",
        "skills_required": ["React", "Node"],
        "description": "Build the candidate dashboard.",
        "status": "active",
        "created_at": "2026-10-18T09:00:00Z",
    }
    job.update(overrides)
    return job
