"""
tests/integration/test_api.py

HTTP surface over the gateway, exercised with FastAPI's TestClient.

Verifies:
✔ Every generation route answers 200 with a contract-satisfying result
✔ Request validation rejects bad bodies with 422
✔ Health and config endpoints report the active provider
✔ Provider output flows through when a provider succeeds
"""

import pytest
from fastapi.testclient import TestClient

from api import get_gateway
from inference import ModelBackend, ModelRequest, ModelResponse, StaticTemplateBackend
from infra.config import GatewayConfig
from infra.registry import ModelSelection, ProviderDescriptor, TEMPLATE_DESCRIPTOR, TransportKind
from main import app
from scholar.gateway import AIGateway


class CannedBackend(ModelBackend):
    name = "groq"

    def __init__(self, output: str):
        self.output = output

    async def invoke(self, request: ModelRequest) -> ModelResponse:
        return ModelResponse(status="success", output=self.output)


def canned_gateway(output: str) -> AIGateway:
    groq = ProviderDescriptor(
        name="groq",
        transport=TransportKind.HOSTED_API,
        cost_class="free-tier",
        priority=100,
        models=ModelSelection("f", "b", "c"),
    )
    return AIGateway(
        [groq, TEMPLATE_DESCRIPTOR],
        {"groq": CannedBackend(output), "template": StaticTemplateBackend()},
    )


@pytest.fixture
def client():
    """TestClient on a template-only gateway (no network)."""
    gateway = AIGateway.from_config(GatewayConfig())
    app.dependency_overrides[get_gateway] = lambda: gateway
    app.state.gateway = gateway
    with TestClient(app) as test_client:
        # lifespan rebuilds app.state.gateway from the environment
        app.state.gateway = gateway
        yield test_client
    app.dependency_overrides.clear()


RESUME_BODY = {
    "fullName": "Asha Rao",
    "email": "asha@example.com",
    "targetRole": "Data Analyst",
    "country": "IN",
    "skills": ["Python", "SQL"],
}


class TestGenerationRoutes:
    def test_resume_fallback(self, client):
        response = client.post("/api/resume/generate", json=RESUME_BODY)
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["source"] == "fallback"
        assert body["provider"] == "template"
        assert body["targetRole"] == "Data Analyst"
        assert body["resume"]["contact"]["name"] == "Asha Rao"
        assert body["resume"]["contact"]["phone"].startswith("+91")

    def test_profile_optimization(self, client):
        response = client.post("/api/profile/optimize", json={"headline": "CS Student", "country": "US"})
        assert response.status_code == 200
        optimization = response.json()["optimization"]
        assert isinstance(optimization["profileScore"], int)
        assert optimization["headline"]["current"] == "CS Student"

    def test_networking_suggestions(self, client):
        response = client.post("/api/networking/suggestions", json={"targetRole": "SDE", "country": "India"})
        assert response.status_code == 200
        body = response.json()
        assert body["suggestions"]["targetCompanies"][0]["name"] == "TCS"
        assert body["targetRole"] == "SDE"

    def test_connection_message(self, client):
        response = client.post(
            "/api/networking/message",
            json={"targetName": "Priya", "targetRole": "Engineering Manager", "targetCompany": "Razorpay"},
        )
        assert response.status_code == 200
        assert response.json()["messages"]["messages"]

    def test_provider_output_flows_through(self, client):
        app.dependency_overrides[get_gateway] = lambda: canned_gateway(
            'Sure! {"messages": [{"type": "Warm", "text": "Hi Priya", "length": 8}]}'
        )
        response = client.post("/api/networking/message", json={"targetName": "Priya", "targetRole": "EM"})
        body = response.json()
        assert body["source"] == "provider"
        assert body["provider"] == "groq"
        assert body["messages"]["messages"][0]["text"] == "Hi Priya"


class TestValidation:
    @pytest.mark.parametrize(
        "body",
        [
            {"email": "asha@example.com", "targetRole": "SDE"},
            {"fullName": "Asha", "email": "not-an-email", "targetRole": "SDE"},
            {"fullName": "   ", "email": "asha@example.com", "targetRole": "SDE"},
            {"fullName": "Asha", "email": "asha@example.com", "targetRole": "SDE", "country": "XX"},
        ],
    )
    def test_resume_rejects_bad_bodies(self, client, body):
        assert client.post("/api/resume/generate", json=body).status_code == 422

    def test_headline_length_limit(self, client):
        response = client.post("/api/profile/optimize", json={"headline": "x" * 221})
        assert response.status_code == 422

    def test_networking_requires_target_role(self, client):
        assert client.post("/api/networking/suggestions", json={}).status_code == 422

    def test_connection_message_requires_target(self, client):
        assert client.post("/api/networking/message", json={"targetRole": "EM"}).status_code == 422


class TestServiceEndpoints:
    def test_health_live(self, client):
        assert client.get("/health/live").json() == {"status": "alive"}

    def test_health_ready_reports_active_provider(self, client):
        body = client.get("/health/ready").json()
        assert body["status"] == "ready"
        assert body["active_provider"] == "template"

    def test_config_info(self, client):
        body = client.get("/config/info").json()
        assert body["active_provider"] == "template"
        assert body["failover"] is False
        assert "environment" in body

    def test_root_lists_endpoints(self, client):
        assert "resume" in client.get("/").json()["endpoints"]
