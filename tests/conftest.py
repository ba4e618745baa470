import pytest
import httpx
from click.testing import CliRunner

from sonar_gate.services import SonarService


ACTIVITY_PATH = "/api/ce/activity"
PROJECT_STATUS_PATH = "/api/qualitygates/project_status"


def make_task(task_id="AXaB1", status="PENDING", component_key="externals"):
    """Build a task record as returned by api/ce/activity."""
    return {
        "organization": "default-organization",
        "id": task_id,
        "taskType": "REPORT",
        "componentId": "AXc0mp",
        "componentKey": component_key,
        "componentName": "Externals",
        "componentQualifier": "TRK",
        "status": status,
        "submittedAt": "2024-01-01T10:00:00+0000",
        "executionTimeMs": 0,
        "logs": False,
        "hasScannerContext": True,
    }


class FakeSonarServer:
    """In-memory SonarQube API served through httpx.MockTransport.

    Responses are either JSON-able objects, raw bytes, or exceptions to
    raise. Activity responses are consumed in order; the last one repeats.
    """

    def __init__(self):
        self.activity_responses = [{"tasks": []}]
        self.status_response = {"projectStatus": {"status": "OK"}}
        self.requests = []

    def _reply(self, item, request):
        if isinstance(item, Exception):
            raise item
        if isinstance(item, bytes):
            return httpx.Response(200, content=item, request=request)
        return httpx.Response(200, json=item, request=request)

    def handler(self, request):
        self.requests.append(request)
        if request.url.path.endswith(ACTIVITY_PATH):
            if len(self.activity_responses) > 1:
                item = self.activity_responses.pop(0)
            else:
                item = self.activity_responses[0]
            return self._reply(item, request)
        if request.url.path.endswith(PROJECT_STATUS_PATH):
            return self._reply(self.status_response, request)
        return httpx.Response(404, json={"errors": [{"msg": "Unknown url"}]})

    @property
    def transport(self):
        return httpx.MockTransport(self.handler)

    def paths(self):
        return [request.url.path for request in self.requests]


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def sonar_server():
    """Provides a fake SonarQube API."""
    return FakeSonarServer()


@pytest.fixture
def sonar_service(sonar_server):
    """Provides a SonarService wired to the fake API."""
    service = SonarService("http://localhost:9000/", "token", transport=sonar_server.transport)
    yield service
    service.close()


@pytest.fixture(autouse=True)
def clear_sonar_env(monkeypatch):
    """Keep environment configuration from leaking into tests."""
    for name in ("SONAR_HOST_URL", "SONAR_PROJECT_KEY", "SONAR_TOKEN",
                 "SONAR_GATE_TIMEOUT", "SONAR_GATE_REFRESH_PERIOD"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def task_record():
    """Provides a builder for raw task records."""
    return make_task
