from typing import Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from gaia_sdk import Argument, ExitPipeline, InputType, Job, JobFailed, JobHandler, ManualInteraction
from gaia_sdk.app import create_app
from gaia_sdk.config import PluginConfig
from gaia_sdk.services import ExecutionDispatcher, JobRegistry, PluginService


class RecordingHandler(JobHandler):
    """Handler that records every call and optionally raises."""

    def __init__(self, error: Optional[BaseException] = None):
        self.calls: List[Dict[str, str]] = []
        self.error = error

    def execute(self, arguments: Dict[str, str]) -> None:
        self.calls.append(dict(arguments))
        if self.error is not None:
            raise self.error


@pytest.fixture
def handlers():
    """Handlers keyed by job title"""
    return {
        "build": RecordingHandler(),
        "deploy": RecordingHandler(),
        "halt": RecordingHandler(ExitPipeline()),
        "broken": RecordingHandler(JobFailed("disk full")),
        "crash": RecordingHandler(RuntimeError("boom")),
    }


@pytest.fixture
def sample_jobs(handlers):
    """A small pipeline covering every outcome"""
    return [
        Job(title="build", description="Builds the project", handler=handlers["build"]),
        Job(
            title="deploy",
            description="Deploys the build",
            handler=handlers["deploy"],
            depends_on=["Build"],
            arguments=[
                Argument(description="Target", type=InputType.TEXT_FIELD, key="target", value="staging"),
                Argument(description="Token", type=InputType.SECRET, key="token"),
            ],
            interaction=ManualInteraction(description="Really deploy?", type=InputType.BOOLEAN),
        ),
        Job(title="halt", handler=handlers["halt"]),
        Job(title="broken", handler=handlers["broken"]),
        Job(title="crash", handler=handlers["crash"]),
    ]


@pytest.fixture
def registry(sample_jobs):
    return JobRegistry.build(sample_jobs)


@pytest.fixture
def dispatcher(registry):
    return ExecutionDispatcher(registry)


@pytest.fixture
def plugin_service(registry, dispatcher):
    return PluginService(registry, dispatcher)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep host plugin settings out of the tests"""
    for name in (
        "GAIA_PLUGIN_CERT", "GAIA_PLUGIN_KEY", "GAIA_PLUGIN_CA_CERT",
        "LISTEN_ADDRESS", "NETWORK_TYPE", "LOG_LEVEL", "LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def plugin_config():
    """Plugin configuration with no TLS material"""
    return PluginConfig()


@pytest.fixture
def app(plugin_service, plugin_config):
    return create_app(plugin_service, plugin_config)


@pytest.fixture
def client(app):
    """HTTP test client"""
    return TestClient(app)


@pytest.fixture
async def async_client(app):
    """Async HTTP test client"""
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as client:
        yield client
