from __future__ import annotations

import sys
from pathlib import Path

import pytest
import respx
from typer.testing import CliRunner


# Ensure the repository-local ``src`` directory is importable when the project is
# not installed as a package.
SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from azmgmt.testing import ScenarioContext, SharedContext  # noqa: E402

SUBSCRIPTION_ID = "00000000-0000-0000-0000-000000000001"
BASE_URL = "https://management.azure.com"


@pytest.fixture
def token_getter():
    return lambda: "dummy-token"


@pytest.fixture
def respx_mock():
    with respx.mock(assert_all_called=False) as respx_mgr:
        yield respx_mgr


@pytest.fixture(scope="session")
def shared_context():
    """One scenario context for the whole run; clients are mocked with respx per test."""

    shared = SharedContext(
        lambda: ScenarioContext.create(
            SUBSCRIPTION_ID,
            token_getter=lambda: "dummy-token",
            location="westus2",
            poll_interval=0,
        )
    )
    yield shared
    shared.close()


@pytest.fixture
def scenario_context(shared_context):
    return shared_context.get()


@pytest.fixture
def cli_runner(monkeypatch, tmp_path):
    """Provide a CLI runner with a dummy access token and an isolated config home."""

    monkeypatch.setenv("AZMGMT_ACCESS_TOKEN", "test-token")
    monkeypatch.setenv("AZURE_SUBSCRIPTION_ID", SUBSCRIPTION_ID)
    monkeypatch.setattr("azmgmt.config.CONFIG_PATH", str(tmp_path / "config.json"))
    return CliRunner()
