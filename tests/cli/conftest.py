import pytest
from click.testing import CliRunner

from cli.client import init_client
from tests.helpers import TEST_ACCESS_TOKEN, TEST_URI_BASE


@pytest.fixture
def runner():
    yield CliRunner()


@pytest.fixture(autouse=True)
def cli_environment(monkeypatch):
    monkeypatch.setenv("REPLICATE_API_TOKEN", TEST_ACCESS_TOKEN)
    monkeypatch.setenv("REPLICATE_URI_BASE", TEST_URI_BASE)
    monkeypatch.delenv("REPLICATE_WEBHOOK_URL", raising=False)
    init_client.cache_clear()
    yield
    init_client.cache_clear()
