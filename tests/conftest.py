import pytest
from dstar.env import ENV_DSTAR_ENV, ENV_DSTAR_HTML_SAFE


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
	"""Run every test with default configuration."""
	monkeypatch.delenv(ENV_DSTAR_ENV, raising=False)
	monkeypatch.delenv(ENV_DSTAR_HTML_SAFE, raising=False)
