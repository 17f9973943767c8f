import pytest

from core.config import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, Settings, load_settings
from core.errors import ConfigError
from core.prolific_api import ProlificAPI


def test_load_settings_defaults(monkeypatch):
    monkeypatch.setenv("PROLIFIC_TOKEN", "  abc  ")
    monkeypatch.delenv("PROLIFIC_URL", raising=False)
    monkeypatch.delenv("PROLIFIC_USER_AGENT", raising=False)
    monkeypatch.delenv("PROLIFIC_TIMEOUT", raising=False)

    s = load_settings()
    assert s.token == "abc"
    assert s.base_url == DEFAULT_BASE_URL
    assert s.user_agent == DEFAULT_USER_AGENT
    assert s.timeout is None


def test_load_settings_overrides(monkeypatch):
    monkeypatch.setenv("PROLIFIC_TOKEN", "abc")
    monkeypatch.setenv("PROLIFIC_URL", "http://localhost:9000/")
    monkeypatch.setenv("PROLIFIC_TIMEOUT", "12.5")

    s = load_settings()
    assert s.base_url == "http://localhost:9000"
    assert s.timeout == 12.5


def test_bad_timeout_is_config_error(monkeypatch):
    monkeypatch.setenv("PROLIFIC_TOKEN", "abc")
    monkeypatch.setenv("PROLIFIC_TIMEOUT", "soon")
    with pytest.raises(ConfigError, match="PROLIFIC_TIMEOUT"):
        load_settings()


@pytest.mark.parametrize("value", [None, "", "   "])
def test_client_requires_token(monkeypatch, value):
    if value is None:
        monkeypatch.delenv("PROLIFIC_TOKEN", raising=False)
    else:
        monkeypatch.setenv("PROLIFIC_TOKEN", value)
    with pytest.raises(ConfigError, match="PROLIFIC_TOKEN"):
        ProlificAPI()


def test_client_rejects_empty_settings_token():
    with pytest.raises(ConfigError, match="PROLIFIC_TOKEN"):
        ProlificAPI(Settings(token=""))


def test_client_from_env(monkeypatch):
    monkeypatch.setenv("PROLIFIC_TOKEN", "env-token")
    monkeypatch.delenv("PROLIFIC_URL", raising=False)
    client = ProlificAPI()
    assert client.headers["Authorization"] == "Token env-token"
    assert client.base == DEFAULT_BASE_URL
