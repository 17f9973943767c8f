import pytest

from core.config import Settings
from core.prolific_api import ProlificAPI

BASE_URL = "https://api.prolific.test"
API = f"{BASE_URL}/api/v1"


@pytest.fixture
def settings() -> Settings:
    return Settings(token="test-token", base_url=BASE_URL)


@pytest.fixture
def api(settings) -> ProlificAPI:
    return ProlificAPI(settings)
