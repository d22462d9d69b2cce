import os

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch) -> TestClient:
    monkeypatch.delenv("NORMALIZER_TOKEN", raising=False)

    from spoken_normalizer.core.settings import get_settings

    get_settings.cache_clear()

    from spoken_normalizer.main import app

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    get_settings.cache_clear()
    os.environ.pop("NORMALIZER_TOKEN", None)
