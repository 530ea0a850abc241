from typing import Generator

import pytest
from fastapi.testclient import TestClient

from tests.utils import StubReleaseFetcher
from version_exporter.api.dependencies import get_release_fetcher
from version_exporter.main import app


@pytest.fixture
def fetcher() -> StubReleaseFetcher:
    return StubReleaseFetcher()


@pytest.fixture
def client(fetcher: StubReleaseFetcher) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_release_fetcher] = lambda: fetcher

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
