import pytest
from fastapi.testclient import TestClient

from recipevault.main import app
from recipevault.deps import get_pipeline
from recipevault.core.ai_client import GenerationClient
from recipevault.services.pipeline import RecipePipeline
from tests.helpers import mock_http_client


@pytest.fixture
def generation_client():
    # Fresh instance so recorded errors don't leak between tests
    return GenerationClient()


@pytest.fixture
def make_client():
    """Test client whose pipeline sends outbound requests to `handler`."""
    def _make(handler):
        http_client = mock_http_client(handler)
        app.dependency_overrides[get_pipeline] = lambda: RecipePipeline(
            generation_client=GenerationClient(), http_client=http_client
        )
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
