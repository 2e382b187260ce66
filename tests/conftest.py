import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services.transcript_service import get_transcript_service


class FakeTranscriptService:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def get_transcript(self, video_id: str):
        self.calls.append(video_id)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def use_service():
    def _use(service):
        app.dependency_overrides[get_transcript_service] = lambda: service
        return service
    return _use
