"""Shared fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from customizer.src.main import app
from customizer.src.services.exporter import ClipboardExporter
from customizer.src.services.session import PipelineSession, get_session

class RecordingWriter:
    """Stands in for the system clipboard."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.copied = []

    def __call__(self, text: str):
        if self.fail:
            raise RuntimeError("clipboard unavailable")
        self.copied.append(text)

@pytest.fixture
def writer():
    return RecordingWriter()

@pytest.fixture
def session(writer):
    return PipelineSession(exporter=ClipboardExporter(writer=writer, clear_after=0.01))

@pytest.fixture
def client(session):
    app.dependency_overrides[get_session] = lambda: session
    yield TestClient(app)
    app.dependency_overrides.clear()
