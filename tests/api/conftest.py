"""Fixtures for API tests."""

import falcon.asgi
import pytest
from falcon.testing import TestClient

from reviewdesk.application.services import RecordStore, SyncCoordinator
from reviewdesk.infrastructure.validation.file_validator import MimeTypeFileValidator
from reviewdesk.main import register_routes


@pytest.fixture
def app(record_store: RecordStore, coordinator: SyncCoordinator) -> falcon.asgi.App:
    """Falcon ASGI app wired to the in-memory store and fake sync collaborators."""
    app = falcon.asgi.App()
    register_routes(app, record_store, coordinator, MimeTypeFileValidator(max_size=1024))
    return app


@pytest.fixture
def client(app: falcon.asgi.App) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)
