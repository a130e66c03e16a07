"""
Shared fixtures: an isolated application per test backed by a temporary
database and uploads directory.
"""
import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app

ADMIN_TOKEN = "test-admin-secret"

# 1x1 transparent PNG
PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x06"
    b"\x00\x00\x00\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\x0f\x00\x00\x01\x01"
    b"\x00\x05\x18\xd8N\x00\x00\x00\x00IEND\xaeB`\x82"
)


@pytest.fixture
def make_settings(tmp_path):
    def _make(**overrides):
        values = dict(
            DATABASE_URL="",
            DATABASE_PATH=str(tmp_path / "students.db"),
            UPLOAD_DIR=str(tmp_path / "uploads"),
            STATIC_DIR=str(tmp_path),
            ADMIN_TOKEN=ADMIN_TOKEN,
            RATE_LIMIT_ENABLED=False,
            LOG_LEVEL="INFO",
        )
        values.update(overrides)
        return Settings(**values)
    return _make


@pytest.fixture
def settings(make_settings):
    return make_settings()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def upload_dir(settings):
    return settings.upload_path


@pytest.fixture
def admin_headers():
    return {"x-admin-token": ADMIN_TOKEN}


@pytest.fixture
def png_bytes():
    return PNG_BYTES
