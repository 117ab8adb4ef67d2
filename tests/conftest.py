import io

import pytest
from fastapi.testclient import TestClient

from schedule_handler.core.config import get_settings
from schedule_handler.main import create_app
from schedule_handler.services.json_store import JsonStore
from schedule_handler.services.sessions import SessionService
from schedule_handler.services.storage import StorageService
from schedule_handler.services.users import UserService


@pytest.fixture
def data_path(tmp_path, monkeypatch):
    """
    DATA_PATH temporaire (isolé) + quelques variables d'env pour les tests.
    """
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("APP_NAME", "Schedule Handler API (tests)")
    monkeypatch.setenv("DATA_PATH", str(tmp_path))
    monkeypatch.setenv("MAX_UPLOAD_MB", "1")  # limite faible pour tests
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost")
    monkeypatch.setenv("SEED_DEFAULT_USERS", "true")

    # IMPORTANT: vider le cache des settings pour prendre en compte les env
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()


@pytest.fixture
def test_client(data_path):
    app = create_app()
    return TestClient(app)


@pytest.fixture
def storage(tmp_path):
    return StorageService(base_path=tmp_path / "uploads", max_upload_mb=1)


@pytest.fixture
def session_service(tmp_path, storage):
    return SessionService(store=JsonStore(tmp_path / "sessions.json"), storage=storage)


@pytest.fixture
def user_service(tmp_path):
    return UserService(store=JsonStore(tmp_path / "users.json"))


def fake_pdf_bytes():
    # PDF minimaliste : suffisant pour l'upload (le comptage de pages peut échouer)
    return b"%PDF-1.4\n%EOF\n"


def pdf_upload(name="test.pdf", content_type="application/pdf"):
    return {"file": (name, io.BytesIO(fake_pdf_bytes()), content_type)}


def session_payload(**overrides):
    body = {
        "title": "Revue chapitre 3",
        "description": "Relire les exercices",
        "userId": "u-1",
        "userName": "Regular User",
        "userEmail": "user@example.com",
        "pdfPath": "missing.pdf",
        "originalFileName": "chapitre3.pdf",
        "fileSize": 14,
        "requestedDate": "2030-01-15",
        "requestedTime": "14:00 - 15:00",
    }
    body.update(overrides)
    return body
