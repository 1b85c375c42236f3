from datetime import UTC, datetime
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from iboc.adapters.auth.crypto import JWTAuthAdapter
from iboc.adapters.sqlite.documents import SQLiteDocumentStore
from iboc.adapters.sqlite.migrator import SQLiteMigrator
from iboc.api.deps import PROJECT_ROOT, Settings, get_clock, get_settings
from iboc.api.main import app
from iboc.domain.entities import AppUser
from iboc.rules.loader import load_rules

RULES_PATH = PROJECT_ROOT / "rules.yaml"


@pytest.fixture
def rules():
    return load_rules(RULES_PATH)


@pytest.fixture
def clock():
    """Clock frozen at 2026-03-15 10:00 local / 13:00 UTC."""
    now_utc = datetime(2026, 3, 15, 13, 0, 0, tzinfo=UTC)
    c = Mock()
    c.now.return_value = datetime(2026, 3, 15, 10, 0, 0)
    c.now_utc.return_value = now_utc
    c.epoch_ms.return_value = int(now_utc.timestamp() * 1000)
    return c


@pytest.fixture
def db_path(tmp_path):
    path = str(tmp_path / "iboc.db")
    SQLiteMigrator(path, str(PROJECT_ROOT / "migrations")).run_migrations()
    return path


@pytest.fixture
def store(db_path):
    return SQLiteDocumentStore(db_path)


@pytest.fixture
def settings(tmp_path, db_path):
    s = Settings()
    s.data_dir = tmp_path
    s.db_path = db_path
    s.media_dir = tmp_path / "media"
    s.rules_path = RULES_PATH
    s.master_username = "admin"
    s.master_password = "admin-secret"
    s.secret_key = "test-signing-key"
    return s


@pytest.fixture
def client(settings, clock):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_clock] = lambda: clock
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(settings):
    """Build an Authorization header for a user with the given permission level."""

    def _headers(permissions="admin", uid="user-1"):
        user = AppUser(uid=uid, type="member", display_name="Tester", permissions=permissions)
        token = JWTAuthAdapter(settings.secret_key).create_token(user, ttl_minutes=30)
        return {"Authorization": f"Bearer {token}"}

    return _headers
