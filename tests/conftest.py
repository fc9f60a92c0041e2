import os

# config.Settings는 import 시점에 환경변수를 읽는다
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-jwt-signing-32b")
os.environ.setdefault("PASSWORD_PEPPER", "test-pepper")

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from main import app
from utils.auth import create_user_token
from utils.database import get_connection


@pytest.fixture
def conn():
    """라우터에 주입되는 DB 커넥션 (repository 함수는 테스트에서 patch)"""
    return MagicMock(name="conn")


@pytest.fixture
def client(conn):
    """테스트용 FastAPI 클라이언트"""
    app.dependency_overrides[get_connection] = lambda: conn
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    token = create_user_token("admin", is_admin=True)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers():
    token = create_user_token("testuser", is_admin=False)
    return {"Authorization": f"Bearer {token}"}
