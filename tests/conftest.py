"""
Pytest 공통 설정 및 fixture

실행 방법:
    uv sync --all-extras  # dev 의존성 설치
    pytest -v

TEST_DATABASE_URL이 설정되어 있으면 실제 PostgreSQL 통합 테스트도 실행된다.
"""
import os

# config.Settings()는 import 시점에 생성되므로 먼저 환경변수 지정
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-pytest-only-0123456789")
os.environ.setdefault("DATABASE_URL", "postgresql://localhost:5432/jobly_test")

import pytest
from fastapi.testclient import TestClient

from main import app
from utils.auth import create_user_token


@pytest.fixture
def client():
    """테스트용 FastAPI 클라이언트 (lifespan 미실행, DB 연결 없음)"""
    return TestClient(app)


@pytest.fixture
def admin_headers():
    token = create_user_token("admin", is_admin=True)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers():
    token = create_user_token("u1", is_admin=False)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def job_rows():
    """DB에서 읽어온 형태의 채용공고 (equity는 문자열)"""
    return [
        {"id": 1, "title": "Doctor", "salary": 123000, "equity": "0.1", "company_handle": "c1"},
        {"id": 3, "title": "Sanitation Worker", "salary": 234000, "equity": None, "company_handle": "c2"},
        {"id": 2, "title": "Secretary", "salary": 7777777, "equity": "0.555", "company_handle": "c1"},
    ]


@pytest.fixture
def company_rows():
    return [
        {
            "handle": "c1",
            "name": "C1",
            "description": "Desc1",
            "numEmployees": 1,
            "logoUrl": "http://c1.img",
        },
        {
            "handle": "c2",
            "name": "C2",
            "description": "Desc2",
            "numEmployees": 2,
            "logoUrl": None,
        },
    ]
