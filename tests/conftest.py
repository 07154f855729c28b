"""
Pytest configuration and fixtures for member service tests
"""
import os

# 설정 관리자 로드 전에 테스트 환경 지정
os.environ["ENVIRONMENT"] = "testing"
os.environ["LOG_FILE"] = ""
os.environ["PASSWORD_ENCODER"] = "plain"

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from board.app_factory import create_testing_app
from board.database import configure_engine, init_mysql_db, dispose_engine
from board.member.dto import Member
from board.session.session_manager import SessionStore


@pytest.fixture
def database_url(tmp_path):
    """임시 SQLite 데이터베이스 경로"""
    return f"sqlite+aiosqlite:///{tmp_path / 'board_test.db'}"


@pytest_asyncio.fixture
async def database(database_url):
    """스키마가 생성된 테스트 데이터베이스"""
    configure_engine(database_url)
    await init_mysql_db()
    yield
    await dispose_engine()


@pytest.fixture
def client(database_url):
    """애플리케이션 테스트 클라이언트 (lifespan 포함)"""
    configure_engine(database_url)
    app = create_testing_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def store():
    return SessionStore(timeout_minutes=30)


@pytest.fixture
def sam():
    return Member(
        email="a@b.com",
        password="pw1",
        nickname="Sam",
        telephone="01012345678",
        address=["04540", "서울시 중구 남대문로 120", "2층"],
    )
