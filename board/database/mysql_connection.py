"""
MySQL 데이터베이스 연결 관리
- 비동기 엔진 및 세션 팩토리 관리
- 세션 컨텍스트 매니저 (commit/rollback)
- 스키마 초기화 및 연결 테스트
"""

import logging
from typing import AsyncGenerator, Optional
from contextlib import asynccontextmanager

from sqlalchemy import MetaData, text
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from ..config_manager import config_manager

logger = logging.getLogger(__name__)

# SQLAlchemy Base 클래스
class Base(DeclarativeBase):
    metadata = MetaData()

_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker] = None

def _build_engine(url: str) -> AsyncEngine:
    """URL에 맞는 비동기 엔진 생성"""
    if url.startswith("sqlite"):
        # SQLite는 연결 풀 옵션을 지원하지 않음
        return create_async_engine(url, echo=config_manager.database.echo)

    db = config_manager.database
    return create_async_engine(
        url,
        echo=db.echo,  # SQL 쿼리 로깅 (개발시 True)
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
        pool_timeout=db.pool_timeout,
        pool_recycle=db.pool_recycle,
        pool_pre_ping=True,
    )

def configure_engine(url: Optional[str] = None) -> AsyncEngine:
    """엔진과 세션 팩토리를 (재)구성"""
    global _engine, _session_factory

    url = url or config_manager.database.effective_url
    _engine = _build_engine(url)
    _session_factory = async_sessionmaker(
        _engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    logger.info(f"🔌 데이터베이스 엔진 구성: {_engine.url.render_as_string(hide_password=True)}")
    return _engine

def get_engine() -> AsyncEngine:
    if _engine is None:
        configure_engine()
    return _engine

@asynccontextmanager
async def get_mysql_session() -> AsyncGenerator[AsyncSession, None]:
    """MySQL 세션 컨텍스트 매니저"""
    if _session_factory is None:
        configure_engine()

    async with _session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception as e:
            await session.rollback()
            logger.error(f"데이터베이스 오류: {str(e)}")
            raise

async def init_mysql_db():
    """데이터베이스 스키마 초기화"""
    # 모델 등록
    from ..member import models  # noqa: F401

    try:
        async with get_engine().begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("✅ 데이터베이스 초기화 완료")
    except Exception as e:
        logger.error(f"❌ 데이터베이스 초기화 실패: {str(e)}")
        raise

async def test_mysql_connection() -> bool:
    """데이터베이스 연결 테스트"""
    try:
        async with get_mysql_session() as session:
            await session.execute(text("SELECT 1"))
        logger.info("✅ 데이터베이스 연결 테스트 성공")
        return True
    except Exception as e:
        logger.error(f"❌ 데이터베이스 연결 테스트 실패: {str(e)}")
        return False

async def dispose_engine():
    """엔진 연결 풀 정리 (엔진은 다음 사용 시 새 풀로 재연결)"""
    if _engine is not None:
        await _engine.dispose()
        logger.info("🔌 데이터베이스 연결 풀 정리 완료")
