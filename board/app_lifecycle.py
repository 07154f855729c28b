"""
애플리케이션 생명주기 관리 모듈
- 시작 시 데이터베이스 초기화, 세션 정리 작업 시작
- 종료 시 정리 작업 중지, 연결 풀 정리
"""

import asyncio
import logging
from contextlib import asynccontextmanager, suppress
from typing import Optional

from fastapi import FastAPI

from board.config_manager import config_manager
from board.database import init_mysql_db, test_mysql_connection, dispose_engine
from board.session import session_store

logger = logging.getLogger(__name__)

class DatabaseManager:
    """데이터베이스 초기화 및 관리"""

    @staticmethod
    async def initialize_databases() -> bool:
        """스키마 생성 후 연결 확인 (스키마 생성 실패는 그대로 전파)"""
        await init_mysql_db()

        if await test_mysql_connection():
            logger.info("✅ 회원 데이터베이스 초기화 완료")
            return True

        logger.error("❌ 데이터베이스 연결 실패")
        return False

class SessionCleanupService:
    """만료 세션 주기적 정리"""

    def __init__(self, interval_seconds: int, store=None):
        self.interval_seconds = interval_seconds
        self.store = store or session_store
        self._task: Optional[asyncio.Task] = None

    def run_once(self) -> int:
        """한 번 정리 (오류는 로그만 남기고 작업은 계속)"""
        try:
            removed = self.store.cleanup_expired_sessions()
        except Exception as e:
            logger.error(f"❌ 세션 정리 실패: {str(e)}")
            return 0

        if removed:
            logger.info(f"🧹 만료 세션 정리: {removed}개 (활성 {self.store.get_active_sessions_count()}개)")
        return removed

    async def _run(self):
        while True:
            await asyncio.sleep(self.interval_seconds)
            self.run_once()

    def start(self):
        if self._task is None:
            self._task = asyncio.create_task(self._run())
            logger.info(f"✅ 세션 정리 작업 시작 (주기: {self.interval_seconds}초)")

    async def stop(self):
        if self._task is None:
            return
        self._task.cancel()
        with suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("🛑 세션 정리 작업 중지")

@asynccontextmanager
async def lifespan_manager(app: FastAPI):
    """애플리케이션 시작/종료 처리"""
    logger.info("🚀 애플리케이션 시작")

    await DatabaseManager.initialize_databases()

    cleanup_service = SessionCleanupService(config_manager.session.cleanup_interval_seconds)
    cleanup_service.start()

    try:
        yield
    finally:
        await cleanup_service.stop()
        await dispose_engine()
        logger.info("👋 애플리케이션 종료")
