"""
서버측 세션 관리자
세션 ID를 키로 하는 세션 저장소 (생성/조회/무효화/만료 정리)
- 로그인 회원(loginMember) 속성 보관
- 리다이렉트 후 한 번만 읽히는 플래시 메시지
"""

import logging
import secrets
from typing import Any, Dict, Optional
from datetime import datetime, timedelta

from ..member.dto import LoginMember

logger = logging.getLogger(__name__)

LOGIN_MEMBER = "loginMember"

class SessionContext:
    """개별 세션 데이터"""

    def __init__(self, session_id: str):
        self.session_id = session_id
        self.attributes: Dict[str, Any] = {}
        self._flash: Optional[str] = None

        self.created_at = datetime.now()
        self.last_access = datetime.now()

        # 응답에 세션 쿠키를 발급해야 하는지 여부
        self.is_new = True

    @property
    def login_member(self) -> Optional[LoginMember]:
        return self.attributes.get(LOGIN_MEMBER)

    @login_member.setter
    def login_member(self, member: LoginMember):
        self.attributes[LOGIN_MEMBER] = member

    def set_flash(self, message: str):
        """다음 요청에서 한 번만 표시될 메시지 저장"""
        self._flash = message

    def pop_flash(self) -> Optional[str]:
        """플래시 메시지를 꺼내고 비움"""
        message, self._flash = self._flash, None
        return message

    @property
    def has_flash(self) -> bool:
        return self._flash is not None

    def complete(self):
        """세션 속성 전체 제거"""
        self.attributes.clear()
        self._flash = None

    def touch(self):
        self.last_access = datetime.now()

    def __repr__(self):
        return f"<SessionContext(id={self.session_id[:8]}..., login_member={bool(self.login_member)})>"

class SessionStore:
    """전역 세션 저장소"""

    def __init__(self, timeout_minutes: int = 30):
        self.timeout = timedelta(minutes=timeout_minutes)
        self._sessions: Dict[str, SessionContext] = {}
        logger.info("🎯 세션 저장소 초기화 완료")

    def create_session(self) -> SessionContext:
        """새 세션 생성"""
        session_id = secrets.token_urlsafe(32)
        session = SessionContext(session_id)
        self._sessions[session_id] = session
        logger.debug(f"✅ 새 세션 생성 (총 {len(self._sessions)}개 활성 세션)")
        return session

    def get_session(self, session_id: Optional[str]) -> Optional[SessionContext]:
        """세션 조회 - 만료된 세션은 제거 후 None"""
        if not session_id:
            return None

        session = self._sessions.get(session_id)
        if session is None:
            return None

        if self._is_expired(session):
            logger.info(f"🕐 만료된 세션 접근: {session}")
            self.invalidate(session_id)
            return None

        session.touch()
        session.is_new = False
        return session

    def invalidate(self, session_id: Optional[str]) -> bool:
        """세션 무효화 (없으면 아무 일도 하지 않음)"""
        session = self._sessions.pop(session_id, None) if session_id else None
        if session is None:
            return False

        session.complete()
        logger.debug(f"🗑️ 세션 제거 완료 (총 {len(self._sessions)}개 활성 세션)")
        return True

    def get_active_sessions_count(self) -> int:
        return len(self._sessions)

    def cleanup_expired_sessions(self) -> int:
        """만료된 세션 정리"""
        expired = [sid for sid, session in list(self._sessions.items()) if self._is_expired(session)]
        for session_id in expired:
            self.invalidate(session_id)

        if expired:
            logger.info(f"✅ 만료된 세션 {len(expired)}개 정리 완료")
        return len(expired)

    def _is_expired(self, session: SessionContext) -> bool:
        return datetime.now() - session.last_access > self.timeout
