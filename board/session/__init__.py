"""세션 관리 패키지"""

from .session_manager import SessionContext, SessionStore, LOGIN_MEMBER
from ..config_manager import config_manager

# 전역 세션 저장소 인스턴스
session_store = SessionStore(timeout_minutes=config_manager.session.timeout_minutes)

__all__ = ['SessionContext', 'SessionStore', 'LOGIN_MEMBER', 'session_store']
