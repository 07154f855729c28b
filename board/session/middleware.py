"""
세션 쿠키 처리
- 요청의 세션 쿠키로 세션 조회 (없으면 새 세션)
- 응답에 새 세션 쿠키 발급
"""

import logging
from fastapi import Request, Response

from ..config_manager import config_manager
from . import session_store
from .session_manager import SessionContext

logger = logging.getLogger(__name__)

async def get_session_context(request: Request) -> SessionContext:
    """현재 요청의 세션 (라우트 의존성)"""
    session_id = request.cookies.get(config_manager.session.cookie_name)
    session = session_store.get_session(session_id)
    if session is None:
        session = session_store.create_session()
    return session

def issue_session_cookie(response: Response, session: SessionContext):
    """새로 만들어진 세션이면 세션 쿠키 발급"""
    if not session.is_new:
        return

    response.set_cookie(
        key=config_manager.session.cookie_name,
        value=session.session_id,
        path="/",
        httponly=True,
        samesite="lax",
        secure=config_manager.session.cookie_secure,
    )
    session.is_new = False
