"""메인 페이지 뷰 라우터"""

import logging
from fastapi import APIRouter, Depends, Request

from ..member.controller import ControllerResult
from ..session.middleware import get_session_context
from ..session.session_manager import SessionContext
from .resolver import resolve_result

logger = logging.getLogger(__name__)
main_views_router = APIRouter()

@main_views_router.get("/")
async def main_page(request: Request, session: SessionContext = Depends(get_session_context)):
    """메인 페이지 - 로그인 폼 또는 로그인 회원 정보"""
    return resolve_result(ControllerResult(view="common/main"), request, session)
