"""
컨트롤러 결과 -> HTTP 응답 변환
- "redirect:X" : 302 리다이렉트 (상대 경로는 기준 경로 아래)
- 뷰 이름     : HTML 렌더링
- 플래시 메시지는 세션에 저장되어 다음 요청에서 한 번만 표시
"""

import logging
from typing import Any, Dict, Optional

from fastapi import Request, Response, status
from fastapi.responses import RedirectResponse

from ..config_manager import SAVE_ID_COOKIE_NAME
from ..member.controller import ControllerResult
from ..session.middleware import issue_session_cookie
from ..session.session_manager import SessionContext
from .templates import render_view

logger = logging.getLogger(__name__)

def page_model(request: Request, session: SessionContext) -> Dict[str, Any]:
    """페이지 공통 모델 (플래시 메시지, 로그인 회원, 저장된 아이디)"""
    return {
        "message": session.pop_flash(),
        "login_member": session.login_member,
        "save_id": request.cookies.get(SAVE_ID_COOKIE_NAME),
    }

def resolve_url(target: str, base_path: str) -> str:
    if target.startswith("/"):
        return target
    return base_path.rstrip("/") + "/" + target

def resolve_result(result: ControllerResult, request: Request,
                   session: Optional[SessionContext], base_path: str = "/") -> Response:
    """컨트롤러 결과를 응답으로 변환"""
    if result.is_redirect:
        response = RedirectResponse(
            url=resolve_url(result.redirect_target, base_path),
            status_code=status.HTTP_302_FOUND
        )
    else:
        model = page_model(request, session) if session is not None else {}
        response = render_view(result.view, model)

    if result.flash is not None and session is not None:
        session.set_flash(result.flash)

    # 값에 "@" 가 있어도 따옴표 없이 그대로 내려보냄
    for cookie in result.cookies:
        response.headers.append("set-cookie", cookie.header())

    if session is not None:
        issue_session_cookie(response, session)

    return response
