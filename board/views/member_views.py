"""
회원 관련 뷰 라우터 (/member)
- 로그인 페이지 / 로그인 처리
- 로그아웃 처리
- 회원가입 페이지 / 회원가입 처리
"""

import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, Form, Request

from ..member.controller import MemberController
from ..member.dto import Member
from ..member.service import MemberService
from ..session import session_store
from ..session.middleware import get_session_context
from ..session.session_manager import SessionContext
from .resolver import resolve_result

logger = logging.getLogger(__name__)
member_views_router = APIRouter(prefix="/member")

BASE_PATH = "/member/"

def get_member_controller() -> MemberController:
    return MemberController(MemberService())

@member_views_router.get("/login")
async def login_page(
    request: Request,
    session: SessionContext = Depends(get_session_context),
    controller: MemberController = Depends(get_member_controller),
):
    """로그인 페이지"""
    return resolve_result(controller.login_page(), request, session, BASE_PATH)

@member_views_router.post("/login")
async def login(
    request: Request,
    member_email: str = Form("", alias="memberEmail"),
    member_pw: str = Form("", alias="memberPw"),
    session: SessionContext = Depends(get_session_context),
    controller: MemberController = Depends(get_member_controller),
):
    """로그인 처리 - 성공/실패 모두 메인 페이지로"""
    # 빈 문자열도 체크된 것으로 취급 (Form 기본값 변환 없이 원본 값 사용)
    form = await request.form()
    save_id: Optional[str] = form.get("saveId")

    input_member = Member(email=member_email, password=member_pw)
    result = await controller.login(session, input_member, save_id)
    return resolve_result(result, request, session, BASE_PATH)

@member_views_router.get("/logout")
async def logout(
    request: Request,
    session: SessionContext = Depends(get_session_context),
    controller: MemberController = Depends(get_member_controller),
):
    """로그아웃 처리"""
    result = controller.logout(session, session_store)
    return resolve_result(result, request, None, BASE_PATH)

@member_views_router.get("/signup")
async def signup_page(
    request: Request,
    session: SessionContext = Depends(get_session_context),
    controller: MemberController = Depends(get_member_controller),
):
    """회원가입 페이지"""
    return resolve_result(controller.signup_page(), request, session, BASE_PATH)

@member_views_router.post("/signup")
async def signup(
    request: Request,
    member_email: str = Form("", alias="memberEmail"),
    member_pw: str = Form("", alias="memberPw"),
    member_nickname: str = Form("", alias="memberNickname"),
    member_tel: str = Form("", alias="memberTel"),
    member_address: List[str] = Form([], alias="memberAddress"),
    session: SessionContext = Depends(get_session_context),
    controller: MemberController = Depends(get_member_controller),
):
    """회원가입 처리 - 성공 시 메인, 실패 시 가입 페이지로"""
    input_member = Member(
        email=member_email,
        password=member_pw,
        nickname=member_nickname,
        telephone=member_tel,
        address=member_address,
    )
    result = await controller.signup(input_member, member_address)
    return resolve_result(result, request, session, BASE_PATH)
