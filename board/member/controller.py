"""
회원 컨트롤러
- 로그인 / 로그아웃 / 회원 가입 / 페이지 이동
- HTTP와 무관하게 결과(뷰 이름, 플래시 메시지, 쿠키)를 반환
- 실제 응답 변환은 views.member_views 에서 처리
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..config_manager import SAVE_ID_COOKIE_NAME, SAVE_ID_COOKIE_PATH, SAVE_ID_MAX_AGE
from ..session.session_manager import SessionContext
from .dto import Member
from .service import MemberService, Matched, Inserted

logger = logging.getLogger(__name__)

LOGIN_FAIL_MESSAGE = "아이디 또는 비밀번호가 일치하지 않습니다"
SIGNUP_WELCOME_MESSAGE = "{nickname}님의 가입을 환영 합니다😀"
SIGNUP_FAIL_MESSAGE = "회원 가입 실패"

@dataclass(frozen=True)
class CookieSpec:
    """응답에 추가할 쿠키"""
    name: str
    value: str
    path: str = "/"
    max_age: Optional[int] = None

    def header(self) -> str:
        parts = [f"{self.name}={self.value}", f"Path={self.path}"]
        if self.max_age is not None:
            parts.append(f"Max-Age={self.max_age}")
        return "; ".join(parts)

@dataclass
class ControllerResult:
    """
    컨트롤러 처리 결과
    - view: "redirect:/" 처럼 리다이렉트 대상 또는 렌더링할 뷰 이름
    - flash: 리다이렉트 후 한 번만 표시할 메시지
    - cookies: 응답에 추가할 쿠키
    """
    view: str
    flash: Optional[str] = None
    cookies: List[CookieSpec] = field(default_factory=list)

    @property
    def is_redirect(self) -> bool:
        return self.view.startswith("redirect:")

    @property
    def redirect_target(self) -> Optional[str]:
        return self.view[len("redirect:"):] if self.is_redirect else None

def save_id_cookie(email: str, save_id: Optional[str]) -> CookieSpec:
    """
    아이디 저장 쿠키
    체크박스가 체크되면 "on" (None 아님) -> 30일 유지
    체크 안 되면 None -> 0초 (클라이언트 쿠키 삭제)
    """
    max_age = SAVE_ID_MAX_AGE if save_id is not None else 0
    return CookieSpec(SAVE_ID_COOKIE_NAME, email, SAVE_ID_COOKIE_PATH, max_age)

class MemberController:
    """회원 요청 처리"""

    def __init__(self, service: MemberService):
        self.service = service

    async def login(self, session: SessionContext, input_member: Member,
                    save_id: Optional[str] = None) -> ControllerResult:
        """로그인 - 성공/실패 모두 메인 페이지로 리다이렉트"""
        result = await self.service.login(input_member)

        if not isinstance(result, Matched):
            return ControllerResult(view="redirect:/", flash=LOGIN_FAIL_MESSAGE)

        # 기존 로그인 회원이 있어도 교체
        login_member = result.member
        session.login_member = login_member

        cookie = save_id_cookie(login_member.email, save_id)
        return ControllerResult(view="redirect:/", cookies=[cookie])

    def logout(self, session: SessionContext, store) -> ControllerResult:
        """로그아웃 - 세션 무효화 (세션이 없어도 오류 없음)"""
        had_member = session.login_member is not None
        session.complete()
        store.invalidate(session.session_id)

        if had_member:
            logger.info("👋 로그아웃 완료")
        return ControllerResult(view="redirect:/")

    def login_page(self) -> ControllerResult:
        return ControllerResult(view="member/login")

    def signup_page(self) -> ControllerResult:
        return ControllerResult(view="member/signup")

    async def signup(self, input_member: Member,
                     member_address: Optional[Sequence[str]] = None) -> ControllerResult:
        """회원 가입 - 성공 시 메인 페이지, 실패 시 가입 페이지로 리다이렉트"""
        result = await self.service.signup(input_member, member_address)

        if isinstance(result, Inserted) and result.rows > 0:
            message = SIGNUP_WELCOME_MESSAGE.format(nickname=input_member.nickname)
            path = "/"
        else:
            message = SIGNUP_FAIL_MESSAGE
            path = "signup"

        return ControllerResult(view="redirect:" + path, flash=message)
