"""
회원 서비스
- 로그인: 이메일 조회 후 비밀번호 비교
- 회원 가입: 비밀번호 인코딩, 주소 합치기, INSERT
- 결과는 명시적인 결과 타입(Matched/NotFound, Inserted/Rejected)으로 반환
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from ..database.mysql_connection import get_mysql_session
from .dto import Member, LoginMember
from .mapper import MemberMapper
from .models import ADDRESS_DELIMITER
from .password import get_password_encoder

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Matched:
    """로그인 성공 - 일치하는 회원"""
    member: LoginMember

@dataclass(frozen=True)
class NotFound:
    """로그인 실패 - 일치하는 회원 없음"""

@dataclass(frozen=True)
class Inserted:
    """회원 가입 성공"""
    rows: int

@dataclass(frozen=True)
class Rejected:
    """회원 가입 실패"""
    reason: str

LoginResult = Union[Matched, NotFound]
SignupResult = Union[Inserted, Rejected]

def join_address(address_parts: Optional[Sequence[str]]) -> Optional[str]:
    """주소 입력값을 구분자로 합침 (입력하지 않은 경우 None)"""
    if not address_parts or not any(part.strip() for part in address_parts):
        return None
    return ADDRESS_DELIMITER.join(address_parts)

class MemberService:
    """회원 관련 서비스"""

    def __init__(self, password_encoder=None):
        self.password_encoder = password_encoder or get_password_encoder()

    async def login(self, input_member: Member) -> LoginResult:
        async with get_mysql_session() as session:
            row = await MemberMapper(session).login(input_member.email)

        if row is None:
            logger.info(f"🔒 로그인 실패 (존재하지 않는 회원): {input_member.email}")
            return NotFound()

        if not self.password_encoder.matches(input_member.password, row.member_pw):
            logger.info(f"🔒 로그인 실패 (비밀번호 불일치): {input_member.email}")
            return NotFound()

        logger.info(f"✅ 로그인 성공: {row.member_email} (member_no={row.member_no})")
        return Matched(LoginMember.from_row(row))

    async def signup(self, input_member: Member, member_address: Optional[Sequence[str]] = None) -> SignupResult:
        if member_address is None:
            member_address = input_member.address

        encoded = input_member.model_copy(
            update={"password": self.password_encoder.encode(input_member.password)}
        )

        async with get_mysql_session() as session:
            rows = await MemberMapper(session).signup(encoded, join_address(member_address))

        if rows > 0:
            logger.info(f"✅ 회원 가입 완료: {input_member.email}")
            return Inserted(rows)

        logger.warning(f"❌ 회원 가입 실패: {input_member.email}")
        return Rejected("duplicate or constraint violation")
