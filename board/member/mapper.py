"""
회원 데이터 접근 계층
- 로그인: 이메일로 회원 조회
- 회원 가입: MEMBER 테이블 INSERT (삽입된 행 수 반환)
"""

import logging
from typing import Optional
from sqlalchemy import select, insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from .models import MemberRow
from .dto import Member

logger = logging.getLogger(__name__)

class MemberMapper:
    """MEMBER 테이블 SQL 실행"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def login(self, member_email: str) -> Optional[MemberRow]:
        """로그인 SQL 실행 - 탈퇴하지 않은 회원만 조회"""
        result = await self.session.execute(
            select(MemberRow)
            .where(MemberRow.member_email == member_email)
            .where(MemberRow.member_del_fl == 'N')
        )
        return result.scalar_one_or_none()

    async def signup(self, member: Member, member_address: Optional[str]) -> int:
        """
        회원 가입 SQL 실행
        Returns: 삽입된 행 수 (이메일 중복 등 제약 조건 위반 시 0)
        """
        stmt = insert(MemberRow).values(
            member_email=member.email,
            member_pw=member.password,
            member_nickname=member.nickname,
            member_tel=member.telephone,
            member_address=member_address,
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning(f"⚠️ 회원 가입 제약 조건 위반: {member.email} - {e.orig}")
            return 0

        return result.rowcount
