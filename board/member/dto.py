"""회원 요청/세션 데이터 모델"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

class Member(BaseModel):
    """요청 파라미터로 채워지는 회원 커맨드 객체"""
    email: str = ""
    password: str = ""
    nickname: str = ""
    telephone: str = ""
    address: List[str] = Field(default_factory=list)

class LoginMember(BaseModel):
    """세션에 보관되는 로그인 회원 정보 (비밀번호 제외)"""
    member_no: int
    email: str
    nickname: str
    telephone: str
    address: List[str] = Field(default_factory=list)
    profile_img: Optional[str] = None
    authority: int = 1
    enroll_date: Optional[datetime] = None

    @classmethod
    def from_row(cls, row) -> "LoginMember":
        return cls(
            member_no=row.member_no,
            email=row.member_email,
            nickname=row.member_nickname,
            telephone=row.member_tel,
            address=row.address_parts,
            profile_img=row.profile_img,
            authority=row.authority,
            enroll_date=row.enroll_date,
        )
