"""
회원 관련 SQLAlchemy 모델
- MemberRow: MEMBER 테이블 행
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, CHAR

from ..database.mysql_connection import Base

# 주소 3개 입력값을 한 컬럼에 저장할 때 사용하는 구분자
ADDRESS_DELIMITER = "^^^"

class MemberRow(Base):
    """회원 모델"""
    __tablename__ = 'MEMBER'

    member_no = Column(Integer, primary_key=True, autoincrement=True)
    member_email = Column(String(50), unique=True, nullable=False, index=True)
    member_pw = Column(String(100), nullable=False)
    member_nickname = Column(String(30), nullable=False)
    member_tel = Column(String(20), nullable=False)
    member_address = Column(String(300), nullable=True)
    profile_img = Column(String(300), nullable=True)
    enroll_date = Column(DateTime, default=datetime.now, nullable=False)
    member_del_fl = Column(CHAR(1), default='N', nullable=False)  # N: 정상, Y: 탈퇴
    authority = Column(Integer, default=1, nullable=False)  # 1: 일반, 2: 관리자

    def __repr__(self):
        return f"<MemberRow(member_no={self.member_no}, member_email='{self.member_email}')>"

    @property
    def address_parts(self):
        """저장된 주소를 입력 3칸으로 분리"""
        if not self.member_address:
            return []
        return self.member_address.split(ADDRESS_DELIMITER)
