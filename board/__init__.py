"""게시판 프로젝트 - 회원(로그인/로그아웃/회원가입) 서브시스템"""

__version__ = "1.0.0"
