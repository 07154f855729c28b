"""회원 (로그인/로그아웃/회원가입) 모듈"""
