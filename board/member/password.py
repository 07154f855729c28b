"""비밀번호 인코더 (평문 비교 / bcrypt)"""

import bcrypt

from ..config_manager import config_manager

class PlainPasswordEncoder:
    """저장된 값과 그대로 비교"""

    def encode(self, raw_password: str) -> str:
        return raw_password

    def matches(self, raw_password: str, stored_password: str) -> bool:
        return raw_password == stored_password

class BcryptPasswordEncoder:
    """bcrypt 해시 비교"""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def encode(self, raw_password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(raw_password.encode('utf-8'), salt).decode('utf-8')

    def matches(self, raw_password: str, stored_password: str) -> bool:
        try:
            return bcrypt.checkpw(raw_password.encode('utf-8'), stored_password.encode('utf-8'))
        except ValueError:
            # 저장된 값이 bcrypt 해시 형식이 아님
            return False

def get_password_encoder(name: str = None):
    """설정에 맞는 인코더 반환"""
    name = (name or config_manager.security.password_encoder).lower()
    if name == "bcrypt":
        return BcryptPasswordEncoder(rounds=config_manager.security.bcrypt_rounds)
    if name == "plain":
        return PlainPasswordEncoder()
    raise ValueError(f"Unknown password encoder: {name}")
