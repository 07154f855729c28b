"""
설정 관리 시스템
- 환경별 설정 관리 (개발/운영/테스트)
- .env 파일 및 환경 변수 로드
- 설정 검증 및 요약
"""

import os
import logging
from typing import Dict, Any, Optional
from dataclasses import dataclass
from pathlib import Path
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# 아이디 저장 쿠키 (고정값)
SAVE_ID_COOKIE_NAME = "saveId"
SAVE_ID_COOKIE_PATH = "/"
SAVE_ID_MAX_AGE = 30 * 24 * 60 * 60  # 30일 (초)

@dataclass
class LoggingConfig:
    """로깅 설정"""
    level: str = "INFO"
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    file_path: str = 'board.log'
    max_bytes: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5
    console_enabled: bool = True

@dataclass
class DatabaseConfig:
    """데이터베이스 설정"""
    url: str = ""
    mysql_host: str = "localhost"
    mysql_port: int = 3306
    mysql_database: str = "board"
    mysql_user: str = "root"
    mysql_password: str = ""
    pool_size: int = 20
    max_overflow: int = 30
    pool_timeout: int = 30
    pool_recycle: int = 3600
    echo: bool = False

    @property
    def mysql_url(self) -> str:
        return (
            f"mysql+aiomysql://{self.mysql_user}:{self.mysql_password}"
            f"@{self.mysql_host}:{self.mysql_port}/{self.mysql_database}?charset=utf8mb4"
        )

    @property
    def effective_url(self) -> str:
        """DATABASE_URL이 있으면 우선 사용"""
        return self.url or self.mysql_url

@dataclass
class SessionConfig:
    """세션 설정"""
    cookie_name: str = "BOARDSESSIONID"
    timeout_minutes: int = 30
    cleanup_interval_seconds: int = 300
    cookie_secure: bool = False

@dataclass
class SecurityConfig:
    """보안 설정"""
    password_encoder: str = "plain"  # plain, bcrypt
    bcrypt_rounds: int = 12

@dataclass
class WebServerConfig:
    """웹 서버 설정"""
    host: str = "0.0.0.0"
    port: int = 8080
    reload: bool = False
    workers: int = 1

@dataclass
class SystemConfig:
    """시스템 설정"""
    environment: str = "development"  # development, production, testing
    debug: bool = True

class ConfigManager:
    """설정 관리자"""

    PASSWORD_ENCODERS = ("plain", "bcrypt")

    def __init__(self, env_file: Optional[str] = None):
        self._env_file = env_file or '.env'
        self._load_environment()
        self._initialize_configs()

    def _load_environment(self):
        """환경 변수 로드"""
        if Path(self._env_file).exists():
            load_dotenv(self._env_file)
            logger.info(f"✅ 환경 설정 로드 완료: {self._env_file}")
        else:
            logger.warning(f"⚠️ 환경 파일 없음: {self._env_file} (기본값 사용)")

    def _initialize_configs(self):
        """설정 초기화"""
        environment = os.getenv('ENVIRONMENT', 'development').lower()

        self.logging = LoggingConfig(
            level=os.getenv('LOG_LEVEL', 'INFO').upper(),
            file_path=os.getenv('LOG_FILE', 'board.log'),
            console_enabled=os.getenv('LOG_CONSOLE', 'true').lower() == 'true'
        )

        self.database = DatabaseConfig(
            url=os.getenv('DATABASE_URL', ''),
            mysql_host=os.getenv('MYSQL_HOST', 'localhost'),
            mysql_port=int(os.getenv('MYSQL_PORT', '3306')),
            mysql_database=os.getenv('MYSQL_DATABASE', 'board'),
            mysql_user=os.getenv('MYSQL_USERNAME', 'root'),
            mysql_password=os.getenv('MYSQL_PASSWORD', ''),
            echo=os.getenv('SQL_ECHO', 'false').lower() == 'true',
        )

        self.session = SessionConfig(
            cookie_name=os.getenv('SESSION_COOKIE_NAME', 'BOARDSESSIONID'),
            timeout_minutes=int(os.getenv('SESSION_TIMEOUT_MINUTES', '30')),
            cleanup_interval_seconds=int(os.getenv('SESSION_CLEANUP_INTERVAL', '300')),
            cookie_secure=os.getenv('SESSION_COOKIE_SECURE', 'false').lower() == 'true',
        )

        self.security = SecurityConfig(
            password_encoder=os.getenv('PASSWORD_ENCODER', 'plain').lower(),
            bcrypt_rounds=int(os.getenv('BCRYPT_ROUNDS', '12')),
        )

        self.webserver = WebServerConfig(
            host=os.getenv('HOST', '0.0.0.0'),
            port=int(os.getenv('PORT', '8080')),
            reload=os.getenv('RELOAD', 'false').lower() == 'true',
            workers=int(os.getenv('WORKERS', '1'))
        )

        self.system = SystemConfig(
            environment=environment,
            debug=os.getenv('DEBUG', 'true').lower() == 'true',
        )

        logger.info(f"⚙️ 설정 초기화 완료 - 환경: {environment}")

    def get_config_summary(self) -> Dict[str, Any]:
        """설정 요약 정보 반환 (비밀번호 제외)"""
        return {
            "environment": self.system.environment,
            "debug": self.system.debug,
            "webserver_port": self.webserver.port,
            "database": {
                "mysql_enabled": not self.database.url,
                "mysql_host": self.database.mysql_host,
                "mysql_database": self.database.mysql_database,
            },
            "session": {
                "cookie_name": self.session.cookie_name,
                "timeout_minutes": self.session.timeout_minutes,
            },
            "password_encoder": self.security.password_encoder,
        }

    def validate_config(self) -> Dict[str, Any]:
        """설정 유효성 검증"""
        issues = []
        warnings = []

        if self.security.password_encoder not in self.PASSWORD_ENCODERS:
            issues.append(f"알 수 없는 비밀번호 인코더: {self.security.password_encoder}")

        if self.session.timeout_minutes <= 0:
            issues.append(f"세션 만료 시간이 유효하지 않음: {self.session.timeout_minutes}")

        if not self.session.cookie_name:
            issues.append("세션 쿠키 이름이 설정되지 않음")

        if self.system.environment == 'production' and self.system.debug:
            warnings.append("운영 환경에서 디버그 모드가 활성화됨")

        if self.system.environment == 'production' and self.security.password_encoder == 'plain':
            warnings.append("운영 환경에서 평문 비밀번호 비교를 사용 중")

        return {
            "valid": len(issues) == 0,
            "issues": issues,
            "warnings": warnings
        }

    def is_production(self) -> bool:
        """운영 환경 여부 확인"""
        return self.system.environment == 'production'

    def is_development(self) -> bool:
        """개발 환경 여부 확인"""
        return self.system.environment == 'development'

    def is_testing(self) -> bool:
        """테스트 환경 여부 확인"""
        return self.system.environment == 'testing'

# 전역 설정 관리자 인스턴스
config_manager = ConfigManager()
