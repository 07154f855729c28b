"""
FastAPI 애플리케이션 팩토리
- 애플리케이션 생성 및 설정을 모듈화
- 환경별 다른 설정 적용 가능
- 테스트 용이성 향상
"""

import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from board import __version__
from board.config_manager import config_manager
from board.router_registry import router_registry
from board.app_lifecycle import lifespan_manager

logger = logging.getLogger(__name__)

def setup_logging():
    """로깅 설정"""
    handlers = []

    # 파일 핸들러
    if config_manager.logging.file_path:
        from logging.handlers import RotatingFileHandler
        file_handler = RotatingFileHandler(
            config_manager.logging.file_path,
            maxBytes=config_manager.logging.max_bytes,
            backupCount=config_manager.logging.backup_count,
            encoding="utf-8"
        )
        handlers.append(file_handler)

    # 콘솔 핸들러
    if config_manager.logging.console_enabled:
        handlers.append(logging.StreamHandler())

    logging.basicConfig(
        level=getattr(logging, config_manager.logging.level, logging.INFO),
        format=config_manager.logging.format,
        handlers=handlers,
        force=True  # 기존 설정 덮어쓰기
    )

def setup_exception_handlers(app: FastAPI):
    """예외 처리기 설정"""

    @app.exception_handler(500)
    async def internal_server_error_handler(request: Request, exc: Exception):
        logger.error(f"Internal server error: {str(exc)}", exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"}
        )

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc: Exception):
        return JSONResponse(
            status_code=404,
            content={"detail": "Resource not found"}
        )

def add_custom_endpoints(app: FastAPI):
    """커스텀 엔드포인트 추가"""

    @app.get("/health")
    async def health_check():
        """헬스 체크 엔드포인트"""
        return {
            "status": "healthy",
            "environment": config_manager.system.environment,
            "version": __version__
        }

def create_application(environment: str = None) -> FastAPI:
    """
    FastAPI 애플리케이션 생성 팩토리

    Args:
        environment: 환경 설정 (development, production, testing)

    Returns:
        FastAPI: 구성된 FastAPI 애플리케이션 인스턴스
    """

    # 환경별 설정 오버라이드
    if environment:
        config_manager.system.environment = environment
        config_manager.system.debug = environment in ["development", "testing"]

    setup_logging()

    logger.info(f"🚀 애플리케이션 생성 시작 - 환경: {config_manager.system.environment}")

    # 설정 검증
    validation_result = config_manager.validate_config()
    if not validation_result["valid"]:
        logger.error(f"❌ 설정 검증 실패: {validation_result['issues']}")
        raise ValueError(f"Invalid configuration: {validation_result['issues']}")

    if validation_result["warnings"]:
        logger.warning(f"⚠️ 설정 경고: {validation_result['warnings']}")

    app = FastAPI(
        title="Board Project - Member",
        description="게시판 프로젝트 회원 서비스 (로그인/로그아웃/회원가입)",
        version=__version__,
        debug=config_manager.system.debug,
        lifespan=lifespan_manager
    )

    setup_exception_handlers(app)

    registration_results = router_registry.register_view_routers(app)

    add_custom_endpoints(app)

    successful = sum(registration_results.values())
    logger.info(f"✅ 애플리케이션 생성 완료 - Views: {successful}/{len(registration_results)}")

    return app

def create_development_app() -> FastAPI:
    """개발환경용 애플리케이션 생성"""
    return create_application("development")

def create_production_app() -> FastAPI:
    """운영환경용 애플리케이션 생성"""
    return create_application("production")

def create_testing_app() -> FastAPI:
    """테스트환경용 애플리케이션 생성"""
    return create_application("testing")
