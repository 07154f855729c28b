"""
게시판 프로젝트 - 회원 서비스 메인 애플리케이션
- 자동 라우터 등록 및 생명주기 관리
- 환경별 설정 지원
"""

import logging
import os

# 설정 관리자를 가장 먼저 초기화
from board.config_manager import config_manager
from board.app_factory import create_development_app, create_production_app, create_testing_app

logger = logging.getLogger(__name__)

APP_FACTORIES = {
    "development": create_development_app,
    "production": create_production_app,
    "testing": create_testing_app,
}

def main():
    """메인 애플리케이션 진입점"""

    environment = os.getenv('ENVIRONMENT', 'development').lower()
    if environment not in APP_FACTORIES:
        raise ValueError(f"Unknown environment: {environment}")

    app = APP_FACTORIES[environment]()

    logger.info(f"🚀 게시판 회원 서비스 시작 - 환경: {environment}")
    for key, value in config_manager.get_config_summary().items():
        logger.info(f"   {key}: {value}")

    return app

# FastAPI 애플리케이션 인스턴스 생성
app = main()

# 개발 서버 실행을 위한 진입점
if __name__ == "__main__":
    import uvicorn

    if config_manager.is_production():
        uvicorn.run(
            "main:app",
            host=config_manager.webserver.host,
            port=config_manager.webserver.port,
            workers=config_manager.webserver.workers,
            reload=False,
            log_level="info",
            access_log=True
        )
    else:
        uvicorn.run(
            "main:app",
            host=config_manager.webserver.host,
            port=config_manager.webserver.port,
            reload=config_manager.webserver.reload,
            log_level="debug" if config_manager.system.debug else "info",
            access_log=True
        )
