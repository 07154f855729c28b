"""
라우터 등록 시스템
- View 라우터를 모듈 경로로 동적 로드하여 등록
- 새로운 라우터 추가 시 설정 목록에만 추가
"""

import importlib
import logging
from typing import Dict, List, Tuple, Optional
from fastapi import FastAPI
from fastapi.routing import APIRouter

logger = logging.getLogger(__name__)

class RouterConfig:
    """라우터 설정 정보"""

    def __init__(self, module_path: str, router_name: str = "router",
                 prefix: str = "", tags: Optional[List[str]] = None):
        self.module_path = module_path
        self.router_name = router_name
        self.prefix = prefix
        self.tags = tags or []

class RouterRegistry:
    """라우터 등록 관리"""

    def __init__(self):
        self.view_routers: Dict[str, RouterConfig] = {}
        self._setup_default_routers()

    def _setup_default_routers(self):
        """기본 라우터 설정"""
        view_configs = [
            ("main_views", RouterConfig("board.views.main_views", "main_views_router", "", ["Views"])),
            ("member_views", RouterConfig("board.views.member_views", "member_views_router", "", ["Member Views"])),
        ]

        for name, config in view_configs:
            self.view_routers[name] = config

    def _load_router(self, config: RouterConfig) -> Tuple[Optional[APIRouter], str]:
        """라우터 동적 로드"""
        try:
            module = importlib.import_module(config.module_path)
        except ImportError as e:
            return None, f"Failed to import {config.module_path}: {str(e)}"

        router = getattr(module, config.router_name, None)

        if router is None:
            return None, f"Router '{config.router_name}' not found in {config.module_path}"

        if not isinstance(router, APIRouter):
            return None, f"'{config.router_name}' is not an APIRouter instance in {config.module_path}"

        return router, ""

    def register_view_routers(self, app: FastAPI) -> Dict[str, bool]:
        """View 라우터들을 FastAPI 앱에 등록"""
        results = {}

        logger.info(f"🔄 View 라우터 등록 시작 ({len(self.view_routers)}개)")

        for name, config in self.view_routers.items():
            router, error = self._load_router(config)

            if router:
                app.include_router(router, prefix=config.prefix, tags=config.tags)
                logger.info(f"✅ View 라우터 등록 완료: {name}")
                results[name] = True
            else:
                logger.warning(f"⚠️ View 라우터 로드 실패: {name} - {error}")
                results[name] = False

        success_count = sum(results.values())
        logger.info(f"✅ View 라우터 등록 완료: {success_count}/{len(self.view_routers)}개 성공")

        return results

    def add_custom_router(self, name: str, config: RouterConfig):
        """커스텀 라우터 추가"""
        self.view_routers[name] = config
        logger.info(f"📝 커스텀 라우터 추가: {name}")

# 전역 라우터 레지스트리 인스턴스
router_registry = RouterRegistry()
