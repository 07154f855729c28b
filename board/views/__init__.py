"""
HTML Views Module
웹 인터페이스를 위한 HTML 응답 뷰들
"""

from .main_views import main_views_router
from .member_views import member_views_router

__all__ = [
    "main_views_router",
    "member_views_router",
]
