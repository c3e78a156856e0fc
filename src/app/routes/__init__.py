"""
FastAPI Routes.

페이지 라우트 (HTML) + 아티팩트 다운로드 라우트
"""

from . import cards

__all__ = ["cards"]
