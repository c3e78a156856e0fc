"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload
- 프로덕션: uv run uvicorn src.app.main:app
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import HTMLResponse, Response
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.trustedhost import TrustedHostMiddleware

from src.app.config import Settings, load_config
from src.app.routes import cards
from src.app.services.cards import CardService
from src.core.logging import configure_logging
from src.core.store import CardStore, InMemoryCardStore
from src.domain.errors import CardError, CardNotFoundError
from src.render.base import get_renderer

logger = logging.getLogger(__name__)

APP_DIR = Path(__file__).parent
STATIC_DIR = APP_DIR / "static"
TEMPLATES_DIR = APP_DIR / "templates"


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: 로그 출력
    종료 시: 저장소 비움 (영속성 없음 → 재시작하면 모든 링크 404)
    """
    settings: Settings = app.state.settings
    logger.info(
        f"Virtual Visiting Card Generator started "
        f"(format={settings.output_format}, base_url={settings.public_base_url or 'request'})"
    )

    yield

    app.state.card_service.store.clear()


# =============================================================================
# Exception Handlers
# =============================================================================


def _render_error_page(
    request: Request,
    template_name: str,
    status_code: int,
    context: dict[str, Any] | None = None,
) -> HTMLResponse:
    templates: Jinja2Templates = request.app.state.templates
    return templates.TemplateResponse(
        request,
        template_name,
        context or {},
        status_code=status_code,
    )


async def card_not_found_handler(request: Request, exc: CardNotFoundError) -> Response:
    """없는 card_id → 404 페이지 (id 표시)."""
    card_id = exc.card_id
    logger.info(f"card_not_found id={card_id!r} path={request.url.path}")
    return _render_error_page(request, "card_not_found.html", 404, {"card_id": card_id})


async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """매칭되는 라우트 없음 → 일반 404 페이지. 그 외 HTTP 에러는 기본 처리."""
    if exc.status_code == 404:
        return _render_error_page(request, "not_found.html", 404)
    return await http_exception_handler(request, exc)


async def internal_error_handler(request: Request, exc: Exception) -> Response:
    """
    처리되지 않은 예외 → 일반 500 페이지.

    상세 내용은 서버 로그에만 남김.
    """
    context = exc.to_dict() if isinstance(exc, CardError) else {}
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {exc!r} {context}",
        exc_info=exc,
    )
    return _render_error_page(request, "error.html", 500)


# =============================================================================
# App Factory
# =============================================================================


def create_app(
    config: dict[str, Any] | None = None,
    store: CardStore | None = None,
) -> FastAPI:
    """
    FastAPI 앱 생성.

    Args:
        config: 설정 dict (None이면 default.yaml / CARD_CONFIG)
        store: 카드 저장소 (None이면 InMemoryCardStore)

    Raises:
        ValueError: 잘못된 card.output_format
    """
    settings = Settings.from_dict(load_config() if config is None else config)
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Virtual Visiting Card Generator",
        description="이름/직함 입력 → 명함(SVG/PDF) + QR + vCard 생성",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.card_service = CardService(store if store is not None else InMemoryCardStore())
    app.state.renderer = get_renderer(
        settings.output_format,
        qr_size=settings.qr_embed_size,
        qr_border=settings.qr_border,
    )
    app.state.templates = Jinja2Templates(directory=TEMPLATES_DIR)

    if settings.allowed_hosts:
        app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.allowed_hosts)

    # Static files (CSS, 로고)
    if STATIC_DIR.exists():
        app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    app.add_exception_handler(CardNotFoundError, card_not_found_handler)
    app.add_exception_handler(StarletteHTTPException, not_found_handler)
    app.add_exception_handler(CardError, internal_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)

    app.include_router(cards.router, tags=["Cards"])

    @app.get("/health")
    async def health() -> dict[str, str]:
        """헬스 체크."""
        return {"status": "ok"}

    return app


# =============================================================================
# App Instance
# =============================================================================

app = create_app()


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.app.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
    )
