"""
Card Routes: 명함 생성/조회/다운로드.

- GET  /                        → 입력 폼
- POST /create                  → 검증 → 생성 → 기본 아티팩트 다운로드
- GET  /card/{card_id}          → 미리보기 페이지
- GET  /card/{card_id}/qr.png   → QR PNG
- GET  /card/{card_id}/download → 기본 아티팩트 재생성
- GET  /card/{card_id}/contact.vcf → vCard

규칙:
- 아티팩트는 매 요청마다 저장된 레코드에서 다시 생성 (캐시 없음)
- 없는 card_id → CardNotFoundError → 앱 핸들러가 404 페이지로 변환
- 렌더링은 threadpool에서 실행 (요청당 suspend 한 번)
"""

import logging

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates
from starlette.concurrency import run_in_threadpool

from src.app.config import Settings
from src.app.services.cards import CardService
from src.app.services.validate import validate_card_fields
from src.domain.constants import (
    CARD_PATH_PREFIX,
    CARD_URL_HEADER,
    MIME_PNG,
    MIME_VCARD,
    artifact_filename,
)
from src.domain.schemas import CardRecord
from src.render.base import CardRenderer
from src.render.qr import generate_qr_png
from src.render.vcard import encode_vcard

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Dependencies
# =============================================================================


def get_card_service(request: Request) -> CardService:
    """app.state에 주입된 CardService."""
    service: CardService = request.app.state.card_service
    return service


def get_settings(request: Request) -> Settings:
    settings: Settings = request.app.state.settings
    return settings


def get_card_renderer(request: Request) -> CardRenderer:
    renderer: CardRenderer = request.app.state.renderer
    return renderer


def get_templates(request: Request) -> Jinja2Templates:
    templates: Jinja2Templates = request.app.state.templates
    return templates


def build_card_url(request: Request, settings: Settings, card_id: str) -> str:
    """
    카드 공개 URL.

    public_base_url이 설정되어 있으면 그 값을 사용.
    없으면 요청의 scheme/host 기준 (allowed_hosts로 Host 헤더 제한 권장).
    """
    base = settings.public_base_url or str(request.base_url).rstrip("/")
    return f"{base}{CARD_PATH_PREFIX}/{card_id}"


def _attachment(filename: str) -> str:
    return f'attachment; filename="{filename}"'


async def _render_artifact(
    renderer: CardRenderer,
    record: CardRecord,
    card_url: str,
) -> Response:
    """기본 아티팩트 렌더링 → 다운로드 응답."""
    body = await run_in_threadpool(renderer.render, record, card_url)
    return Response(
        content=body,
        media_type=renderer.media_type,
        headers={
            "Content-Disposition": _attachment(artifact_filename(record.id, renderer.extension)),
            CARD_URL_HEADER: card_url,
        },
    )


# =============================================================================
# Page Routes (HTML)
# =============================================================================


@router.get("/", response_class=HTMLResponse)
async def form_page(
    request: Request,
    templates: Jinja2Templates = Depends(get_templates),
    renderer: CardRenderer = Depends(get_card_renderer),
) -> HTMLResponse:
    """빈 입력 폼."""
    return templates.TemplateResponse(
        request,
        "form.html",
        {"errors": [], "values": {}, "artifact_label": renderer.extension.upper()},
    )


@router.get(CARD_PATH_PREFIX + "/{card_id}", response_class=HTMLResponse)
async def card_page(
    request: Request,
    card_id: str,
    service: CardService = Depends(get_card_service),
    templates: Jinja2Templates = Depends(get_templates),
    renderer: CardRenderer = Depends(get_card_renderer),
) -> HTMLResponse:
    """카드 미리보기 페이지."""
    card = service.get_card(card_id)
    return templates.TemplateResponse(
        request,
        "card.html",
        {
            "card": card,
            "qr_src": f"{CARD_PATH_PREFIX}/{card.id}/qr.png",
            "download_href": f"{CARD_PATH_PREFIX}/{card.id}/download",
            "download_name": artifact_filename(card.id, renderer.extension),
            "vcard_href": f"{CARD_PATH_PREFIX}/{card.id}/contact.vcf",
            "artifact_label": renderer.extension.upper(),
        },
    )


# =============================================================================
# Create / Artifact Routes
# =============================================================================


@router.post("/create")
async def create_card(
    request: Request,
    first_name: str = Form("", alias="firstName"),
    last_name: str = Form("", alias="lastName"),
    designation: str = Form(""),
    service: CardService = Depends(get_card_service),
    settings: Settings = Depends(get_settings),
    renderer: CardRenderer = Depends(get_card_renderer),
    templates: Jinja2Templates = Depends(get_templates),
) -> Response:
    """
    카드 생성 + 기본 아티팩트 다운로드.

    검증 실패: 400 + 입력값이 채워진 폼 + 필드별 메시지
    성공: 아티팩트 첨부파일 + X-Card-Url 헤더
    """
    result = validate_card_fields({
        "firstName": first_name,
        "lastName": last_name,
        "designation": designation,
    })
    if not result.valid:
        logger.info(f"card_rejected missing={result.missing_required}")
        return templates.TemplateResponse(
            request,
            "form.html",
            {
                "errors": result.errors,
                "values": result.fields.to_form_values(),
                "artifact_label": renderer.extension.upper(),
            },
            status_code=400,
        )

    card = service.create_card(
        result.fields.first_name,
        result.fields.last_name,
        result.fields.designation,
    )
    card_url = build_card_url(request, settings, card.id)
    return await _render_artifact(renderer, card, card_url)


@router.get(CARD_PATH_PREFIX + "/{card_id}/qr.png")
async def card_qr(
    request: Request,
    card_id: str,
    service: CardService = Depends(get_card_service),
    settings: Settings = Depends(get_settings),
) -> Response:
    """카드 공개 URL을 담은 QR PNG."""
    card = service.get_card(card_id)
    card_url = build_card_url(request, settings, card.id)
    png = await run_in_threadpool(
        generate_qr_png,
        card_url,
        settings.qr_png_size,
        settings.qr_border,
    )
    return Response(content=png, media_type=MIME_PNG)


@router.get(CARD_PATH_PREFIX + "/{card_id}/download")
async def card_download(
    request: Request,
    card_id: str,
    service: CardService = Depends(get_card_service),
    settings: Settings = Depends(get_settings),
    renderer: CardRenderer = Depends(get_card_renderer),
) -> Response:
    """기본 아티팩트 재생성 (결정론적 → 매번 같은 bytes)."""
    card = service.get_card(card_id)
    card_url = build_card_url(request, settings, card.id)
    return await _render_artifact(renderer, card, card_url)


@router.get(CARD_PATH_PREFIX + "/{card_id}/contact.vcf")
async def card_vcard(
    request: Request,
    card_id: str,
    service: CardService = Depends(get_card_service),
    settings: Settings = Depends(get_settings),
) -> Response:
    """vCard 연락처 파일."""
    card = service.get_card(card_id)
    card_url = build_card_url(request, settings, card.id)
    text = encode_vcard(card, card_url, organization=settings.organization)
    return Response(
        content=text,
        media_type=MIME_VCARD,
        headers={"Content-Disposition": _attachment(artifact_filename(card.id, "vcf"))},
    )
