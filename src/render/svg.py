"""
SVG 카드 렌더러: Jinja2 기반.

- 템플릿: src/render/templates/card.svg.j2
- autoescape 켜짐 → 이름/직함에 마크업이 들어와도 그대로 텍스트로 출력
- QR은 PNG data URI로 <image>에 삽입
- 타임스탬프 등 가변 값 없음 → 같은 입력이면 같은 bytes
"""

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from src.domain.constants import (
    BRAND_NAME,
    BRAND_TITLE,
    CARD_CORNER_RADIUS,
    CARD_FRAME_INSET,
    CARD_HEADER_HEIGHT,
    CARD_HEIGHT,
    CARD_QR_SIZE,
    CARD_WIDTH,
    COLOR_ACCENT,
    COLOR_BORDER,
    COLOR_LABEL,
    COLOR_MUTED,
    COLOR_PRIMARY,
    COLOR_PRIMARY_DARK,
    COLOR_TEXT,
    COLOR_URL_BG,
    COLOR_WHITE,
    ID_LABEL,
    MIME_SVG,
    OUTPUT_FORMAT_SVG,
    QR_BORDER,
    QR_CAPTION,
    QR_EMBED_SIZE,
)
from src.domain.errors import CardError, CardRenderError, ErrorCodes
from src.domain.schemas import CardRecord
from src.render.qr import qr_data_uri

TEMPLATES_DIR = Path(__file__).parent / "templates"
SVG_TEMPLATE_NAME = "card.svg.j2"

_env = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(enabled_extensions=("svg.j2", "xml", "html")),
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)


class SvgCardRenderer:
    """
    SVG 명함 렌더러.

    Usage:
        renderer = SvgCardRenderer()
        svg_bytes = renderer.render(record, "https://example.com/card/<id>")
    """

    media_type = MIME_SVG
    extension = OUTPUT_FORMAT_SVG

    def __init__(self, qr_size: int = QR_EMBED_SIZE, qr_border: int = QR_BORDER):
        self.qr_size = qr_size
        self.qr_border = qr_border

    def render(self, record: CardRecord, public_url: str) -> bytes:
        """
        카드 SVG 생성.

        Returns:
            UTF-8 SVG bytes (<?xml ... 로 시작)

        Raises:
            CardRenderError: RENDER_FAILED / QR_ENCODE_FAILED
        """
        try:
            qr_uri = qr_data_uri(public_url, size=self.qr_size, border=self.qr_border)
            context = self._build_context(record, public_url, qr_uri)
            template = _env.get_template(SVG_TEMPLATE_NAME)
            return template.render(**context).encode("utf-8")

        except CardError:
            raise
        except Exception as e:
            raise CardRenderError(
                ErrorCodes.RENDER_FAILED,
                card_id=record.id,
                format=self.extension,
                error=str(e),
            ) from e

    def _build_context(
        self,
        record: CardRecord,
        public_url: str,
        qr_uri: str,
    ) -> dict[str, Any]:
        """템플릿 컨텍스트 구성 (좌표는 좌상단 기준)."""
        frame_x = CARD_FRAME_INSET
        frame_y = CARD_FRAME_INSET
        frame_w = CARD_WIDTH - 2 * CARD_FRAME_INSET
        frame_h = CARD_HEIGHT - 2 * CARD_FRAME_INSET
        left = frame_x + 20
        top = frame_y + 18
        qr_x = frame_x + frame_w - CARD_QR_SIZE - 18
        qr_y = top + 8
        detail_top = frame_y + 90

        return {
            # 데이터
            "card_id": record.id,
            "full_name": record.full_name,
            "designation": record.designation,
            "public_url": public_url,
            "qr_uri": qr_uri,
            # 문구
            "brand_name": BRAND_NAME,
            "brand_title": BRAND_TITLE,
            "id_label": ID_LABEL,
            "qr_caption": QR_CAPTION,
            # 레이아웃
            "width": CARD_WIDTH,
            "height": CARD_HEIGHT,
            "radius": CARD_CORNER_RADIUS,
            "frame": {"x": frame_x, "y": frame_y, "w": frame_w, "h": frame_h},
            "header_h": CARD_HEADER_HEIGHT,
            "left": left,
            "top": top,
            "qr": {"x": qr_x, "y": qr_y, "size": CARD_QR_SIZE},
            "detail_top": detail_top,
            "url_box": {
                "x": left,
                "y": CARD_HEIGHT - 42,
                "w": frame_w - 40,
                "h": 22,
            },
            # 색상
            "colors": {
                "primary": COLOR_PRIMARY,
                "primary_dark": COLOR_PRIMARY_DARK,
                "accent": COLOR_ACCENT,
                "label": COLOR_LABEL,
                "text": COLOR_TEXT,
                "muted": COLOR_MUTED,
                "border": COLOR_BORDER,
                "url_bg": COLOR_URL_BG,
                "white": COLOR_WHITE,
            },
        }
