"""
PDF 카드 렌더러: ReportLab 기반.

- 420 x 250 pt 단일 페이지
- QR은 PNG로 래스터화해서 삽입
- 글꼴: 동봉 DejaVu Sans + CID 폴백 (src.render.fonts), 비라틴 이름도 표시
- invariant=1 → 생성 시각/문서 ID가 고정되어 같은 입력이면 같은 bytes
- 좌표 계산은 좌상단 기준, 그릴 때 ReportLab 좌표계(좌하단)로 뒤집음
"""

import io

from reportlab.lib.colors import HexColor
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

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
    MIME_PDF,
    OUTPUT_FORMAT_PDF,
    QR_BORDER,
    QR_CAPTION,
    QR_EMBED_SIZE,
)
from src.domain.errors import CardError, CardRenderError, ErrorCodes
from src.domain.schemas import CardRecord
from src.render.fonts import FONT_BOLD, FONT_REGULAR, draw_text, register_fonts, text_width
from src.render.qr import generate_qr_png

ELLIPSIS = "..."


class PdfCardRenderer:
    """
    PDF 명함 렌더러.

    Usage:
        renderer = PdfCardRenderer()
        pdf_bytes = renderer.render(record, "https://example.com/card/<id>")
    """

    media_type = MIME_PDF
    extension = OUTPUT_FORMAT_PDF

    def __init__(self, qr_size: int = QR_EMBED_SIZE, qr_border: int = QR_BORDER):
        self.qr_size = qr_size
        self.qr_border = qr_border
        register_fonts()

    def render(self, record: CardRecord, public_url: str) -> bytes:
        """
        카드 PDF 생성.

        Returns:
            PDF bytes (%PDF 로 시작)

        Raises:
            CardRenderError: RENDER_FAILED / QR_ENCODE_FAILED
        """
        try:
            qr_png = generate_qr_png(public_url, size=self.qr_size, border=self.qr_border)

            buf = io.BytesIO()
            c = canvas.Canvas(
                buf,
                pagesize=(CARD_WIDTH, CARD_HEIGHT),
                invariant=1,
            )
            c.setTitle(f"{record.full_name} - {BRAND_TITLE}")
            c.setSubject(record.id)

            self._draw(c, record, public_url, qr_png)

            c.showPage()
            c.save()
            return buf.getvalue()

        except CardError:
            raise
        except Exception as e:
            raise CardRenderError(
                ErrorCodes.RENDER_FAILED,
                card_id=record.id,
                format=self.extension,
                error=str(e),
            ) from e

    def _draw(
        self,
        c: canvas.Canvas,
        record: CardRecord,
        public_url: str,
        qr_png: bytes,
    ) -> None:
        """카드 레이아웃 그리기."""
        frame_x = CARD_FRAME_INSET
        frame_y = CARD_FRAME_INSET
        frame_w = CARD_WIDTH - 2 * CARD_FRAME_INSET
        frame_h = CARD_HEIGHT - 2 * CARD_FRAME_INSET
        left = frame_x + 20
        top = frame_y + 18
        qr_x = frame_x + frame_w - CARD_QR_SIZE - 18
        qr_y = top + 8
        detail_top = frame_y + 90
        detail_w = frame_w - CARD_QR_SIZE - 54

        # 프레임
        c.setFillColor(HexColor(COLOR_WHITE))
        c.setStrokeColor(HexColor(COLOR_BORDER))
        c.setLineWidth(1)
        c.roundRect(frame_x, _flip(frame_y, frame_h), frame_w, frame_h, CARD_CORNER_RADIUS, stroke=1, fill=1)

        # 헤더
        c.setFillColor(HexColor(COLOR_PRIMARY))
        c.roundRect(frame_x, _flip(frame_y, CARD_HEADER_HEIGHT), frame_w, CARD_HEADER_HEIGHT, CARD_CORNER_RADIUS, stroke=0, fill=1)
        c.setFillColor(HexColor(COLOR_PRIMARY_DARK))
        c.rect(frame_x, _flip(frame_y + CARD_HEADER_HEIGHT - 10, 10), frame_w, 10, stroke=0, fill=1)

        _text(c, BRAND_NAME, left, top + 13, FONT_BOLD, 9, COLOR_ACCENT)
        _text(c, BRAND_TITLE, left, top + 34, FONT_BOLD, 16, COLOR_WHITE)

        # QR
        backing = CARD_QR_SIZE + 14
        c.setFillColor(HexColor(COLOR_WHITE))
        c.setStrokeColor(HexColor(COLOR_BORDER))
        c.roundRect(qr_x - 7, _flip(qr_y - 7, backing), backing, backing, 10, stroke=1, fill=1)
        c.drawImage(
            ImageReader(io.BytesIO(qr_png)),
            qr_x,
            _flip(qr_y, CARD_QR_SIZE),
            width=CARD_QR_SIZE,
            height=CARD_QR_SIZE,
            preserveAspectRatio=True,
        )
        c.setFillColor(HexColor(COLOR_MUTED))
        c.setFont(FONT_REGULAR, 8)
        c.drawCentredString(qr_x + CARD_QR_SIZE / 2, _flip(qr_y + CARD_QR_SIZE + 18), QR_CAPTION)

        # 이름/직함 (길면 글자 크기 축소 → 그래도 길면 말줄임)
        name_size = _shrink_to_fit(record.full_name, FONT_BOLD, 21, 14, detail_w)
        _text(c, _ellipsize(record.full_name, FONT_BOLD, name_size, detail_w), left, detail_top + 21, FONT_BOLD, name_size, COLOR_TEXT)
        _text(c, _ellipsize(record.designation, FONT_REGULAR, 12, detail_w), left, detail_top + 42, FONT_REGULAR, 12, COLOR_MUTED)

        # Card ID
        _text(c, ID_LABEL, left, detail_top + 72, FONT_BOLD, 8.5, COLOR_LABEL)
        _text(c, record.id, left, detail_top + 86, FONT_BOLD, 9.5, COLOR_PRIMARY_DARK)

        # URL (수동 입력용)
        url_w = frame_w - 40
        url_y = CARD_HEIGHT - 42
        c.setFillColor(HexColor(COLOR_URL_BG))
        c.roundRect(left, _flip(url_y, 22), url_w, 22, 8, stroke=0, fill=1)
        _text(c, _ellipsize(public_url, FONT_REGULAR, 8, url_w - 16), left + 8, url_y + 14, FONT_REGULAR, 8, COLOR_MUTED)


def _flip(top: float, height: float = 0) -> float:
    """좌상단 기준 y → ReportLab 좌하단 기준 y."""
    return CARD_HEIGHT - top - height


def _text(
    c: canvas.Canvas,
    value: str,
    x: float,
    baseline: float,
    font: str,
    size: float,
    color: str,
) -> None:
    c.setFillColor(HexColor(color))
    draw_text(c, x, _flip(baseline), value, font, size)


def _shrink_to_fit(value: str, font: str, size: float, min_size: float, max_width: float) -> float:
    """max_width에 들어갈 때까지 글자 크기를 1pt씩 줄임 (min_size 하한)."""
    while size > min_size and text_width(value, font, size) > max_width:
        size -= 1
    return size


def _ellipsize(value: str, font: str, size: float, max_width: float) -> str:
    """max_width를 넘으면 뒤를 잘라 '...' 붙임."""
    if text_width(value, font, size) <= max_width:
        return value
    trimmed = value
    while trimmed and text_width(trimmed + ELLIPSIS, font, size) > max_width:
        trimmed = trimmed[:-1]
    return trimmed + ELLIPSIS
