"""
CardRenderer 공통 인터페이스 + 출력 형식 선택.

출력 형식:
- svg: SvgCardRenderer (Jinja2 템플릿)
- pdf: PdfCardRenderer (ReportLab)

설정 card.output_format으로 선택. 알 수 없는 값은 앱 시작 시점에 실패.
"""

from typing import Protocol

from src.domain.constants import (
    OUTPUT_FORMAT_PDF,
    OUTPUT_FORMAT_SVG,
    OUTPUT_FORMATS,
    QR_BORDER,
    QR_EMBED_SIZE,
)
from src.domain.schemas import CardRecord


class CardRenderer(Protocol):
    """
    카드 아티팩트 렌더러.

    render()는 결정론적: 같은 record + URL → 같은 bytes.
    """

    media_type: str
    extension: str

    def render(self, record: CardRecord, public_url: str) -> bytes:
        ...


def get_renderer(
    output_format: str,
    qr_size: int = QR_EMBED_SIZE,
    qr_border: int = QR_BORDER,
) -> CardRenderer:
    """
    출력 형식에 맞는 렌더러 생성.

    Args:
        output_format: "svg" 또는 "pdf"
        qr_size: 카드에 삽입할 QR 이미지 크기 (px)
        qr_border: QR quiet zone (모듈 수)

    Raises:
        ValueError: 지원하지 않는 형식
    """
    fmt = (output_format or "").strip().lower()

    if fmt == OUTPUT_FORMAT_SVG:
        from src.render.svg import SvgCardRenderer

        return SvgCardRenderer(qr_size=qr_size, qr_border=qr_border)

    if fmt == OUTPUT_FORMAT_PDF:
        from src.render.pdf import PdfCardRenderer

        return PdfCardRenderer(qr_size=qr_size, qr_border=qr_border)

    raise ValueError(
        f"Unsupported card output format: {output_format!r} "
        f"(expected one of {', '.join(OUTPUT_FORMATS)})"
    )
