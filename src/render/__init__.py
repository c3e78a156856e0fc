"""
Render layer: 카드 아티팩트 생성.

역할:
- 카드 레코드 + 공개 URL → SVG / PDF / vCard / QR PNG
- Jinja2 (SVG), ReportLab (PDF), qrcode (QR)
"""

from .base import CardRenderer, get_renderer
from .pdf import PdfCardRenderer
from .qr import generate_qr_png, qr_data_uri
from .svg import SvgCardRenderer
from .vcard import encode_vcard

__all__ = [
    "CardRenderer",
    "get_renderer",
    "SvgCardRenderer",
    "PdfCardRenderer",
    "generate_qr_png",
    "qr_data_uri",
    "encode_vcard",
]
