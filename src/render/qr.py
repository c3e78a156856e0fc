"""
QR 인코더: qrcode + Pillow 기반.

- URL 문자열 → PNG bytes (또는 data URI)
- 동일 입력 + 동일 크기 → 동일 bytes (결정론적)
- 실패 시 CardRenderError로 감싸서 전파 (fallback 없음)
"""

import base64
import io

import qrcode
from qrcode.constants import ERROR_CORRECT_M
from qrcode.image.pil import PilImage

from src.domain.constants import QR_BORDER, QR_PNG_SIZE
from src.domain.errors import CardError, CardRenderError, ErrorCodes


def generate_qr_png(
    data: str,
    size: int = QR_PNG_SIZE,
    border: int = QR_BORDER,
) -> bytes:
    """
    QR 코드 PNG 생성.

    Args:
        data: 인코딩할 문자열 (카드 공개 URL)
        size: 목표 이미지 크기 (px). 모듈 단위로 맞추므로 실제 크기는 이하
        border: quiet zone (모듈 수)

    Returns:
        PNG bytes

    Raises:
        CardRenderError: QR_ENCODE_FAILED
    """
    if not data or not data.strip():
        raise CardRenderError(ErrorCodes.QR_ENCODE_FAILED, error="empty QR payload")

    try:
        qr = qrcode.QRCode(
            version=None,  # auto-size
            error_correction=ERROR_CORRECT_M,
            box_size=1,
            border=border,
        )
        qr.add_data(data)
        qr.make(fit=True)

        # 전체 모듈 수(quiet zone 포함)로 나눠 box_size 결정
        total_modules = qr.modules_count + 2 * border
        qr.box_size = max(1, size // total_modules)

        img = qr.make_image(
            image_factory=PilImage,
            fill_color="black",
            back_color="white",
        )
        buf = io.BytesIO()
        img.save(buf, format="PNG")
        return buf.getvalue()

    except CardError:
        raise
    except Exception as e:
        raise CardRenderError(
            ErrorCodes.QR_ENCODE_FAILED,
            data=data,
            error=str(e),
        ) from e


def qr_data_uri(
    data: str,
    size: int = QR_PNG_SIZE,
    border: int = QR_BORDER,
) -> str:
    """QR PNG를 <img>/<image>에 바로 넣을 수 있는 data URI로."""
    png = generate_qr_png(data, size=size, border=border)
    encoded = base64.b64encode(png).decode("ascii")
    return f"data:image/png;base64,{encoded}"
