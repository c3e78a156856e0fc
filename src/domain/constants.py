"""
Domain Constants: 서비스 전역 상수.

파일명 정책, MIME 타입, 카드 레이아웃 값 등.
"""

# =============================================================================
# Output Filenames (출력 파일명 정책)
# =============================================================================
# visiting-card-<id>.svg / .pdf / .vcf

OUTPUT_FILENAME_PREFIX = "visiting-card-"


def artifact_filename(card_id: str, extension: str) -> str:
    """다운로드 파일명: visiting-card-<id>.<ext>"""
    return f"{OUTPUT_FILENAME_PREFIX}{card_id}.{extension}"


# =============================================================================
# HTTP
# =============================================================================

CARD_URL_HEADER = "X-Card-Url"
CARD_PATH_PREFIX = "/card"

# =============================================================================
# MIME Types
# =============================================================================

MIME_SVG = "image/svg+xml; charset=utf-8"
MIME_PDF = "application/pdf"
MIME_PNG = "image/png"
MIME_VCARD = "text/vcard; charset=utf-8"

# =============================================================================
# Output Formats
# =============================================================================

OUTPUT_FORMAT_SVG = "svg"
OUTPUT_FORMAT_PDF = "pdf"
OUTPUT_FORMATS = (OUTPUT_FORMAT_SVG, OUTPUT_FORMAT_PDF)

# =============================================================================
# Branding
# =============================================================================

BRAND_NAME = "ACME CO"
BRAND_TITLE = "Virtual Visiting Card"
DEFAULT_ORGANIZATION = "Acme Co"
QR_CAPTION = "Scan QR to open hosted digital card"
ID_LABEL = "CARD ID"

# =============================================================================
# Palette
# =============================================================================

COLOR_PRIMARY = "#F37021"
COLOR_PRIMARY_DARK = "#D2401A"
COLOR_ACCENT = "#FBD644"
COLOR_LABEL = "#942864"
COLOR_TEXT = "#3B475B"
COLOR_MUTED = "#6D6D71"
COLOR_BORDER = "#DADAD9"
COLOR_URL_BG = "#FDE7DD"
COLOR_WHITE = "#FFFFFF"

# =============================================================================
# Card Geometry (pt / px, 동일 좌표계)
# =============================================================================
# 420 x 250 가로형 명함. 좌표 원점은 좌상단 (PDF 렌더러에서 뒤집음)

CARD_WIDTH = 420
CARD_HEIGHT = 250
CARD_FRAME_INSET = 12
CARD_CORNER_RADIUS = 16
CARD_HEADER_HEIGHT = 64
CARD_QR_SIZE = 102

# =============================================================================
# QR
# =============================================================================

QR_PNG_SIZE = 300  # /card/<id>/qr.png
QR_EMBED_SIZE = 280  # 카드 아티팩트에 삽입되는 QR
QR_BORDER = 1
