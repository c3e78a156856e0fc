"""
PDF 폰트: 등록 + 글자별 폴백.

- 기본: DejaVu Sans TTF (패키지 동봉, 서브셋 임베드) → 라틴/키릴/그리스 등
- DejaVu에 없는 글자: ReportLab 내장 CID 폰트
  (한글 HYGothic-Medium, 가나 HeiseiKakuGo-W5, 그 외 한자 STSong-Light)
- 문자열을 폰트별 run으로 나눠서 폭 계산/그리기
"""

from pathlib import Path

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.cidfonts import UnicodeCIDFont
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

FONTS_DIR = Path(__file__).parent / "fonts"

FONT_REGULAR = "CardSans"
FONT_BOLD = "CardSans-Bold"

CID_HANGUL = "HYGothic-Medium"
CID_KANA = "HeiseiKakuGo-W5"
CID_HAN = "STSong-Light"

_TTF_FILES = {
    FONT_REGULAR: "DejaVuSans.ttf",
    FONT_BOLD: "DejaVuSans-Bold.ttf",
}

_HANGUL_RANGES = ((0x1100, 0x11FF), (0x3130, 0x318F), (0xA960, 0xA97F), (0xAC00, 0xD7FF))
_KANA_RANGES = ((0x3040, 0x30FF), (0x31F0, 0x31FF), (0xFF66, 0xFF9F))

_registered = False


def register_fonts() -> None:
    """
    카드용 폰트 등록 (프로세스당 한 번).

    Raises:
        TTFError / OSError: 동봉 TTF 누락 또는 손상
    """
    global _registered

    if _registered:
        return
    for name, filename in _TTF_FILES.items():
        pdfmetrics.registerFont(TTFont(name, str(FONTS_DIR / filename)))
    for face in (CID_HANGUL, CID_KANA, CID_HAN):
        pdfmetrics.registerFont(UnicodeCIDFont(face))
    _registered = True


def _in_ranges(code: int, ranges: tuple[tuple[int, int], ...]) -> bool:
    return any(start <= code <= end for start, end in ranges)


def fallback_font(char: str) -> str:
    """기본 폰트에 없는 글자 → CID 폰트 이름."""
    code = ord(char)
    if _in_ranges(code, _HANGUL_RANGES):
        return CID_HANGUL
    if _in_ranges(code, _KANA_RANGES):
        return CID_KANA
    return CID_HAN


def font_runs(text: str, font: str) -> list[tuple[str, str]]:
    """
    문자열 → [(폰트 이름, 연속 구간), ...].

    TTF가 아닌 폰트(표준 Type1 등)는 나누지 않음.
    """
    glyphs = getattr(pdfmetrics.getFont(font).face, "charToGlyph", None)
    if not glyphs:
        return [(font, text)] if text else []

    runs: list[tuple[str, str]] = []
    for char in text:
        name = font if ord(char) in glyphs else fallback_font(char)
        if runs and runs[-1][0] == name:
            runs[-1] = (name, runs[-1][1] + char)
        else:
            runs.append((name, char))
    return runs


def text_width(text: str, font: str, size: float) -> float:
    return sum(pdfmetrics.stringWidth(run, name, size) for name, run in font_runs(text, font))


def draw_text(c: canvas.Canvas, x: float, y: float, text: str, font: str, size: float) -> None:
    """폰트 run마다 setFont + drawString, x는 run 폭만큼 전진."""
    for name, run in font_runs(text, font):
        c.setFont(name, size)
        c.drawString(x, y, run)
        x += pdfmetrics.stringWidth(run, name, size)
