"""
test_pdf.py - PDF 카드 렌더러 테스트

테스트 대상:
- %PDF 시그니처, 단일 페이지, 420x250pt
- 텍스트 포함 (pypdf로 추출)
- 결정론 (invariant 모드)
- 긴 값 말줄임
- 비라틴 이름 (키릴/한글/터키어) 텍스트 추출
"""

import dataclasses
import io
from unittest.mock import patch

import pytest
from pypdf import PdfReader

from src.domain.constants import BRAND_TITLE, CARD_HEIGHT, CARD_WIDTH, ID_LABEL, MIME_PDF
from src.domain.errors import CardRenderError, ErrorCodes
from src.render.fonts import FONT_REGULAR, register_fonts
from src.render.pdf import PdfCardRenderer, _ellipsize


@pytest.fixture
def renderer() -> PdfCardRenderer:
    return PdfCardRenderer()


def _extract_text(pdf: bytes) -> str:
    reader = PdfReader(io.BytesIO(pdf))
    return "\n".join(page.extract_text() or "" for page in reader.pages)


class TestPdfRender:
    """PdfCardRenderer.render 테스트."""

    def test_media_type_and_extension(self, renderer: PdfCardRenderer):
        assert renderer.media_type == MIME_PDF
        assert renderer.extension == "pdf"

    def test_pdf_signature(self, renderer, sample_record, sample_url):
        pdf = renderer.render(sample_record, sample_url)

        assert pdf.startswith(b"%PDF")

    def test_single_card_sized_page(self, renderer, sample_record, sample_url):
        reader = PdfReader(io.BytesIO(renderer.render(sample_record, sample_url)))

        assert len(reader.pages) == 1
        box = reader.pages[0].mediabox
        assert float(box.width) == CARD_WIDTH
        assert float(box.height) == CARD_HEIGHT

    def test_contains_card_text(self, renderer, sample_record, sample_url):
        text = _extract_text(renderer.render(sample_record, sample_url))

        assert BRAND_TITLE in text
        assert "Anu Raj" in text
        assert "Engineer" in text
        assert ID_LABEL in text
        assert sample_record.id in text
        assert sample_url in text

    def test_embeds_qr_image(self, renderer, sample_record, sample_url):
        reader = PdfReader(io.BytesIO(renderer.render(sample_record, sample_url)))
        xobjects = reader.pages[0]["/Resources"]["/XObject"].get_object()

        assert len(xobjects) == 1

    def test_deterministic(self, renderer, sample_record, sample_url):
        """invariant 모드 → 같은 입력이면 같은 bytes."""
        assert renderer.render(sample_record, sample_url) == renderer.render(sample_record, sample_url)

    def test_long_name_still_renders(self, renderer, sample_record, sample_url):
        long_record = dataclasses.replace(sample_record, last_name="Raj" * 40)

        pdf = renderer.render(long_record, sample_url)

        assert pdf.startswith(b"%PDF")


class TestPdfUnicode:
    """라틴 외 문자도 카드에 그대로 표시."""

    def test_cyrillic_and_turkish(self, renderer, sample_record, sample_url):
        record = dataclasses.replace(
            sample_record, first_name="Анна", last_name="Петрова", designation="İnşaat Mühendisi"
        )

        text = _extract_text(renderer.render(record, sample_url))

        assert "Анна Петрова" in text
        assert "İnşaat Mühendisi" in text

    def test_hangul_name(self, renderer, sample_record, sample_url):
        record = dataclasses.replace(
            sample_record, first_name="민수", last_name="김", designation="엔지니어"
        )

        text = _extract_text(renderer.render(record, sample_url))

        assert "민수" in text
        assert "엔지니어" in text
        assert sample_record.id in text

    def test_mixed_script_deterministic(self, renderer, sample_record, sample_url):
        record = dataclasses.replace(sample_record, first_name="Анна", last_name="김민수")

        assert renderer.render(record, sample_url) == renderer.render(record, sample_url)


class TestPdfFailure:
    """실패 전파."""

    def test_qr_failure_propagates(self, renderer, sample_record, sample_url):
        with patch(
            "src.render.pdf.generate_qr_png",
            side_effect=CardRenderError(ErrorCodes.QR_ENCODE_FAILED, error="boom"),
        ):
            with pytest.raises(CardRenderError) as exc_info:
                renderer.render(sample_record, sample_url)

        assert exc_info.value.code == ErrorCodes.QR_ENCODE_FAILED

    def test_canvas_error_wrapped(self, renderer, sample_record, sample_url):
        with patch("src.render.pdf.canvas.Canvas.showPage", side_effect=OSError("disk")):
            with pytest.raises(CardRenderError) as exc_info:
                renderer.render(sample_record, sample_url)

        assert exc_info.value.code == ErrorCodes.RENDER_FAILED


class TestEllipsize:
    """_ellipsize 헬퍼."""

    @pytest.fixture(autouse=True)
    def _fonts(self):
        register_fonts()

    def test_short_value_unchanged(self):
        assert _ellipsize("Anu", FONT_REGULAR, 12, 200) == "Anu"

    def test_long_value_trimmed(self):
        result = _ellipsize("x" * 500, FONT_REGULAR, 12, 100)

        assert result.endswith("...")
        assert len(result) < 500
