"""
Error definitions for the card service.

규칙:
- 조용한 실패 금지 → CardError 계열로 명시적 실패
- 렌더링 실패는 재시도 없이 그대로 전파 (HTTP 500)
- 사용자에게는 내부 상세를 노출하지 않음 (로그에만 기록)
"""

from typing import Any


class CardError(Exception):
    """
    카드 서비스 공통 에러.

    Usage:
        raise CardError("RENDER_FAILED", card_id=card.id, error=str(e))
    """

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {ctx_str}" if ctx_str else f"[{self.code}]"

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            **self.context,
        }


class CardValidationError(CardError):
    """
    폼 입력 검증 실패.

    errors: 사용자에게 보여줄 메시지 목록
    fields: 정규화된 입력값 (폼 재표시용)
    """

    def __init__(self, errors: list[str], fields: Any = None) -> None:
        self.errors = errors
        self.fields = fields
        super().__init__(ErrorCodes.VALIDATION_FAILED, errors=errors)


class CardNotFoundError(CardError):
    """요청한 card_id가 저장소에 없음 → 404."""

    def __init__(self, card_id: str) -> None:
        self.card_id = card_id
        super().__init__(ErrorCodes.CARD_NOT_FOUND, card_id=card_id)


class CardRenderError(CardError):
    """QR/문서 생성 실패 → 500 (재시도 없음)."""


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Intake ===
    VALIDATION_FAILED = "VALIDATION_FAILED"

    # === Store ===
    CARD_NOT_FOUND = "CARD_NOT_FOUND"
    CARD_ID_COLLISION = "CARD_ID_COLLISION"

    # === Render ===
    RENDER_FAILED = "RENDER_FAILED"
    QR_ENCODE_FAILED = "QR_ENCODE_FAILED"
