"""
ID 생성: card_id

규칙:
- card_id 수정 금지 (공개 링크/QR에 박혀 있음)
- 카운터 대신 UUID v4 → 동시 생성 시에도 락 없이 충돌 없음
"""

import uuid
from datetime import UTC, datetime


def generate_card_id() -> str:
    """
    Card ID 생성.

    고유성 보장: UUID v4 (122 random bits)
    포맷: 8-4-4-4-12 hex (예: 1b4e28ba-2fa1-4d2b-883f-0016d3cca427)

    Returns:
        card_id 문자열
    """
    return str(uuid.uuid4())


def utc_timestamp() -> str:
    """레코드 생성 시각 (ISO-8601 UTC)."""
    return datetime.now(UTC).isoformat()
