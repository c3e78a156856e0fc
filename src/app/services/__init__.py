"""
Application Services.

역할:
- validate: 폼 입력 정규화 + 필수값 검증
- cards: 카드 생성/조회 (저장소 위임)
"""

from .cards import CardService
from .validate import ValidationResult, normalize_text, validate_card_fields

__all__ = [
    "CardService",
    "ValidationResult",
    "normalize_text",
    "validate_card_fields",
]
