"""
Data schemas for the card service.

규칙:
- CardRecord는 생성 후 불변 (frozen)
- 이름/직함은 정규화된 값만 저장 (앞뒤 공백 제거, 연속 공백 → 단일 공백)
"""

from dataclasses import dataclass
from typing import Any

# =============================================================================
# Card Schemas
# =============================================================================


@dataclass
class CardFields:
    """정규화된 폼 입력값."""
    first_name: str = ""
    last_name: str = ""
    designation: str = ""

    def to_form_values(self) -> dict[str, str]:
        """폼 재표시용 (HTML input name 기준)."""
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "designation": self.designation,
        }


@dataclass(frozen=True)
class CardRecord:
    """
    저장된 명함 레코드.

    - id: UUID4 문자열 (공개 조회 키, 카드에 표시됨)
    - created_at: 생성 시각 (ISO-8601 UTC). 만료 로직 없음
    """
    id: str
    first_name: str
    last_name: str
    designation: str
    created_at: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화용."""
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "designation": self.designation,
            "created_at": self.created_at,
        }
