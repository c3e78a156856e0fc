"""
Validation Service: 명함 폼 입력 정규화 + 필수값 검증.

규칙:
- 정규화: 제어 문자 제거, 앞뒤 공백 제거, 연속 공백(탭/개행 포함) → 단일 공백
- firstName / lastName / designation 모두 필수 (정규화 후 비어 있으면 실패)
- 실패 시 필드별 메시지 목록 + 정규화된 입력값 반환 (폼 재표시용)
"""

import re
from dataclasses import dataclass, field
from typing import Any

from src.domain.errors import CardValidationError
from src.domain.schemas import CardFields

_WHITESPACE_RUN = re.compile(r"\s+")
# XML 1.0에 쓸 수 없는 문자 + DEL (공백류 제어 문자는 _WHITESPACE_RUN이 처리)
_XML_ILLEGAL = re.compile(r"[\x00-\x08\x0e-\x1b\x7f\ud800-\udfff\ufffe\uffff]")

# =============================================================================
# 필수 필드 정의 (폼 name, 속성명, 메시지)
# =============================================================================

REQUIRED_FIELDS: tuple[tuple[str, str, str], ...] = (
    ("firstName", "first_name", "First name is required."),
    ("lastName", "last_name", "Last name is required."),
    ("designation", "designation", "Designation is required."),
)


@dataclass
class ValidationResult:
    """검증 결과."""
    valid: bool
    fields: CardFields
    errors: list[str] = field(default_factory=list)
    missing_required: list[str] = field(default_factory=list)


def normalize_text(value: Any) -> str:
    """
    표시용 문자열 정규화.

    None → "", 그 외는 str() 후 제어 문자 제거 + 공백 정리.
    (SVG/XML에 그대로 들어가므로 XML에 쓸 수 없는 문자는 남기지 않음)
    """
    if value is None:
        return ""
    text = _XML_ILLEGAL.sub("", str(value))
    return _WHITESPACE_RUN.sub(" ", text).strip()


def validate_card_fields(data: dict[str, Any]) -> ValidationResult:
    """
    폼 입력 검증.

    Args:
        data: 폼 데이터 (firstName, lastName, designation 키)

    Returns:
        ValidationResult (valid=False면 errors/missing_required 채워짐)
    """
    fields = CardFields(
        first_name=normalize_text(data.get("firstName")),
        last_name=normalize_text(data.get("lastName")),
        designation=normalize_text(data.get("designation")),
    )

    errors: list[str] = []
    missing: list[str] = []
    for form_name, attr, message in REQUIRED_FIELDS:
        if not getattr(fields, attr):
            errors.append(message)
            missing.append(form_name)

    return ValidationResult(
        valid=not errors,
        fields=fields,
        errors=errors,
        missing_required=missing,
    )


def require_valid_fields(data: dict[str, Any]) -> CardFields:
    """
    검증 후 정규화된 필드 반환.

    Raises:
        CardValidationError: 필수값 누락
    """
    result = validate_card_fields(data)
    if not result.valid:
        raise CardValidationError(result.errors, fields=result.fields)
    return result.fields
