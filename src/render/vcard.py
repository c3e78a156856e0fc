"""
vCard 인코더 (vCard 3.0).

필드 순서 고정:
    BEGIN → VERSION → FN → N → TITLE → ORG → NOTE → URL → END

- 줄 끝은 항상 CRLF
- 텍스트 값은 \\ ; , 개행만 이스케이프 (이름/직함은 이미 정규화된 평문)
"""

from src.domain.constants import DEFAULT_ORGANIZATION
from src.domain.schemas import CardRecord

CRLF = "\r\n"


def encode_vcard(
    record: CardRecord,
    public_url: str,
    organization: str = DEFAULT_ORGANIZATION,
) -> str:
    """
    카드 레코드 → vCard 텍스트.

    Args:
        record: 카드 레코드
        public_url: 카드 공개 URL
        organization: ORG 필드 값

    Returns:
        BEGIN:VCARD ... END:VCARD (CRLF 종료)
    """
    lines = [
        "BEGIN:VCARD",
        "VERSION:3.0",
        f"FN:{_escape(record.full_name)}",
        f"N:{_escape(record.last_name)};{_escape(record.first_name)};;;",
        f"TITLE:{_escape(record.designation)}",
        f"ORG:{_escape(organization)}",
        f"NOTE:{_escape(f'Card ID: {record.id}')}",
        # URL은 uri 타입이라 이스케이프하지 않음
        f"URL:{public_url}",
        "END:VCARD",
    ]
    return CRLF.join(lines) + CRLF


def _escape(value: str) -> str:
    """vCard text 값 이스케이프."""
    return (
        value.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\r\n", "\\n")
        .replace("\n", "\\n")
    )
