"""
Card Store: 카드 레코드 저장소.

규칙:
- 저장소가 모든 레코드를 소유 (다른 컴포넌트는 요청 동안만 참조)
- 기존 id는 절대 덮어쓰지 않음 → insert()가 False 반환
- 레코드는 완성된 불변 객체로 한 번에 publish (부분 생성 상태 노출 없음)
- 영속성 없음: 프로세스 재시작 시 전부 사라짐

CardStore 프로토콜만 맞추면 영속 백엔드로 교체 가능 (호출부 수정 불필요).
"""

import logging
from typing import Protocol

from src.domain.schemas import CardRecord

logger = logging.getLogger(__name__)


class CardStore(Protocol):
    """카드 저장소 인터페이스."""

    def insert(self, record: CardRecord) -> bool:
        """레코드 저장. 이미 같은 id가 있으면 False (덮어쓰지 않음)."""
        ...

    def get(self, card_id: str) -> CardRecord | None:
        """id로 조회. 없으면 None."""
        ...

    def clear(self) -> None:
        """전체 삭제 (재시작 시뮬레이션)."""
        ...

    def __len__(self) -> int:
        ...

    def __contains__(self, card_id: object) -> bool:
        ...


class InMemoryCardStore:
    """
    dict 기반 인메모리 저장소.

    asyncio 단일 이벤트 루프에서 접근하므로 락 없음.
    insert는 dict 할당 한 번 → 원자적 publish.
    """

    def __init__(self) -> None:
        self._cards: dict[str, CardRecord] = {}

    def insert(self, record: CardRecord) -> bool:
        if record.id in self._cards:
            logger.warning(f"Refusing to overwrite existing card id {record.id}")
            return False
        self._cards[record.id] = record
        return True

    def get(self, card_id: str) -> CardRecord | None:
        return self._cards.get(card_id)

    def clear(self) -> None:
        self._cards.clear()

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card_id: object) -> bool:
        return card_id in self._cards
