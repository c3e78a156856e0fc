"""
Core layer: id 발급, 카드 저장소, 로깅 설정.

역할:
- card_id 발급 (UUID v4)
- CardStore 프로토콜 + 인메모리 구현
"""

from .ids import generate_card_id, utc_timestamp
from .logging import configure_logging
from .store import CardStore, InMemoryCardStore

__all__ = [
    # ids
    "generate_card_id",
    "utc_timestamp",
    # store
    "CardStore",
    "InMemoryCardStore",
    # logging
    "configure_logging",
]
