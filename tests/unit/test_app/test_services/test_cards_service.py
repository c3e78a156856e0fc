"""
test_cards_service.py - CardService 테스트

DoD:
- create_card: 정규화된 레코드 저장, 매번 새 id
- id 충돌 시 재발급 (기존 레코드 덮어쓰기 없음)
- get_card: 없으면 CardNotFoundError
"""

import logging

import pytest

from src.app.services.cards import MAX_ID_ATTEMPTS, CardService
from src.core.store import InMemoryCardStore
from src.domain.errors import CardError, CardNotFoundError, CardValidationError, ErrorCodes

# =============================================================================
# create_card 테스트
# =============================================================================


class TestCreateCard:
    """CardService.create_card 테스트."""

    def test_creates_and_stores(self, card_service: CardService, store: InMemoryCardStore):
        record = card_service.create_card("Anu", "Raj", "Engineer")

        assert record.id
        assert store.get(record.id) == record
        assert record.full_name == "Anu Raj"

    def test_normalizes_inputs(self, card_service: CardService):
        record = card_service.create_card("  Anu ", "Raj\t", " Senior   Engineer ")

        assert record.first_name == "Anu"
        assert record.last_name == "Raj"
        assert record.designation == "Senior Engineer"

    def test_ids_never_repeat(self, card_service: CardService, store: InMemoryCardStore):
        ids = {card_service.create_card("Anu", "Raj", "Engineer").id for _ in range(500)}

        assert len(ids) == 500
        assert len(store) == 500

    def test_created_at_recorded(self, card_service: CardService):
        record = card_service.create_card("Anu", "Raj", "Engineer")

        assert record.created_at

    def test_logs_created_record(self, card_service: CardService, caplog):
        with caplog.at_level(logging.DEBUG, logger="src.app.services.cards"):
            record = card_service.create_card("Anu", "Raj", "Engineer")

        assert f"card_created id={record.id}" in caplog.text
        assert str(record.to_dict()) in caplog.text
        assert "'designation': 'Engineer'" in caplog.text

    def test_rejects_empty_field(self, card_service: CardService, store: InMemoryCardStore):
        with pytest.raises(CardValidationError):
            card_service.create_card("Anu", "   ", "Engineer")

        assert len(store) == 0

    def test_collision_retries_with_new_id(self, store: InMemoryCardStore):
        """id 생성기가 기존 id를 돌려줘도 새 id로 재시도."""
        ids = iter(["dup", "dup", "fresh"])
        service = CardService(store, id_factory=lambda: next(ids))

        first = service.create_card("Anu", "Raj", "Engineer")
        second = service.create_card("Arun", "K", "Designer")

        assert first.id == "dup"
        assert second.id == "fresh"
        assert store.get("dup").first_name == "Anu"

    def test_collision_gives_up(self, store: InMemoryCardStore):
        """id 생성기가 계속 같은 값 → 상한 도달 후 실패."""
        service = CardService(store, id_factory=lambda: "dup")
        service.create_card("Anu", "Raj", "Engineer")

        with pytest.raises(CardError) as exc_info:
            service.create_card("Arun", "K", "Designer")

        assert exc_info.value.code == ErrorCodes.CARD_ID_COLLISION
        assert exc_info.value.context["attempts"] == MAX_ID_ATTEMPTS


# =============================================================================
# get_card 테스트
# =============================================================================


class TestGetCard:
    """CardService.get_card 테스트."""

    def test_returns_record(self, card_service: CardService):
        record = card_service.create_card("Anu", "Raj", "Engineer")

        assert card_service.get_card(record.id) == record

    def test_missing_raises(self, card_service: CardService):
        with pytest.raises(CardNotFoundError) as exc_info:
            card_service.get_card("missing-id")

        assert exc_info.value.card_id == "missing-id"
        assert exc_info.value.code == ErrorCodes.CARD_NOT_FOUND

    def test_missing_after_clear(self, card_service: CardService, store: InMemoryCardStore):
        """재시작(저장소 비움) 후 기존 id는 조회 불가."""
        record = card_service.create_card("Anu", "Raj", "Engineer")
        store.clear()

        with pytest.raises(CardNotFoundError):
            card_service.get_card(record.id)
