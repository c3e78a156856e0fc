"""
Card Service: 카드 생성/조회 (createCard / getCard).

규칙:
- 생성: 정규화 → 검증 → id 발급 → 레코드 조립 → 저장소에 한 번에 insert
- 반환되는 id는 저장소에 없던 값 (insert 실패 시 새 id로 재발급)
- 조회: 부수효과 없음, 없으면 CardNotFoundError (HTTP 404로 변환)
- 수정/삭제 없음
"""

import logging
from collections.abc import Callable

from src.app.services.validate import require_valid_fields
from src.core.ids import generate_card_id, utc_timestamp
from src.core.store import CardStore
from src.domain.errors import CardError, CardNotFoundError, ErrorCodes
from src.domain.schemas import CardRecord

logger = logging.getLogger(__name__)

# UUID4 충돌은 사실상 없음. 주입된 id 생성기가 고장난 경우만 막기 위한 상한
MAX_ID_ATTEMPTS = 5


class CardService:
    """
    카드 레코드 생성/조회.

    Usage:
        service = CardService(InMemoryCardStore())
        record = service.create_card("Anu", "Raj", "Engineer")
        same = service.get_card(record.id)
    """

    def __init__(
        self,
        store: CardStore,
        id_factory: Callable[[], str] = generate_card_id,
    ):
        self.store = store
        self._id_factory = id_factory

    def create_card(self, first_name: str, last_name: str, designation: str) -> CardRecord:
        """
        카드 생성 + 저장.

        Raises:
            CardValidationError: 정규화 후 빈 필드 존재
            CardError: CARD_ID_COLLISION (id 생성기 이상)
        """
        fields = require_valid_fields({
            "firstName": first_name,
            "lastName": last_name,
            "designation": designation,
        })
        created_at = utc_timestamp()

        for _ in range(MAX_ID_ATTEMPTS):
            record = CardRecord(
                id=self._id_factory(),
                first_name=fields.first_name,
                last_name=fields.last_name,
                designation=fields.designation,
                created_at=created_at,
            )
            if self.store.insert(record):
                logger.info(f"card_created id={record.id}")
                logger.debug(f"card_record {record.to_dict()}")
                return record

        raise CardError(ErrorCodes.CARD_ID_COLLISION, attempts=MAX_ID_ATTEMPTS)

    def get_card(self, card_id: str) -> CardRecord:
        """
        카드 조회.

        Raises:
            CardNotFoundError: 저장소에 없음
        """
        record = self.store.get(card_id)
        if record is None:
            raise CardNotFoundError(card_id)
        return record
