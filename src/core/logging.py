"""
Logging 설정.

- 표준 logging 모듈, 모듈별 logger (logging.getLogger(__name__))
- 앱 시작 시 configure_logging() 한 번 호출
- 렌더링 실패 등 상세 내용은 서버 로그에만 남김 (응답에는 노출 금지)
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging(level: str | int = "INFO") -> None:
    """
    루트 logger 설정.

    여러 번 호출돼도 handler는 한 번만 추가 (테스트에서 create_app 반복 호출).

    Args:
        level: 로그 레벨 이름 또는 숫자 (예: "INFO", logging.DEBUG)
    """
    global _configured

    resolved = _resolve_level(level)
    if not _configured:
        logging.basicConfig(level=resolved, format=LOG_FORMAT)
        _configured = True
    logging.getLogger("src").setLevel(resolved)


def _resolve_level(level: str | int) -> int:
    """레벨 문자열 → 숫자. 알 수 없는 값은 INFO."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO
