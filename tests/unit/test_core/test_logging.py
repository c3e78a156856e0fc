"""
test_logging.py - 로깅 설정 테스트
"""

import logging

from src.core.logging import _resolve_level, configure_logging


class TestResolveLevel:
    """레벨 이름 → 숫자 변환."""

    def test_name(self):
        assert _resolve_level("DEBUG") == logging.DEBUG
        assert _resolve_level("warning") == logging.WARNING

    def test_int_passthrough(self):
        assert _resolve_level(logging.ERROR) == logging.ERROR

    def test_unknown_falls_back_to_info(self):
        assert _resolve_level("LOUD") == logging.INFO


class TestConfigureLogging:
    """configure_logging 함수 테스트."""

    def test_sets_package_level(self):
        configure_logging("ERROR")

        assert logging.getLogger("src").level == logging.ERROR

    def test_repeated_calls_do_not_stack_handlers(self):
        """여러 번 호출해도 루트 handler 수 증가 없음."""
        configure_logging("INFO")
        before = len(logging.getLogger().handlers)

        configure_logging("DEBUG")
        configure_logging("WARNING")

        assert len(logging.getLogger().handlers) == before
