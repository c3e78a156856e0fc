"""
Pytest fixtures for the card service tests.

테스트 구성:
- 저장소/서비스 단위 fixture
- 출력 형식별(svg/pdf) 앱 + TestClient
"""

from collections.abc import Generator
from pathlib import Path

import pytest
import yaml
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.app.main import create_app
from src.app.services.cards import CardService
from src.core.store import InMemoryCardStore
from src.domain.schemas import CardRecord

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """default.yaml 경로."""
    return project_root / "default.yaml"


@pytest.fixture
def default_config(default_config_path: Path) -> dict:
    """기본 설정 로드."""
    with open(default_config_path, encoding="utf-8") as f:
        return yaml.safe_load(f)


# =============================================================================
# Card Fixtures
# =============================================================================

@pytest.fixture
def sample_record() -> CardRecord:
    """정상 카드 레코드."""
    return CardRecord(
        id="1b4e28ba-2fa1-4d2b-883f-0016d3cca427",
        first_name="Anu",
        last_name="Raj",
        designation="Engineer",
        created_at="2024-01-15T09:00:00+00:00",
    )


@pytest.fixture
def sample_url(sample_record: CardRecord) -> str:
    """sample_record의 공개 URL."""
    return f"http://testserver/card/{sample_record.id}"


@pytest.fixture
def store() -> InMemoryCardStore:
    return InMemoryCardStore()


@pytest.fixture
def card_service(store: InMemoryCardStore) -> CardService:
    return CardService(store)


# =============================================================================
# Config Fixtures
# =============================================================================

@pytest.fixture
def test_config() -> dict:
    """테스트용 설정 (SVG 기본)."""
    return {
        "card": {"output_format": "svg", "organization": "Acme Co"},
        "server": {"public_base_url": None, "allowed_hosts": []},
        "qr": {"png_size": 300, "embed_size": 280, "border": 1},
        "logging": {"level": "WARNING"},
    }


@pytest.fixture
def pdf_config(test_config: dict) -> dict:
    """PDF 출력 설정."""
    return {**test_config, "card": {"output_format": "pdf", "organization": "Acme Co"}}


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def app(test_config: dict, store: InMemoryCardStore) -> FastAPI:
    """SVG 출력 앱 (테스트마다 새 저장소)."""
    return create_app(config=test_config, store=store)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """FastAPI TestClient."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def pdf_client(pdf_config: dict) -> Generator[TestClient, None, None]:
    """PDF 출력 앱 TestClient."""
    with TestClient(create_app(config=pdf_config)) as client:
        yield client


@pytest.fixture
def form_data() -> dict[str, str]:
    """정상 폼 입력."""
    return {"firstName": "Anu", "lastName": "Raj", "designation": "Engineer"}
