"""
설정 로드: default.yaml (+ CARD_CONFIG 환경 변수).

우선순위:
1. create_app(config=...)로 직접 전달한 dict
2. CARD_CONFIG가 가리키는 YAML
3. 프로젝트 루트 default.yaml
4. 코드 기본값
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from src.domain.constants import (
    DEFAULT_ORGANIZATION,
    OUTPUT_FORMAT_SVG,
    OUTPUT_FORMATS,
    QR_BORDER,
    QR_EMBED_SIZE,
    QR_PNG_SIZE,
)

PROJECT_ROOT = Path(__file__).parent.parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "default.yaml"
CONFIG_ENV_VAR = "CARD_CONFIG"


def load_config(config_path: Path | None = None) -> dict:
    """설정 파일 로드. 파일이 없으면 빈 dict."""
    if config_path is None:
        env_path = os.getenv(CONFIG_ENV_VAR)
        config_path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] | None = yaml.safe_load(f)
        return data or {}


@dataclass
class Settings:
    """앱 설정 (dict → 타입 있는 값)."""
    output_format: str = OUTPUT_FORMAT_SVG
    organization: str = DEFAULT_ORGANIZATION
    public_base_url: str | None = None
    allowed_hosts: list[str] = field(default_factory=list)
    qr_png_size: int = QR_PNG_SIZE
    qr_embed_size: int = QR_EMBED_SIZE
    qr_border: int = QR_BORDER
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "Settings":
        """
        설정 dict → Settings.

        Raises:
            ValueError: card.output_format이 svg/pdf가 아님
        """
        card = config.get("card") or {}
        server = config.get("server") or {}
        qr = config.get("qr") or {}
        logging_cfg = config.get("logging") or {}

        output_format = str(card.get("output_format", OUTPUT_FORMAT_SVG)).strip().lower()
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"card.output_format must be one of {OUTPUT_FORMATS}, got {output_format!r}"
            )

        base_url = server.get("public_base_url") or None
        if base_url:
            base_url = str(base_url).rstrip("/")

        return cls(
            output_format=output_format,
            organization=str(card.get("organization", DEFAULT_ORGANIZATION)),
            public_base_url=base_url,
            allowed_hosts=[str(h) for h in (server.get("allowed_hosts") or [])],
            qr_png_size=int(qr.get("png_size", QR_PNG_SIZE)),
            qr_embed_size=int(qr.get("embed_size", QR_EMBED_SIZE)),
            qr_border=int(qr.get("border", QR_BORDER)),
            log_level=str(logging_cfg.get("level", "INFO")),
        )
