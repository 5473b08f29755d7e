"""Configuration model for flashdeck."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

from flashdeck.engine.selection import Order, StudyMode

DEFAULT_DATA_DIR = Path.home() / ".flashdeck"


class Settings(BaseModel):
    source: str = "way.csv"
    fetch_timeout_seconds: float = 10.0
    default_mode: StudyMode = StudyMode.FLASHCARD
    default_order: Order = Order.RANDOM
    limit_choices: list[int] = Field(default_factory=lambda: [10, 20, 50])
    log_level: str = "WARNING"
    data_dir: Path = Field(default_factory=lambda: DEFAULT_DATA_DIR)

    def get_source(self) -> str:
        return os.environ.get("FLASHDECK_SOURCE") or self.source

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        # Same file save() writes for the default data_dir
        config_path = config_path or (DEFAULT_DATA_DIR / "config.yaml")
        if config_path.exists():
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            return cls(**data)
        return cls()

    def save(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        config_path = self.data_dir / "config.yaml"
        with open(config_path, "w", encoding="utf-8") as f:
            yaml.dump(self.model_dump(mode="json"), f, default_flow_style=False, allow_unicode=True)
