from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from keyprompt.models import ApiConfig

logger = logging.getLogger(__name__)

SETTINGS_KEY = "api-config"


class ApiConfigStore:
    """Provider settings saved as one JSON document under a single settings key."""

    def __init__(self, path: str | None = None):
        self.path = Path(path or os.getenv("API_CONFIG_PATH", f"data/{SETTINGS_KEY}.json"))

    def load(self) -> ApiConfig:
        """
        Load saved settings. Returns defaults if the file is missing or invalid.
        """
        try:
            if not self.path.exists():
                return ApiConfig()

            data = json.loads(self.path.read_text(encoding="utf-8"))
            return ApiConfig.model_validate(data)
        except Exception as e:
            logger.warning(f"Failed to parse saved API config: {e}")
            return ApiConfig()

    def save(self, config: ApiConfig) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(config.model_dump(by_alias=True), ensure_ascii=False, indent=2),
            encoding="utf-8",
        )

    def update(self, current: ApiConfig, changes: Dict[str, Any]) -> ApiConfig:
        """Merge a partial update into `current`, save it and return the result."""
        merged = {**current.model_dump(by_alias=True), **changes}
        updated = ApiConfig.model_validate(merged)
        self.save(updated)
        return updated
