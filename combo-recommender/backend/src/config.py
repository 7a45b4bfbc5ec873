from __future__ import annotations

import os
from typing import Any, Optional

from pydantic import BaseModel, Field


class Configuration(BaseModel):
    # Catalog
    catalog_path: Optional[str] = Field(default=None)
    default_college: Optional[str] = Field(default=None)

    # Search
    walking_speed_mph: float = Field(default=3.0, gt=0)
    max_results: int = Field(default=20, ge=1)
    include_report: bool = Field(default=True)

    # Logging
    log_level: str = Field(default="INFO")

    @classmethod
    def from_env(cls, overrides: Optional[dict[str, Any]] = None) -> "Configuration":
        raw: dict[str, Any] = {}

        env_map = {
            "catalog_path": os.getenv("CATALOG_PATH"),
            "default_college": os.getenv("DEFAULT_COLLEGE"),
            "walking_speed_mph": os.getenv("WALKING_SPEED_MPH"),
            "max_results": os.getenv("MAX_RESULTS"),
            "include_report": os.getenv("INCLUDE_REPORT"),
            "log_level": os.getenv("LOG_LEVEL"),
        }

        bool_fields = {"include_report"}

        for k, v in env_map.items():
            if v is None:
                continue
            if k in bool_fields:
                raw[k] = str(v).lower() in {"1", "true", "yes", "on"}
            else:
                raw[k] = v

        if overrides:
            raw.update({k: v for k, v in overrides.items() if v is not None})

        return cls(**raw)

    def log_summary(self) -> str:
        return "catalog=%s walking_speed_mph=%.1f max_results=%d include_report=%s log_level=%s" % (
            self.catalog_path or "bundled",
            self.walking_speed_mph,
            self.max_results,
            self.include_report,
            self.log_level,
        )
