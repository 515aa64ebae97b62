from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")


@dataclass(frozen=True)
class ServiceConfig:
    api_title: str = os.getenv("NAMES_API_TITLE", "Divine Names Recommendation API")
    api_version: str = "1.0.0"
    log_level: str = os.getenv("NAMES_LOG_LEVEL", "INFO").upper()
    batch_limit: int = int(os.getenv("NAMES_BATCH_LIMIT", "100"))


DEFAULT_SERVICE_CONFIG = ServiceConfig()
