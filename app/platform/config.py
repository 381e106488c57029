from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── App ─────────────────────────────────────
    APP_NAME: str = "Webpage Analyse API"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    DEBUG: bool = True
    API_V1_PREFIX: str = "/api/v1"

    # ── Database ────────────────────────────────
    DATABASE_URL: str = "sqlite+aiosqlite:///./webpage_analyse.db"
    # create missing tables at startup; set false where alembic manages the schema
    DB_AUTO_CREATE: bool = True

    # ── File store ──────────────────────────────
    UPLOAD_DIR: str = "static/uploads/webpages"

    # ── Upload limits ───────────────────────────
    MAX_EMAIL_LENGTH: int = 100
    MAX_NAME_LENGTH: int = 100
    MAX_URL_LENGTH: int = 2000
    MAX_HTML_FILE_SIZE: int = 2 * 1024 * 1024  # 2MB
    MAX_SPECIFICATION_FILE_SIZE: int = 2 * 1024 * 1024  # 2MB
    MAX_DESIGN_FILE_SIZE: int = 5 * 1024 * 1024  # 5MB

    # ── Analyzers ───────────────────────────────
    ACCESSIBILITY_API_URL: str = "http://localhost:8001"
    ACCESSIBILITY_TIMEOUT_SECONDS: float = 30.0

    PAGESPEED_API_URL: str = "https://www.googleapis.com/pagespeedonline/v5/runPagespeed"
    PAGESPEED_API_KEY: Optional[str] = None
    PERFORMANCE_TIMEOUT_SECONDS: float = 60.0

    NU_VALIDATOR_URL: str = "https://validator.w3.org/nu/"
    VALIDATION_TIMEOUT_SECONDS: float = 30.0

    LLM_API_URL: str = "http://localhost:8000"
    LLM_TIMEOUT_SECONDS: float = 120.0

    # Upper bound for the whole analyzer fan-out; slower analyzers count as failed
    ANALYSIS_FANOUT_TIMEOUT_SECONDS: float = 90.0

    URL_FETCH_TIMEOUT_SECONDS: float = 15.0

    class Config:
        env_file = str(Path(__file__).parent.parent.parent / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


settings = Settings()
