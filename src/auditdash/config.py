"""Application configuration via environment variables."""

from pathlib import Path

from pydantic_settings import BaseSettings

PACKAGE_STATIC_DIR = Path(__file__).resolve().parent / "static"


class Settings(BaseSettings):
    # Report store: one sub-directory per YYYY-MM-DD audit day
    data_dir: Path = Path("data")

    # SPA shell and assets
    static_dir: Path = PACKAGE_STATIC_DIR

    # CORS
    cors_allowed_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "info"
    json_logs: bool = True

    # Build metadata surfaced by /health and /api/version
    build_date: str | None = None

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "AUDITDASH_",
    }


settings = Settings()
