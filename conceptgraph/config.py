from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ROOT = Path(__file__).resolve().parent.parent
_ENV_FILE = _ROOT / ".env"
_DATA_DIR = Path(__file__).resolve().parent / "data"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    CONCEPTS_PATH: str = str(_DATA_DIR / "concepts.json")
    CATEGORIES_PATH: str = str(_DATA_DIR / "categories.json")

    NEIGHBORHOOD_HOPS: int = 2
    MAX_NEIGHBORHOOD_HOPS: int = 10

    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]
    CORS_ORIGIN_REGEX: str | None = None


settings = Settings()
