from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_ROOT = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore'
    )

    APP_NAME: str = "CareerPath"
    APP_ENV: str = "dev"
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # SQLite connection string (read from .env)
    DATABASE_URL: str = "sqlite:///./careerpath.db"

    BACKEND_CORS_ORIGINS: str = "http://localhost:4000"

    # Base of the shareable profile card links
    PUBLIC_BASE_URL: str = "http://localhost:4000"

    CATALOG_PATH: Path = PACKAGE_ROOT / "data" / "certifications.json"
    RECOMMEND_TOP_N: int = 5

    HTTP_TIMEOUT_SECONDS: float = 15.0
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_TOKEN: str | None = None

    GEMINI_API_KEY: str | None = None
    GEMINI_MODEL: str = "gemini-1.5-flash"
    AI_MAX_TOKENS: int = 400
    AI_TEMPERATURE: float = 0.3

settings = Settings()
