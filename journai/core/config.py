import os
from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    APP_NAME: str = "JournAI Insights"
    ENV: str = os.getenv("ENV", "development")

    # Database
    DB_URL: str = os.getenv("DB_URL", "sqlite:///./journai.db")
    DB_ECHO: bool = os.getenv("DB_ECHO", "0") in ("1", "true", "True")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Insights
    INSIGHT_TREND_LIMIT: int = int(os.getenv("INSIGHT_TREND_LIMIT", "30"))
    DEFAULT_TIME_RANGE: str = os.getenv("DEFAULT_TIME_RANGE", "month")

    # Title generation for entries saved without one
    TITLE_MAX_WORDS: int = 8
    TITLE_MAX_LENGTH: int = 50

    # Pydantic v2 settings config
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    @property
    def DATABASE_URL(self) -> str:
        return self.DB_URL


settings = Settings()
