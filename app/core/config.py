from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    ENVIRONMENT: str = "development"

    DATABASE_URL: str = "sqlite:///./app.db"
    PROJECT_NAME: str = "Quiz & Chat Backend"
    API_PREFIX: str = "/api"
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # Session cookie
    SESSION_COOKIE_NAME: str = "auth_session"
    SESSION_TTL_DAYS: int = 30
    SESSION_COOKIE_SECURE: bool = False
    BCRYPT_ROUNDS: int = 12

    # OpenAI-compatible chat completions endpoint
    LLM_BASE_URL: str = "https://api.openai.com/v1/chat/completions"
    LLM_MODEL: str = "gpt-4o-mini"
    LLM_API_KEY: str = ""
    LLM_TIMEOUT_SECONDS: float = 60.0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


settings = Settings()
