from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


PROJECT_ROOT = Path(__file__).resolve().parents[1]
ENV_FILES = [PROJECT_ROOT / ".env", ".env"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=ENV_FILES, extra="ignore")

    # App
    APP_ENV: str = "production"
    APP_HOST: str = "127.0.0.1"
    APP_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # Upstream completion API (OpenAI-compatible)
    GROQ_API_KEY: str | None = None
    GROQ_BASE_URL: str = "https://api.groq.com/openai/v1"
    GROQ_MODEL: str = "llama-3.3-70b-versatile"
    GROQ_TEMPERATURE: float = 0.7
    GROQ_MAX_TOKENS: int = 2000

    # Rate limiting
    RATE_LIMIT_WINDOW_SEC: int = 60
    RATE_LIMIT_MAX_REQUESTS: int = 10
    RATE_LIMIT_MAX_KEYS: int = 10000

    # Input limits
    MAX_INGREDIENTS: int = 50
    MAX_INGREDIENT_LENGTH: int = 100

    # Validate generated recipes against the Recipe schema
    STRICT_RECIPE_SCHEMA: bool = False

    @property
    def is_development(self) -> bool:
        return self.APP_ENV.strip().lower() == "development"


settings = Settings()
