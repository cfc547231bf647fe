from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

class Settings(BaseSettings):
    ENVIRONMENT: str = "development"
    PORT: int = 8000
    HOST: str = "0.0.0.0"

    # LLM Conf ("gemini" or "groq")
    LLM_PROVIDER: str = "gemini"
    GEMINI_API_KEY: Optional[str] = None
    GEMINI_MODEL_ID: str = "gemini-1.5-flash"
    GROQ_API_KEY: Optional[str] = None
    GROQ_MODEL_ID: str = "llama3-70b-8192"

    # Near-deterministic sampling for reviews
    LLM_TEMPERATURE: float = 0.1
    LLM_TOP_K: int = 40
    LLM_TOP_P: float = 0.95
    LLM_MAX_OUTPUT_TOKENS: int = 4096

    # Rate limiting (per client address, per process)
    RATE_LIMIT_REQUESTS: int = 15
    RATE_LIMIT_WINDOW_SECONDS: int = 60
    RATE_LIMIT_MAX_CLIENTS: int = 10000
    RATE_LIMIT_PRUNE_INTERVAL_SECONDS: int = 300
    # Honor X-Forwarded-For / X-Real-IP. Turn off when clients reach the app without a proxy.
    TRUST_PROXY_HEADERS: bool = True

    # Input bounds
    MAX_CONTENT_LENGTH: int = 5_000_000
    DEFAULT_FILENAME: str = "document.txt"

    LOG_LEVEL: str = "INFO"

    # Client Conf
    REVIEW_API_URL: str = "http://localhost:8000"
    CLIENT_TIMEOUT_SECONDS: float = 300.0

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

settings = Settings()
