"""Application configuration."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Literature proxy
    proxy_base_url: str = "http://localhost:5000/api"
    host: str = "127.0.0.1"
    port: int = 5000
    cors_origins: list[str] = ["*"]

    # API Keys
    groq_api_key: str = ""
    anthropic_api_key: str = ""
    ncbi_api_key: str = ""

    # LLM Settings
    ai_provider: Literal["groq", "anthropic"] = "groq"
    llm_model: str | None = None
    groq_model: str = "llama-3.3-70b-versatile"
    anthropic_model: str = "claude-sonnet-4-6"

    # App Settings
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        frozen = True

    @property
    def model_name(self) -> str:
        """Model used by the selected provider, honouring the override."""
        if self.llm_model:
            return self.llm_model
        if self.ai_provider == "anthropic":
            return self.anthropic_model
        return self.groq_model


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
