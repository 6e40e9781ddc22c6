# perplexity_mcp/config/settings.py
from pydantic_settings import BaseSettings
from pydantic import ValidationError, field_validator
import logging

from perplexity_mcp.core.exceptions import StartupConfigException

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.perplexity.ai/chat/completions"

class Settings(BaseSettings):
    # External API
    PERPLEXITY_API_KEY: str
    PERPLEXITY_API_URL: str = DEFAULT_API_URL

    # Monitoring
    LOG_LEVEL: str = "INFO"

    @field_validator("PERPLEXITY_API_KEY")
    @classmethod
    def validate_api_key(cls, v):
        if not v.strip():
            raise ValueError("API key cannot be empty")
        return v.strip()

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def parse_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper() or "INFO"
        return v

    model_config = {
        "env_file": ".env",
        "case_sensitive": True,
        "extra": "ignore"  # Ignore unknown env vars
    }

def load_settings(**overrides) -> Settings:
    """
    Build the process-wide settings once at startup.

    A missing or blank PERPLEXITY_API_KEY is fatal: it is reported as
    StartupConfigException so the entry point can exit before serving.
    """
    try:
        settings = Settings(**overrides)
    except ValidationError as e:
        fields = [str(err["loc"][0]) for err in e.errors() if err.get("loc")]
        if "PERPLEXITY_API_KEY" in fields:
            raise StartupConfigException(
                "PERPLEXITY_API_KEY environment variable is required"
            ) from e
        raise StartupConfigException(f"Invalid configuration: {e}") from e

    logger.debug(f"Settings loaded, upstream endpoint: {settings.PERPLEXITY_API_URL}")
    return settings
