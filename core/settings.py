"""
Application settings and configuration.
"""
from pydantic_settings import BaseSettings
from pydantic import AliasChoices, Field, ConfigDict
from dotenv import load_dotenv

# Load .env file explicitly
load_dotenv()

class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ========== App Settings ==========
    APP_NAME: str = "Vivify"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = "Turn a prompt, sketch, screenshot or PDF into a working single-page web app"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 7860
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # ========== LLM Settings ==========
    LLM_PROVIDER: str = "gemini"
    TEMPERATURE: float = 0.5
    REQUEST_TIMEOUT: float = 120.0
    # 1 = a single attempt, failures go straight back to the caller
    LLM_MAX_RETRIES: int = 1

    # Gemini LLM Configuration
    GEMINI_API_KEY: str | None = Field(
        None, validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY")
    )
    GEMINI_MODEL: str = "gemini-3-pro-preview"

    # OpenAI LLM Configuration
    OPENAI_API_KEY: str | None = Field(None, validation_alias="OPENAI_API_KEY")
    OPENAI_MODEL: str = "gpt-4o"

    # ========== Uploads & Output ==========
    MAX_UPLOAD_MB: int = 20
    OUTPUT_DIR: str = "creations"

    model_config = ConfigDict(
            env_file=".env",
            env_file_encoding="utf-8",
            case_sensitive=False,
            extra="ignore",
        )
# Create settings instance
settings = Settings()
