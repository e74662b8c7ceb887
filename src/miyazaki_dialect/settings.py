from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Dict, Any, Optional


class Settings(BaseSettings):
    GEMINI_API_KEY: Optional[str] = None
    GEMINI_MODEL: str = "gemini-2.0-flash"
    GEMINI_CONFIG: Dict[str, Any] = Field(
        default_factory=lambda: {
            "temperature": 0.1,
            "top_k": 40,
            "top_p": 0.95,
            "max_output_tokens": 1024,
        }
    )
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    class Config:
        env_file = ".env"
        case_sensitive = False


def get_settings() -> Settings:
    return Settings()
