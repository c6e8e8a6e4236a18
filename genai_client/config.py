"""Configuration management for the GenAI client."""

import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Library settings."""

    # Upstream API
    BASE_URL: str = os.getenv("GENAI_BASE_URL", "https://api.openai.com/v1")
    REQUEST_TIMEOUT: float = float(os.getenv("GENAI_REQUEST_TIMEOUT", "600"))

    # Debug
    DEBUG_LOG_PAYLOADS: bool = os.getenv("DEBUG_LOG_PAYLOADS", "false").lower() == "true"
    DEBUG_LOG_MAX_LENGTH: int = int(os.getenv("DEBUG_LOG_MAX_LENGTH", "2000"))

    @staticmethod
    def get_api_key() -> Optional[str]:
        """Read the API key from the environment on every call."""
        return os.getenv("GENAI_API_KEY") or None


settings = Settings()
