"""Application configuration.

Settings are read from environment variables once at import time. An
optional `.env` file in the working directory is loaded first so local
development does not need exported variables.
"""

import os
from dotenv import load_dotenv

load_dotenv(override=False)


def _int_env(key: str, default: int) -> int:
    """Read an integer env var, falling back to `default` when unparsable."""
    try:
        return int(os.getenv(key, default))
    except (TypeError, ValueError):
        return default


def _float_env(key: str, default: float) -> float:
    """Read a float env var, falling back to `default` when unparsable."""
    try:
        return float(os.getenv(key, default))
    except (TypeError, ValueError):
        return default


class Settings:
    """Container for runtime configuration values."""

    def __init__(self):
        # Read/write partitioning; both default to the same SQLite file.
        self.write_database_url = os.getenv("WRITE_DATABASE_URL", "sqlite:///coach.db")
        self.read_database_url = os.getenv("READ_DATABASE_URL", self.write_database_url)

        self.openai_api_key = os.getenv("OPENAI_API_KEY")
        self.openai_model = os.getenv("OPENAI_MODEL", "gpt-4o")
        self.llm_timeout_seconds = _float_env("LLM_TIMEOUT_SECONDS", 20.0)
        self.llm_temperature = _float_env("LLM_TEMPERATURE", 0.7)
        self.llm_max_tokens = _int_env("LLM_MAX_TOKENS", 1800)

        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.log_dir = os.getenv("LOG_DIR", os.path.join(os.path.dirname(__file__), "..", "logs"))


settings = Settings()
