"""Configuration management from environment variables."""
import os

from dotenv import load_dotenv

# Load .env file
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Application configuration."""

    # Remote transaction document
    SOURCE_URL: str = os.getenv(
        "SOURCE_URL",
        "https://s3.amazonaws.com/roxiler.com/product_transaction.json",
    )
    FETCH_TIMEOUT: float = float(os.getenv("FETCH_TIMEOUT", "10"))
    LOAD_ON_STARTUP: bool = _env_flag("LOAD_ON_STARTUP")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "5000"))


config = Config()
