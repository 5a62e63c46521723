# src/core/config.py
import logging
import os
from dotenv import load_dotenv

# load .env from project root
load_dotenv()


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


class Settings:
    # Backend
    API_URL: str = os.getenv("API_URL", "http://localhost:5000/api")
    REQUEST_TIMEOUT: int = _int_env("REQUEST_TIMEOUT", 30)

    # Pages
    POSTS_PAGE_SIZE: int = _int_env("POSTS_PAGE_SIZE", 20)
    APP_TITLE: str = os.getenv("APP_TITLE", "Student Employability Platform")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


# single settings instance used across app
settings = Settings()

_configured = False


def configure_logging(level: str = None):
    """Configure root logging once per process (Streamlit reruns the script on every interaction)."""
    global _configured
    if _configured:
        return
    logging.basicConfig(
        level=getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _configured = True
