import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_API_URL = "http://localhost:5000/api"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(environ=None) -> Settings:
    """Read settings from the environment.

    A .env file in the working directory is loaded first so HMS_API_URL is
    available when running via `streamlit run`. Pass `environ` to read from
    a plain mapping instead (no .env loading).
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    api_url = (environ.get("HMS_API_URL") or "").strip().rstrip("/")
    log_level = (environ.get("HMS_LOG_LEVEL") or "").strip().upper()

    return Settings(
        api_url=api_url or DEFAULT_API_URL,
        log_level=log_level or DEFAULT_LOG_LEVEL,
    )
