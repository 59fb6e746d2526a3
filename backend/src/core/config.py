"""
Backend configuration for the SEO description service.

Settings are read once from the environment (after loading a local .env
file) and passed explicitly into the application factory. A missing API key
raises ConfigurationError so that the server refuses to start.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from backend.src.core.seo.errors import ConfigurationError

API_KEY_ENV = "SEO_OPEN_AI_API_KEY"
DEFAULT_MODEL_NAME = "gpt-3.5-turbo"


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return str(raw).strip().lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the backend."""

    api_key: str
    model_name: str = DEFAULT_MODEL_NAME
    # Prompt and raw provider response are echoed to the log when enabled
    log_provider_payloads: bool = True


def load_settings() -> Settings:
    """
    Build Settings from the process environment.

    Returns
    -------
    Settings
        Validated settings

    Raises
    ------
    ConfigurationError
        If SEO_OPEN_AI_API_KEY is not set
    """
    load_dotenv()

    api_key = (os.getenv(API_KEY_ENV) or "").strip()
    if not api_key:
        raise ConfigurationError(
            f"Missing {API_KEY_ENV} in environment variables.\n"
            "Please add it to your .env file:\n"
            f"  {API_KEY_ENV}=your_api_key_here"
        )

    return Settings(
        api_key=api_key,
        model_name=os.getenv("SEO_OPENAI_MODEL", DEFAULT_MODEL_NAME),
        log_provider_payloads=_env_flag("LOG_PROVIDER_PAYLOADS", True),
    )
