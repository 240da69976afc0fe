from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Event Ticket Ledger'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # Logging
    LOG_FILE_ENABLED: bool = False  # Hourly rotated file sink under LOG_DIR

    # Notification fan-out
    PUBLISHER_STREAM_BUFFER: int = 100  # Per-subscriber buffered notifications

    @field_validator('PUBLISHER_STREAM_BUFFER')
    @classmethod
    def positive_buffer(cls, v: int) -> int:
        if v < 1:
            raise ValueError('PUBLISHER_STREAM_BUFFER must be at least 1')
        return v


settings = Settings()  # type: ignore
