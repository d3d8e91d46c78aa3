from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

HELPDESK_SCRIPT_URL = (
    "https://helpdesk.zenshop.app/bundle.js"
    "?helpdeskId=kHyvy8MMAXxqFDfdED85AgEds-PYvGZZozh062MeyFO5VR0H5A=="
)


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    CONTENT_DIR: str = "posts"

    # Document shell
    HELPDESK_SCRIPT_URL: str = HELPDESK_SCRIPT_URL
    STYLESHEET_PATH: str = "/static/styles.css"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def content_path(self) -> Path:
        return Path(self.CONTENT_DIR)


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings
