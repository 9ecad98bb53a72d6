from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    api_url: str = "http://localhost:8000"
    api_key: Optional[str] = None

    default_top_k: int = 5
    default_rerank: bool = True

    # Display preference
    preferences_path: str = "~/.resume_search/preferences.json"
    dark_mode_key: str = "darkMode"

    log_level: str = "INFO"

    chainlit_host: str = "0.0.0.0"
    chainlit_port: int = 8001


settings = Settings()
