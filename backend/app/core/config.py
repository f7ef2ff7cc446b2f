from pathlib import Path
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[2]

class Settings(BaseSettings):
    # Storage mode: "elasticsearch" or "local"
    STORAGE_MODE: Literal["elasticsearch", "local"] = "elasticsearch"

    # Elasticsearch Configuration (only needed if STORAGE_MODE=elasticsearch)
    ES_HOSTS: str = "http://localhost:9200"
    ES_INDEX: str = "places"

    # Tab-separated source file, reloaded on every startup
    DATA_FILE: str = "data/data.csv"

    # Bearer token signing
    JWT_SECRET_KEY: str = "my_secret_key"
    TOKEN_TTL_HOURS: int = 24

    TEMPLATES_DIR: str = str(BASE_DIR / "templates")

    HOST: str = "0.0.0.0"
    PORT: int = 8888

    LOGGER: int = 20
    LOG_DIRECTORY: str = "logs"

    model_config = SettingsConfigDict(
        # Look for .env in the current folder OR the parent folder
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def es_hosts(self) -> list[str]:
        return [h.strip() for h in self.ES_HOSTS.split(",") if h.strip()]

settings = Settings()
