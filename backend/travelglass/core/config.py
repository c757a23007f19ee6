from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=False)

    app_name: str = Field("TravelGlass", alias="APP_NAME")
    environment: str = Field("local", alias="ENVIRONMENT")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    llm_provider: str = Field("mock", alias="LLM_PROVIDER")
    ollama_host: str = Field("http://localhost:11434", alias="OLLAMA_HOST")
    ollama_model: str = Field("llama3", alias="OLLAMA_MODEL")
    ollama_timeout: int = Field(60, alias="OLLAMA_TIMEOUT")
    database_url: str | None = Field(None, alias="DATABASE_URL")
    featured_landmark_id: int = Field(1016, alias="FEATURED_LANDMARK_ID")
    map_item_workers: int = Field(1, alias="MAP_ITEM_WORKERS")


@lru_cache()
def get_settings() -> Settings:
    load_dotenv(".env")
    return Settings()


settings = get_settings()
