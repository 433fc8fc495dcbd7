
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SCM_", env_file=".env", extra="ignore")

    app_env: str = "dev"
    api_prefix: str = "/api"
    cors_origins: List[str] = ["http://localhost:5173", "http://localhost:3000"]
    log_level: str = "INFO"

    # Store behaviour
    seed_data: bool = True
    enforce_unique_keys: bool = True
    strict_edge_endpoints: bool = False  # edges may point at nodes that don't exist

    host: str = "127.0.0.1"
    port: int = 5000

settings = Settings()  # reads from env
