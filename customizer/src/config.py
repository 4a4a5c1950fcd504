from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    # Session defaults
    default_project_name: str = "project-name"
    default_trigger_branches: str = "main,development,staging"
    default_vm_image: str = "ubuntu-latest"

    # Export status is cleared after this many seconds
    copy_status_clear_seconds: float = 1.5

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    log_level: str = "INFO"

    class Config:
        env_file = ".env"

@lru_cache()
def get_settings() -> Settings:
    return Settings()
