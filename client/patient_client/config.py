from pydantic_settings import BaseSettings
from pydantic import Field
from functools import lru_cache


class ClientSettings(BaseSettings):
    """Where the dashboard finds the patient API."""

    base_url: str = Field(default="http://localhost:5001/api", env="PATIENT_API_BASE_URL")
    timeout: float = Field(default=10.0, env="PATIENT_API_TIMEOUT")

    class Config:
        env_prefix = "PATIENT_API_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_client_settings() -> ClientSettings:
    return ClientSettings()
