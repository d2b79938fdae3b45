from pydantic import BaseModel
from dotenv import load_dotenv
from typing import List
import os

load_dotenv()


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseModel):
    api_prefix: str = os.getenv("API_PREFIX", "/api")
    auth_token: str = os.getenv("AUTH_TOKEN", "valid-token")
    cors_origins: List[str] = _split_csv(os.getenv("CORS_ORIGINS", "*"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
