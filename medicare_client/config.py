"""Configuration for the Medicare API client.

All environment-dependent values centralized here. Values come from the
process environment (a local .env file is loaded first).
"""
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# API Configuration
API_BASE_URL = "https://medicare-backend-phi.vercel.app/api/v1"
API_SERVER_URL = "https://medicare-backend-phi.vercel.app"

# Durable session storage
STORAGE_URL = "sqlite:///medicare_session.db"

# Roles understood by the backend
ROLES = ("patient", "doctor", "admin")

# Profile photo shown when a user has none
DEFAULT_AVATAR = "https://res.cloudinary.com/dotzclh4n/image/upload/v1746707126/users/default-user.jpg"


class Settings(BaseModel):
    """Runtime settings for a client instance."""
    api_base_url: str = Field(default=API_BASE_URL, description="REST API root")
    api_server_url: str = Field(default=API_SERVER_URL, description="Server root for uploaded assets")
    storage_url: str = Field(default=STORAGE_URL, description="SQLAlchemy URL for durable storage")
    request_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds (None = transport default)"
    )
    log_level: str = Field(default="INFO")


def load_settings() -> Settings:
    """
    Build Settings from environment variables.

    Reads MEDICARE_API_BASE_URL, MEDICARE_API_SERVER_URL,
    MEDICARE_STORAGE_URL, MEDICARE_REQUEST_TIMEOUT and LOG_LEVEL.

    Returns:
        Validated Settings instance
    """
    load_dotenv()

    timeout = os.getenv("MEDICARE_REQUEST_TIMEOUT")

    return Settings(
        api_base_url=os.getenv("MEDICARE_API_BASE_URL", API_BASE_URL),
        api_server_url=os.getenv("MEDICARE_API_SERVER_URL", API_SERVER_URL),
        storage_url=os.getenv("MEDICARE_STORAGE_URL", STORAGE_URL),
        request_timeout=float(timeout) if timeout else None,
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
