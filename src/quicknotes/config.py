from pydantic import Field
from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    host: str = "0.0.0.0"  # noqa: S104
    port: int = 3000
    debug: bool = False
    cors_origins: list[str] = []
    max_body_size: int = Field(default=10 * 1024 * 1024, ge=1)  # Bytes accepted in a JSON request body

    model_config = {
        "env_file": [".env"],
        "env_prefix": "QUICKNOTES_",
        "extra": "ignore",
    }
