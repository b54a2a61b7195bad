"""
Application configuration module.

Uses pydantic-settings to load and validate configuration values from
environment variables (or a .env file). These settings control where the
MCP server listens and how the HTTP probe behaves.
"""

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

# Load environment variables from .env
load_dotenv()


class Settings(BaseSettings):
    """
    Validated application settings loaded from environment variables.

    Attributes:
        HOST:                   Address uvicorn binds to (default: 0.0.0.0).
        PORT:                   Port uvicorn listens on (default: 8000).
        MCP_PATH:               Path of the streamable-HTTP MCP endpoint.
        PROBE_TIMEOUT_SECONDS:  Deadline for a single probe, in seconds.
        PROBE_FOLLOW_REDIRECTS: Whether a probe follows HTTP redirects.
        LOG_LEVEL:              Root logging level name.
    """
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    MCP_PATH: str = "/mcp"

    # 100 s overall probe deadline.
    PROBE_TIMEOUT_SECONDS: float = Field(default=100.0, gt=0)
    PROBE_FOLLOW_REDIRECTS: bool = True

    LOG_LEVEL: str = "INFO"

    class Config:
        extra = "ignore"        # Ignore extra env vars not listed above


# Singleton instance used throughout the application
settings = Settings()
