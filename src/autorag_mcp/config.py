"""
Runtime configuration read from the environment (.env is loaded by main).
"""
import os
from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_API_BASE_URL = "https://api.cloudflare.com/client/v4"


class Settings(BaseModel):
    """Server and AutoRAG backend settings."""
    server_name: str = Field(default="cloudflare-autorag-mcp")
    account_id: Optional[str] = Field(default=None, description="Cloudflare account id")
    api_token: Optional[str] = Field(default=None, description="Cloudflare API token with AutoRAG access")
    rag_name: Optional[str] = Field(default=None, description="Name of the AutoRAG instance")
    api_base_url: str = Field(default=DEFAULT_API_BASE_URL)
    request_timeout: Optional[float] = Field(default=None, description="Backend timeout in seconds, unset means no timeout")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    log_level: str = Field(default="INFO")

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables, skipping unset ones."""
        env_map = {
            "account_id": "CLOUDFLARE_ACCOUNT_ID",
            "api_token": "CLOUDFLARE_API_TOKEN",
            "rag_name": "AUTORAG_NAME",
            "api_base_url": "CLOUDFLARE_API_BASE_URL",
            "request_timeout": "AUTORAG_TIMEOUT",
            "host": "MCP_HOST",
            "port": "MCP_PORT",
            "log_level": "LOG_LEVEL",
        }
        values = {}
        for field_name, env_var in env_map.items():
            value = os.getenv(env_var)
            if value:
                values[field_name] = value
        return cls(**values)
