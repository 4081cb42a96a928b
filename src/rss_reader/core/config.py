"""Server and fetch settings, read from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from enum import Enum

from pydantic import BaseModel, Field, field_validator

DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class Transport(str, Enum):
    """MCP transports the server can run on."""

    stdio = "stdio"
    http = "http"


class ServerConfig(BaseModel):
    """Runtime settings for the MCP server and its HTTP fetches."""

    transport: Transport = Field(
        default=Transport.stdio, description="MCP transport (env TRANSPORT)"
    )
    host: str = Field(
        default="localhost",
        description="Bind host for the http transport (env MCP_SERVER_HOST)",
    )
    port: int = Field(
        default=8081, ge=1, le=65535, description="Bind port (env PORT)"
    )
    request_timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, description="HTTP timeout in seconds"
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT, description="User-Agent sent with fetches"
    )

    @field_validator("transport", mode="before")
    @classmethod
    def _legacy_transport_name(cls, value: object) -> object:
        if isinstance(value, str) and value == "httpStream":
            return Transport.http
        return value


def load_server_config(environ: Mapping[str, str] | None = None) -> ServerConfig:
    """Build a :class:`ServerConfig` from environment variables.

    Unset variables keep their defaults; invalid values raise
    ``pydantic.ValidationError``.
    """
    env = os.environ if environ is None else environ
    values: dict[str, str] = {}
    for field, var in (
        ("transport", "TRANSPORT"),
        ("host", "MCP_SERVER_HOST"),
        ("port", "PORT"),
        ("request_timeout", "RSS_READER_TIMEOUT"),
        ("user_agent", "RSS_READER_USER_AGENT"),
    ):
        if env.get(var):
            values[field] = env[var]
    return ServerConfig(**values)
