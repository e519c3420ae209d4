"""Pydantic configuration models for the spring exporter."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
import re


class ScrapeTargetConfig(BaseModel):
    """Endpoint to scrape. Immutable for the lifetime of the process."""
    model_config = ConfigDict(frozen=True)

    uri: str
    namespace: str = "spring"
    insecure: bool = False  # Skip TLS certificate verification
    basic_auth_user: str = ""
    basic_auth_password: str = ""
    timeout_seconds: float = Field(default=10.0, gt=0)

    @field_validator('uri')
    @classmethod
    def validate_uri(cls, v: str) -> str:
        """Validate URI scheme."""
        if not v.startswith(('http://', 'https://')):
            raise ValueError('URI must start with http:// or https://')
        return v

    @field_validator('namespace')
    @classmethod
    def validate_namespace(cls, v: str) -> str:
        """Namespace must itself be a valid Prometheus metric name."""
        if not re.match(r'^[a-zA-Z_:][a-zA-Z0-9_:]*$', v):
            raise ValueError(f'Invalid metrics namespace: {v!r}')
        return v


class ServerConfig(BaseModel):
    """Exposition HTTP server configuration."""
    listen_address: str = "0.0.0.0"
    port: int = Field(default=9128, ge=1, le=65535)


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = "INFO"

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError(f'Unknown log level: {v}')
        return level


class ExporterConfig(BaseModel):
    """Root configuration model for the exporter."""
    target: ScrapeTargetConfig
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
