"""Plugin configuration management."""

from typing import Optional

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.constants import (
    CORE_PROTOCOL_VERSION,
    LISTEN_ADDRESS,
    NETWORK_TYPE,
    PROTOCOL_TYPE,
    PROTOCOL_TYPE_TLS,
    PROTOCOL_VERSION,
    ROOT_CA_CERT_ENV,
    SERVER_CERT_ENV,
    SERVER_KEY_ENV,
)
from ..core.exceptions import ConfigurationError


class PluginConfig(BaseSettings):
    """Plugin configuration with environment variable support."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )
    
    # TLS material (file paths provided by the orchestrator)
    server_cert: Optional[str] = Field(
        default=None, validation_alias=AliasChoices(SERVER_CERT_ENV, "server_cert")
    )
    server_key: Optional[str] = Field(
        default=None, validation_alias=AliasChoices(SERVER_KEY_ENV, "server_key")
    )
    root_ca_cert: Optional[str] = Field(
        default=None, validation_alias=AliasChoices(ROOT_CA_CERT_ENV, "root_ca_cert")
    )
    
    # Listener and handshake
    listen_address: str = Field(default=LISTEN_ADDRESS, min_length=1)
    core_protocol_version: int = Field(default=CORE_PROTOCOL_VERSION, ge=1)
    protocol_version: int = Field(default=PROTOCOL_VERSION, ge=1)
    network_type: str = Field(default=NETWORK_TYPE)
    
    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")
    
    @field_validator("server_cert", "server_key", "root_ca_cert")
    @classmethod
    def _blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        stripped_value = value.strip()
        return stripped_value or None
    
    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {value}")
        return normalized
    
    @field_validator("log_format")
    @classmethod
    def _validate_log_format(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in ("json", "console"):
            raise ValueError("log_format must be 'json' or 'console'")
        return normalized
    
    @property
    def tls_enabled(self) -> bool:
        """Whether the listener serves TLS."""
        return bool(self.server_cert and self.server_key)
    
    @property
    def mutual_tls(self) -> bool:
        """Whether client certificates are verified against the root CA."""
        return self.tls_enabled and bool(self.root_ca_cert)
    
    @property
    def protocol_type(self) -> str:
        return PROTOCOL_TYPE_TLS if self.tls_enabled else PROTOCOL_TYPE
    
    def validate_tls(self) -> None:
        """
        Check that TLS inputs are consistent.
        
        Raises:
            ConfigurationError: If only one of certificate and key is set
        """
        if bool(self.server_cert) != bool(self.server_key):
            raise ConfigurationError(
                f"{SERVER_CERT_ENV} and {SERVER_KEY_ENV} must be set together",
                details={"server_cert": self.server_cert, "server_key": self.server_key}
            )


def load_config() -> PluginConfig:
    """
    Load and validate plugin configuration from the environment.
    
    Returns:
        Validated PluginConfig
        
    Raises:
        ConfigurationError: If settings are invalid
    """
    try:
        config = PluginConfig()
    except ValidationError as error:
        raise ConfigurationError(f"Plugin configuration validation failed: {error}") from error
    config.validate_tls()
    return config


# Global config instance
_config: Optional[PluginConfig] = None


def get_config() -> PluginConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config
