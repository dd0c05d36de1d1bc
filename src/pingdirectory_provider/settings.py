"""Centralized provider settings using pydantic-settings.

Every provider configuration attribute can also be supplied through a
``PINGDIRECTORY_PROVIDER_*`` environment variable. Values set explicitly in
the provider configuration always take precedence over the environment.
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pingdirectory_provider.constants import (
    DEFAULT_REQUEST_TIMEOUT,
    ENV_CA_CERTIFICATE_PEM_FILES,
    ENV_HTTPS_HOST,
    ENV_INSECURE_TRUST_ALL_TLS,
    ENV_PASSWORD,
    ENV_PRODUCT_VERSION,
    ENV_REQUEST_TIMEOUT,
    ENV_USERNAME,
)

logger = logging.getLogger(__name__)


class ProviderSettings(BaseSettings):
    """Provider configuration loaded from environment variables.

    Empty values mean "not set"; the provider reports a diagnostic for
    required values that are missing from both the configuration and the
    environment.
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # PingDirectory connection
    https_host: str = Field(
        default="",
        validation_alias=ENV_HTTPS_HOST,
        description="URI for PingDirectory HTTPS port",
    )
    username: str = Field(
        default="",
        validation_alias=ENV_USERNAME,
        description="Username for PingDirectory admin user",
    )
    password: str = Field(
        default="",
        validation_alias=ENV_PASSWORD,
        description="Password for PingDirectory admin user",
    )
    product_version: str = Field(
        default="",
        validation_alias=ENV_PRODUCT_VERSION,
        description="Version of the PingDirectory server being configured",
    )

    # TLS
    insecure_trust_all_tls: bool = Field(
        default=False,
        validation_alias=ENV_INSECURE_TRUST_ALL_TLS,
        description="Set to true to trust any certificate when connecting to PingDirectory",
    )
    ca_certificate_pem_files: str = Field(
        default="",
        validation_alias=ENV_CA_CERTIFICATE_PEM_FILES,
        description="Comma-separated paths to files containing trusted CA certificates in PEM format",
    )

    request_timeout: float = Field(
        default=DEFAULT_REQUEST_TIMEOUT,
        validation_alias=ENV_REQUEST_TIMEOUT,
        description="Timeout in seconds for Configuration API requests",
    )

    # Logging configuration
    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    json_logs: bool = Field(
        default=False,
        validation_alias="JSON_LOGS",
        description="Enable JSON formatted logging for structured log aggregation",
    )
    correlation_ids: bool = Field(
        default=True,
        validation_alias="CORRELATION_IDS",
        description="Enable correlation IDs in logs for request tracing",
    )

    @field_validator("insecure_trust_all_tls", mode="before")
    @classmethod
    def parse_insecure_trust_all_tls(cls, value):
        """Fall back to false when the environment value is not a boolean."""
        if isinstance(value, bool) or value is None:
            return bool(value)
        text = str(value).strip().lower()
        if text in ("true", "1", "t", "yes", "y", "on"):
            return True
        if text in ("false", "0", "f", "no", "n", "off", ""):
            return False
        logger.info(
            f"Failed to parse value of {ENV_INSECURE_TRUST_ALL_TLS} "
            f"environment variable '{value}'. Defaulting to false."
        )
        return False

    @property
    def ca_certificate_pem_file_list(self) -> list[str]:
        """Parse CA certificate file paths from comma-separated string.

        Returns:
            List of file paths, empty when none are configured
        """
        return [
            path.strip()
            for path in self.ca_certificate_pem_files.split(",")
            if path.strip()
        ]
