"""
PingDirectory provider entry point.

The provider resolves connection settings from its configuration and the
environment, builds the Configuration API client and hands both to the
resources and data sources it registers.
"""

from __future__ import annotations

import logging
import ssl

import httpx
from pydantic import BaseModel, Field

from pingdirectory_provider import compatibility
from pingdirectory_provider.configuration import (
    ProviderConfiguration,
    ResourceConfiguration,
)
from pingdirectory_provider.constants import (
    ENV_CA_CERTIFICATE_PEM_FILES,
    ENV_HTTPS_HOST,
    ENV_INSECURE_TRUST_ALL_TLS,
    ENV_PASSWORD,
    ENV_PRODUCT_VERSION,
    ENV_USERNAME,
    PROVIDER_TYPE_NAME,
    RESOURCE_NAME_PREFIX,
)
from pingdirectory_provider.diagnostics import Diagnostics
from pingdirectory_provider.errors import (
    ConfigurationError,
    UnsupportedVersionError,
    ValidationError,
)
from pingdirectory_provider.observability.logging import setup_structured_logging
from pingdirectory_provider.resources import (
    DATA_SOURCE_CLASSES,
    RESOURCE_CLASSES,
    ConfigDataSource,
    ConfigListDataSource,
    ConfigResource,
)
from pingdirectory_provider.schema import Schema, SchemaAttribute
from pingdirectory_provider.settings import ProviderSettings
from pingdirectory_provider.utils.config_api import ConfigurationAPIClient

logger = logging.getLogger(__name__)


class ProviderConfig(BaseModel):
    """Provider block as written by the user. Unset values fall back to the environment."""

    https_host: str | None = Field(None, description="URI for PingDirectory HTTPS port")
    username: str | None = Field(None, description="Username for PingDirectory admin user")
    password: str | None = Field(None, description="Password for PingDirectory admin user")
    insecure_trust_all_tls: bool | None = Field(
        None, description="Set to true to trust any certificate when connecting"
    )
    ca_certificate_pem_files: list[str] | None = Field(
        None, description="Paths to files containing trusted CA certificates in PEM format"
    )
    product_version: str | None = Field(
        None, description="Version of the PingDirectory server being configured"
    )


def _strip_prefix(type_name: str) -> str:
    if type_name.startswith(RESOURCE_NAME_PREFIX):
        return type_name[len(RESOURCE_NAME_PREFIX) :]
    return type_name


def build_tls_verify(
    insecure_trust_all_tls: bool,
    ca_certificate_pem_files: list[str],
    diagnostics: Diagnostics,
) -> bool | ssl.SSLContext:
    """
    Build the TLS verification setting for the API client.

    Args:
        insecure_trust_all_tls: Skip certificate verification entirely
        ca_certificate_pem_files: CA bundles to trust instead of the host roots
        diagnostics: Diagnostics to report unreadable or invalid files to

    Returns:
        False when verification is disabled, otherwise an SSL context
    """
    if insecure_trust_all_tls:
        logger.warning("TLS certificate verification is disabled")
        return False

    if not ca_certificate_pem_files:
        return ssl.create_default_context()

    context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    for path in ca_certificate_pem_files:
        try:
            with open(path, "rb") as f:
                pem = f.read()
        except OSError as e:
            diagnostics.add_error(
                f"Failed to read CA PEM certificate file: {path}", str(e)
            )
            continue
        try:
            context.load_verify_locations(cadata=pem.decode("utf-8"))
        except (ValueError, ssl.SSLError) as e:
            diagnostics.add_warning(
                "Failed to parse certificate",
                f"Failed to parse certificate from {path}: {e}",
            )
        else:
            logger.debug(f"Added CA certificate from {path}")
    return context


class PingDirectoryProvider:
    """
    Provider for managing PingDirectory server configuration.

    Call :meth:`configure` once before asking for resources or data
    sources; they share the API client it creates.
    """

    def __init__(
        self,
        settings: ProviderSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        setup_logging: bool = False,
    ):
        """
        Initialize provider.

        Args:
            settings: Environment-backed settings, loaded when not provided
            transport: Optional httpx transport for the API client, used by tests
            setup_logging: Configure structured logging from the settings
        """
        self.settings = settings or ProviderSettings()
        self.transport = transport
        self.resource_configuration: ResourceConfiguration | None = None
        if setup_logging:
            setup_structured_logging(
                log_level=self.settings.log_level,
                enable_json_formatting=self.settings.json_logs,
                correlation_id_enabled=self.settings.correlation_ids,
            )

    def metadata(self) -> str:
        return PROVIDER_TYPE_NAME

    def schema(self) -> Schema:
        schema = Schema("PingDirectory provider")
        schema.add(
            SchemaAttribute(
                "https_host",
                "string",
                f"URI for PingDirectory HTTPS port. Default value can be set with the {ENV_HTTPS_HOST} environment variable.",
                optional=True,
            )
        )
        schema.add(
            SchemaAttribute(
                "username",
                "string",
                f"Username for PingDirectory admin user. Default value can be set with the {ENV_USERNAME} environment variable.",
                optional=True,
            )
        )
        schema.add(
            SchemaAttribute(
                "password",
                "string",
                f"Password for PingDirectory admin user. Default value can be set with the {ENV_PASSWORD} environment variable.",
                optional=True,
                sensitive=True,
            )
        )
        schema.add(
            SchemaAttribute(
                "insecure_trust_all_tls",
                "bool",
                f"Set to true to trust any certificate when connecting to the PingDirectory server. This is insecure and should not be enabled outside of testing. Default value can be set with the {ENV_INSECURE_TRUST_ALL_TLS} environment variable.",
                optional=True,
            )
        )
        schema.add(
            SchemaAttribute(
                "ca_certificate_pem_files",
                "string_set",
                f"Paths to files containing PEM-encoded certificates to be trusted as root CAs when connecting to the PingDirectory server over HTTPS. If not set, the host's root CA set will be used. Default value can be set with the {ENV_CA_CERTIFICATE_PEM_FILES} environment variable, using commas to delimit multiple PEM files if necessary.",
                optional=True,
            )
        )
        schema.add(
            SchemaAttribute(
                "product_version",
                "string",
                f"Version of the PingDirectory server being configured. Default value can be set with the {ENV_PRODUCT_VERSION} environment variable.",
                optional=True,
            )
        )
        return schema

    def _resolve_required(
        self,
        configured: str | None,
        from_env: str,
        attribute: str,
        env_var: str,
        diagnostics: Diagnostics,
    ) -> str:
        value = configured if configured else from_env
        if not value:
            diagnostics.add_error(
                f"Unable to find {attribute}",
                f"{attribute} cannot be an empty string. Either set it in the "
                f"configuration or use the {env_var} environment variable.",
                attribute=attribute,
            )
            return ""
        return value

    def configure(
        self, config: ProviderConfig | None = None
    ) -> tuple[ResourceConfiguration | None, Diagnostics]:
        """
        Resolve the provider configuration and build the API client.

        Args:
            config: Provider block; unset attributes are read from the environment

        Returns:
            Tuple of (resource configuration, diagnostics). The configuration
            is None when any error was reported.
        """
        config = config or ProviderConfig()
        diagnostics = Diagnostics()
        settings = self.settings

        https_host = self._resolve_required(
            config.https_host, settings.https_host, "https_host", ENV_HTTPS_HOST, diagnostics
        )
        username = self._resolve_required(
            config.username, settings.username, "username", ENV_USERNAME, diagnostics
        )
        password = self._resolve_required(
            config.password, settings.password, "password", ENV_PASSWORD, diagnostics
        )
        raw_version = self._resolve_required(
            config.product_version,
            settings.product_version,
            "product_version",
            ENV_PRODUCT_VERSION,
            diagnostics,
        )
        product_version = ""
        if raw_version:
            try:
                product_version = compatibility.parse(raw_version)
            except (ValueError, UnsupportedVersionError) as e:
                diagnostics.add_error(
                    "Failed to parse PingDirectory version",
                    str(e),
                    attribute="product_version",
                )

        insecure = (
            config.insecure_trust_all_tls
            if config.insecure_trust_all_tls is not None
            else settings.insecure_trust_all_tls
        )
        ca_files = (
            config.ca_certificate_pem_files
            if config.ca_certificate_pem_files is not None
            else settings.ca_certificate_pem_file_list
        )
        verify = build_tls_verify(insecure, ca_files, diagnostics)

        if diagnostics.has_error():
            logger.error(f"Provider configuration failed: {diagnostics.error_summary}")
            return None, diagnostics

        api_client = ConfigurationAPIClient(
            https_host=https_host,
            username=username,
            password=password,
            verify=verify,
            timeout=settings.request_timeout,
            transport=self.transport,
        )
        self.resource_configuration = ResourceConfiguration(
            provider_config=ProviderConfiguration(
                https_host=https_host,
                username=username,
                password=password,
                product_version=product_version,
            ),
            api_client=api_client,
        )
        logger.info(
            f"Configured PingDirectory provider for {https_host} "
            f"(product version {product_version})"
        )
        return self.resource_configuration, diagnostics

    def resources(self) -> list[type[ConfigResource]]:
        """Resource classes registered by this provider, ordered by type name."""
        return sorted(RESOURCE_CLASSES, key=lambda cls: cls.type_name)

    def data_sources(
        self,
    ) -> list[type[ConfigDataSource] | type[ConfigListDataSource]]:
        """Data source classes registered by this provider, ordered by type name."""
        return sorted(DATA_SOURCE_CLASSES, key=lambda cls: cls.type_name)

    def _require_configuration(self) -> ResourceConfiguration:
        if self.resource_configuration is None:
            raise ConfigurationError(
                "Provider is not configured",
                user_action="Call configure() and resolve any error diagnostics first",
            )
        return self.resource_configuration

    def get_resource(self, type_name: str) -> ConfigResource:
        """
        Instantiate a resource by type name.

        Accepts the name with or without the ``pingdirectory_`` prefix.

        Raises:
            ConfigurationError: If the provider has not been configured
            ValidationError: If no resource has this type name
        """
        configuration = self._require_configuration()
        wanted = _strip_prefix(type_name)
        for cls in RESOURCE_CLASSES:
            if cls.type_name == wanted:
                return cls(configuration)
        raise ValidationError(f"Unknown resource type: {type_name}", field="type_name")

    def get_data_source(self, type_name: str) -> ConfigDataSource | ConfigListDataSource:
        """Instantiate a data source by type name. See :meth:`get_resource`."""
        configuration = self._require_configuration()
        wanted = _strip_prefix(type_name)
        for cls in DATA_SOURCE_CLASSES:
            if cls.type_name == wanted:
                return cls(configuration)
        raise ValidationError(
            f"Unknown data source type: {type_name}", field="type_name"
        )

    async def close(self) -> None:
        """Release the API client's connections."""
        if self.resource_configuration is not None:
            await self.resource_configuration.api_client.close()
