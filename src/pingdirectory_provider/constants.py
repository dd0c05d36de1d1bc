"""
Constants used throughout the PingDirectory provider.

This module defines all constant values used by the provider including:
- Provider and resource naming
- Configuration API paths and schema URNs
- Environment variable names for provider configuration
- Default configuration values
"""

# Provider naming
PROVIDER_TYPE_NAME = "pingdirectory"
RESOURCE_NAME_PREFIX = f"{PROVIDER_TYPE_NAME}_"

# Configuration API layout
CONFIG_API_BASE_PATH = "/config/v2/"
CONFIG_SCHEMA_URN_PREFIX = "urn:pingidentity:schemas:configuration:2.0:"
MESSAGES_SCHEMA_URN = "urn:pingidentity:schemas:configuration:messages:2.0"
LIST_RESPONSE_RESOURCES_KEY = "Resources"

# Update operation types
OPERATION_ADD = "add"
OPERATION_REMOVE = "remove"
OPERATION_REPLACE = "replace"

# Environment variables for provider configuration
ENV_HTTPS_HOST = "PINGDIRECTORY_PROVIDER_HTTPS_HOST"
ENV_USERNAME = "PINGDIRECTORY_PROVIDER_USERNAME"
ENV_PASSWORD = "PINGDIRECTORY_PROVIDER_PASSWORD"
ENV_INSECURE_TRUST_ALL_TLS = "PINGDIRECTORY_PROVIDER_INSECURE_TRUST_ALL_TLS"
ENV_CA_CERTIFICATE_PEM_FILES = "PINGDIRECTORY_PROVIDER_CA_CERTIFICATE_PEM_FILES"
ENV_PRODUCT_VERSION = "PINGDIRECTORY_PROVIDER_PRODUCT_VERSION"
ENV_REQUEST_TIMEOUT = "PINGDIRECTORY_PROVIDER_REQUEST_TIMEOUT"

# Default configuration values
DEFAULT_REQUEST_TIMEOUT = 60
SINGLETON_ID = "id"

# Diagnostic summaries shared across resources
SUMMARY_NO_UPDATE_OPERATIONS = "No configuration API operations created for update"
