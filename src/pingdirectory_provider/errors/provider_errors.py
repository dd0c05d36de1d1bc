"""
Provider error hierarchy with categorization.

This module defines the error types raised by the PingDirectory provider.
Resource operations convert these into diagnostics rather than letting them
escape to the caller.
"""


class ProviderError(Exception):
    """
    Base error class for all provider-related exceptions.

    Provides categorization and user guidance for resolution.
    """

    def __init__(
        self,
        message: str,
        category: str,
        user_action: str | None = None,
        cause: Exception | None = None,
    ):
        """
        Initialize provider error.

        Args:
            message: Human-readable error description
            category: Error category (validation, api, configuration, version)
            user_action: What user should do to resolve the issue
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.category = category
        self.user_action = user_action
        self.cause = cause

    def __str__(self) -> str:
        """Enhanced string representation with user guidance."""
        base_msg = super().__str__()
        if self.user_action:
            return f"{base_msg}\nAction required: {self.user_action}"
        return base_msg


class ValidationError(ProviderError):
    """Error in resource configuration validation."""

    def __init__(
        self, message: str, field: str | None = None, user_action: str | None = None
    ):
        self.field = field
        if field:
            message = f"Validation error in attribute '{field}': {message}"
        super().__init__(
            message=message,
            category="validation",
            user_action=user_action,
        )


class ConfigurationError(ProviderError):
    """Error in provider configuration."""

    def __init__(self, message: str, user_action: str | None = None):
        super().__init__(
            message=message,
            category="configuration",
            user_action=user_action
            or "Check the provider configuration and environment variables",
        )


class UnsupportedVersionError(ProviderError):
    """Error raised when a PingDirectory version cannot be used."""

    def __init__(self, version: str, supported: list[str] | None = None):
        self.version = version
        self.supported = supported or []
        message = f"Unsupported PingDirectory version: {version}"
        if self.supported:
            message += f". Supported versions are: {', '.join(self.supported)}"
        super().__init__(message=message, category="version")


class PingDirectoryAPIError(ProviderError):
    """Error returned by (or while reaching) the PingDirectory Configuration API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
        cause: Exception | None = None,
    ):
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(message=message, category="api", cause=cause)

    @property
    def not_found(self) -> bool:
        return self.status_code == 404

    @property
    def retryable(self) -> bool:
        # Client errors mean the request itself is wrong
        if self.status_code and 400 <= self.status_code < 500:
            return False
        return True

    def body_preview(self, limit: int = 2048) -> str | None:
        """Return a truncated preview of the response body for logging."""

        if self.response_body is None:
            return None

        if len(self.response_body) <= limit:
            return self.response_body

        return f"{self.response_body[:limit]}...<truncated>"
