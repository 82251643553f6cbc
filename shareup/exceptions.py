class ShareUpError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:shareup_error'


class ValidationError(ShareUpError):
    """Raised when a request carries missing or malformed input."""

    error_code = 'app:validation_error'


class MalformedResponseError(ShareUpError):
    """Raised when a response is malformed."""

    error_code = 'app:malformed_response_error'


class ConfigurationError(ShareUpError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'


class InfrastructureError(ShareUpError):
    """Base exception for all infrastructure (AWS) errors."""

    error_code = 'infra:infrastructure_error'


class BlobStoreError(InfrastructureError):
    """Raised when the blob store rejects an upload."""

    error_code = 'infra:blob_store_error'


class ShortURLClientError(ShareUpError):
    """Base exception for failures of the short URL API client."""

    error_code = 'client:short_url_client_error'


class ShortURLTransportError(ShortURLClientError):
    """Raised when the short URL API cannot be reached (timeout, network)."""

    error_code = 'client:transport_error'


class ShortURLServiceError(ShortURLClientError):
    """Raised when the short URL API responds with an error status."""

    error_code = 'client:service_error'

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
