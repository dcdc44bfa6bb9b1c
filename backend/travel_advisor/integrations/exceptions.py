class IntegrationError(Exception):
    """Base exception for integration-level failures (config, missing credentials)."""


class UpstreamAPIError(Exception):
    """Represents a completion-service call failure."""


class TransportError(UpstreamAPIError):
    """Network failure, timeout or non-2xx status from the completion service."""


class IncompleteOutputError(UpstreamAPIError):
    """The service flagged its output as truncated and returned no usable text."""
