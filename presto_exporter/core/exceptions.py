"""Shared exceptions module."""

from typing import Optional


class PrestoExporterException(Exception):
    """Base exception for the Presto exporter."""

    pass


class ConfigurationError(PrestoExporterException):
    """Exception raised when a configuration value cannot be used."""

    def __init__(self, message: Optional[str] = "Invalid configuration"):
        """Create a new ConfigurationError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class ClusterStatusError(PrestoExporterException):
    """Base exception for failures while fetching the cluster status document."""

    def __init__(self, url: str, message: Optional[str] = "Failed to fetch cluster status"):
        """Create a new ClusterStatusError instance.

        Args:
        ----
            url (str): The cluster status URL that was requested.
            message (str, optional): The error message. Has default message.

        """
        self.url = url
        self.message = message
        super().__init__(f"{message} ({url})")


class UpstreamRequestError(ClusterStatusError):
    """Exception raised when the HTTP request itself fails (DNS, refused, reset, timeout)."""

    def __init__(self, url: str, detail: str):
        """Create a new UpstreamRequestError instance.

        Args:
        ----
            url (str): The cluster status URL that was requested.
            detail (str): Description of the transport failure.

        """
        self.detail = detail
        super().__init__(url, f"Request to cluster failed: {detail}")


class UnexpectedStatusCodeError(ClusterStatusError):
    """Exception raised when the cluster answers with a non-success status code."""

    def __init__(self, url: str, status_code: int):
        """Create a new UnexpectedStatusCodeError instance.

        Args:
        ----
            url (str): The cluster status URL that was requested.
            status_code (int): The HTTP status code returned by the cluster.

        """
        self.status_code = status_code
        super().__init__(url, f"Unexpected status code {status_code}")


class UpstreamReadError(ClusterStatusError):
    """Exception raised when the response body cannot be read."""

    def __init__(self, url: str, detail: str):
        """Create a new UpstreamReadError instance.

        Args:
        ----
            url (str): The cluster status URL that was requested.
            detail (str): Description of the read failure.

        """
        self.detail = detail
        super().__init__(url, f"Failed to read response body: {detail}")


class StatusDecodeError(ClusterStatusError):
    """Exception raised when the response body is not a valid cluster status document."""

    def __init__(self, url: str, detail: str):
        """Create a new StatusDecodeError instance.

        Args:
        ----
            url (str): The cluster status URL that was requested.
            detail (str): Description of the decode failure.

        """
        self.detail = detail
        super().__init__(url, f"Failed to decode cluster status: {detail}")
