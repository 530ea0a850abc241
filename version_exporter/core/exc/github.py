from fastapi import status

from version_exporter.core.exc.base import BaseHTTPException
from version_exporter.enums import ExceptionAlias


class FetchException(BaseHTTPException):
    """
    Exception raised when the releases of a repository could not be retrieved.
    """

    log_level = "warning"
    status_code = status.HTTP_400_BAD_REQUEST
    message_pattern = ("failed to get repository releases: {0}", "error")
    log_message_pattern = ("Failed to get releases for {0}: {1}", "repo", "error")
    _exception_alias = ExceptionAlias.ReleasesFetchFailed


class UpstreamStatusException(FetchException):
    """
    Exception raised when GitHub answers the releases request with a non-success status code.
    """

    message_pattern = ("github responded a non-200 status code: {0}", "upstream_status")
    log_message_pattern = ("GitHub responded {0} for {1}: {2}", "upstream_status", "repo", "response_text")
    _exception_alias = ExceptionAlias.UpstreamStatus


class DecodeException(BaseHTTPException):
    """
    Exception raised when the releases response body is not a list of releases.
    """

    log_level = "warning"
    status_code = status.HTTP_400_BAD_REQUEST
    message_pattern = ("failed to parse the response body: {0}", "error")
    log_message_pattern = ("Failed to parse releases of {0}: {1}", "repo", "error")
    _exception_alias = ExceptionAlias.ReleasesDecodeFailed
