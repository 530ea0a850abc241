from enum import StrEnum


class ExceptionAlias(StrEnum):
    """
    Machine readable codes attached to client-facing errors.

    MissingParameter: A required query parameter was not supplied.
    InvalidVersion: The supplied tag is not a semantic version.
    ReleasesFetchFailed: The releases request could not be completed.
    UpstreamStatus: GitHub answered with a non-success status code.
    ReleasesDecodeFailed: The releases response body could not be decoded.
    """

    MissingParameter = "MissingParameter"
    InvalidVersion = "InvalidVersion"
    ReleasesFetchFailed = "ReleasesFetchFailed"
    UpstreamStatus = "UpstreamStatus"
    ReleasesDecodeFailed = "ReleasesDecodeFailed"
