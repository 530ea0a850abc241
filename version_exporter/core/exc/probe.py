from version_exporter.core.exc.base import BadRequestException
from version_exporter.enums import ExceptionAlias


class MissingParameterException(BadRequestException):
    message_pattern = ("{0} parameter is missing", "parameter")
    _exception_alias = ExceptionAlias.MissingParameter


class InvalidVersionException(BadRequestException):
    """
    Exception raised when the deployed tag supplied by the caller is not a semantic version.
    The parser's own message is used as the detail.
    """

    log_message_pattern = ("Invalid version tag {0!r}: {1}", "tag", "error")
    _exception_alias = ExceptionAlias.InvalidVersion
