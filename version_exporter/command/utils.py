import sys

from loguru import logger


def split_bind(bind: str) -> tuple[str, int]:
    """
    Split a listen address into host and port.

    An empty host, as in ":9333", listens on all interfaces.
    """

    host, sep, port = bind.rpartition(":")

    if not sep or not port.isdigit():
        raise ValueError(f"invalid bind address {bind!r}, expected [host]:port")

    return host.strip("[]") or "0.0.0.0", int(port)


def configure_logging(debug: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if debug else "INFO")

    if debug:
        logger.debug("enabled debug mode")
