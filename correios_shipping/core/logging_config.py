"""
Logging setup for the standalone app.

Inside a host platform the host configures logging; modules only call
logging.getLogger(__name__).
"""
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once."""
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level.upper())
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level.upper())

    # zeep logs every WSDL import at INFO
    logging.getLogger("zeep").setLevel(logging.WARNING)
