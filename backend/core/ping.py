"""Health-check helpers."""

from importlib.metadata import PackageNotFoundError, version

SERVICE_NAME = "investment-growth-simulator"


def get_ping_message() -> str:
    """Return a static ping message."""
    return "pong"


def get_service_version() -> str:
    """Installed distribution version, or "dev" when running from a checkout."""
    try:
        return version(SERVICE_NAME)
    except PackageNotFoundError:
        return "dev"
