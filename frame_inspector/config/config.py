"""Configuration module for frame-inspector."""
import os
from pathlib import Path
from typing import Optional

from .. import __version__

DEFAULT_TEST_PAGES_DIR = Path(__file__).resolve().parent.parent / "test_pages"


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    """Get environment variable, treating an empty value as unset."""
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def get_test_pages_dir() -> Path:
    """Get the directory the test pages are served from."""
    return Path(_get_env("FRAME_INSPECTOR_TEST_PAGES_DIR", str(DEFAULT_TEST_PAGES_DIR)))


def get_host_origin() -> str:
    """Get the origin the inspector page (and its frame host) runs at."""
    return _get_env("FRAME_INSPECTOR_HOST_ORIGIN", f"http://localhost:{get_server_port()}")


def get_user_agent() -> str:
    """Get the user agent the headless inspector reports and sends."""
    return _get_env("FRAME_INSPECTOR_USER_AGENT", f"frame-inspector/{__version__} (headless same-origin policy explorer)")


def get_server_host() -> str:
    """Get the interface uvicorn binds to."""
    return _get_env("FRAME_INSPECTOR_HOST", "0.0.0.0")


def get_server_port() -> int:
    """Get the port uvicorn binds to."""
    return int(_get_env("FRAME_INSPECTOR_PORT", "5000"))


def get_log_level() -> str:
    """Get the application log level name."""
    return _get_env("FRAME_INSPECTOR_LOG_LEVEL", "INFO").upper()


def get_fetch_timeout() -> float:
    """Get the timeout in seconds for frame page fetches."""
    return float(_get_env("FRAME_INSPECTOR_FETCH_TIMEOUT", "10"))
