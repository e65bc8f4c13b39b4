"""Preset targets value object."""
from types import MappingProxyType
from typing import Mapping, Optional

DEFAULT_TARGET = (
    "data:text/html,<h1 style='font-family: Arial; color: %23333; padding: 20px;'>Sample Page</h1>"
    "<p style='font-family: Arial; color: %23666; padding: 0 20px;'>"
    "This is a sample page for testing iframe data extraction.</p>"
)

BLOCKED_PRESET = "blocked-test"

PRESETS: Mapping[str, str] = MappingProxyType({
    "same-origin": "/api/test-pages/same-origin",
    "form-test": "/api/test-pages/form-test",
    "secure-test": "/api/test-pages/secure-test",
    BLOCKED_PRESET: "/api/test-pages/blocked",
    "google": "https://www.google.com",
    "data-url": (
        'data:text/html,<h1 style="font-family: Arial; color: %23333; padding: 20px;">Sample Data URL</h1>'
        '<p style="font-family: Arial; color: %23666; padding: 0 20px;">'
        "This is content from a data URL - fully accessible.</p>"
        '<script>console.log("Data URL script executed");</script>'
    ),
})


def resolve_preset(name: str) -> Optional[str]:
    """Return the target for a preset name, or None when the name is unknown."""
    return PRESETS.get(name)
