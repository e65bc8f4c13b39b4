"""Host context value object - the page that embeds the frame."""
from dataclasses import dataclass
from urllib.parse import urlsplit

from .origin import origin_of


@dataclass(frozen=True)
class HostContext:
    """Host page context - immutable."""
    origin: str
    user_agent: str

    @property
    def protocol(self) -> str:
        """Scheme of the host page followed by a colon, e.g. ``http:``."""
        return f"{urlsplit(self.origin).scheme}:"

    @property
    def normalized_origin(self) -> str:
        return origin_of(self.origin) or self.origin

    @property
    def page_url(self) -> str:
        """URL of the inspector page itself."""
        return f"{self.normalized_origin}/"
