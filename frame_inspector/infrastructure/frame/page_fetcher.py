"""HTTP page fetcher for frame navigation."""
import logging
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional

import requests
from requests.structures import CaseInsensitiveDict

logger = logging.getLogger(__name__)


class PageFetchError(Exception):
    """Raised when a page cannot be retrieved at the transport level."""


@dataclass(frozen=True)
class FetchedPage:
    """Response data a frame needs to render and police a page."""
    url: str
    status_code: int
    text: str
    headers: Mapping[str, str] = field(default_factory=CaseInsensitiveDict)
    encoding: Optional[str] = None


PageFetcher = Callable[[str], FetchedPage]


def build_requests_fetcher(user_agent: str, timeout: float = 10.0) -> PageFetcher:
    """Build a fetcher backed by requests.get."""

    def fetch(url: str) -> FetchedPage:
        try:
            logger.debug(f"Fetching frame page: {url}")
            response = requests.get(
                url,
                headers={"User-Agent": user_agent},
                timeout=timeout,
                allow_redirects=True
            )
        except requests.exceptions.RequestException as e:
            logger.warning(f"Frame page fetch failed for {url}: {type(e).__name__}: {e}")
            raise PageFetchError(str(e)) from e

        logger.info(
            f"Fetched frame page {response.url}",
            extra={"url": response.url, "status_code": response.status_code},
        )
        return FetchedPage(
            url=response.url,
            status_code=response.status_code,
            text=response.text,
            headers=CaseInsensitiveDict(response.headers),
            encoding=response.encoding,
        )

    return fetch
