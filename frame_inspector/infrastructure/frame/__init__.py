"""Frame infrastructure package."""
from .framing_policy import is_framing_allowed
from .html_document import HtmlDocument, HtmlForm, HtmlInput
from .http_frame import HttpFrame, decode_data_url
from .page_fetcher import FetchedPage, PageFetcher, PageFetchError, build_requests_fetcher

__all__ = [
    "is_framing_allowed",
    "HtmlDocument",
    "HtmlForm",
    "HtmlInput",
    "HttpFrame",
    "decode_data_url",
    "FetchedPage",
    "PageFetcher",
    "PageFetchError",
    "build_requests_fetcher",
]
