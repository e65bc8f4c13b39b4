"""Test pages controller - Serves framing demo pages and echoes form posts."""
import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional
from urllib.parse import parse_qsl

from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from ...config.config import get_test_pages_dir
from ..dtos.page_models import FormHandlerResponse, IframeInfoResponse

logger = logging.getLogger(__name__)

X_FRAME_OPTIONS = "X-Frame-Options"
CONTENT_SECURITY_POLICY = "Content-Security-Policy"

TEST_PAGE_NOT_FOUND = "Test page not found"

# page name -> (file name, response headers)
TEST_PAGES: Dict[str, tuple] = {
    "same-origin": ("same-origin.html", {X_FRAME_OPTIONS: "SAMEORIGIN"}),
    "form-test": ("form-test.html", {X_FRAME_OPTIONS: "SAMEORIGIN"}),
    "secure-test": (
        "secure-test.html",
        {X_FRAME_OPTIONS: "SAMEORIGIN", CONTENT_SECURITY_POLICY: "frame-ancestors 'self'"},
    ),
}

ECHOED_HEADERS = ("content-type", "user-agent", "origin", "referer")

BLOCKED_PAGE_HTML = """
      <!DOCTYPE html>
      <html>
      <head>
          <title>Blocked Content</title>
          <style>
              body { font-family: Arial; padding: 40px; text-align: center; background: #f8d7da; color: #721c24; }
              .error { background: white; padding: 30px; border-radius: 10px; display: inline-block; box-shadow: 0 4px 8px rgba(0,0,0,0.1); }
          </style>
      </head>
      <body>
          <div class="error">
              <h1>Frame Access Denied</h1>
              <p>This page cannot be displayed in a frame due to X-Frame-Options: DENY</p>
              <p>This simulates how external sites protect against clickjacking.</p>
          </div>
      </body>
      </html>
    """

SECURITY_HEADERS_INFO = {
    "X-Frame-Options": "Information about frame embedding",
    "Content-Security-Policy": "Controls resource loading and execution",
    "X-Content-Type-Options": "Prevents MIME type sniffing",
    "Referrer-Policy": "Controls referrer information",
}

COMMON_RESTRICTIONS = [
    "Cross-origin iframe access is heavily restricted",
    "Same-origin policy applies to DOM access",
    "postMessage() is the recommended communication method",
    "Cookies and storage access may be limited",
]


def handle_get_test_page(page: str) -> Response:
    """
    Serve a named test page with its framing headers.

    Missing or unreadable files answer 404 with a fixed plain-text body.
    """
    file_name, headers = TEST_PAGES[page]
    file_path = get_test_pages_dir() / file_name

    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as e:
        logger.warning(f"Test page file unreadable: {file_path}: {type(e).__name__}")
        return PlainTextResponse(TEST_PAGE_NOT_FOUND, status_code=404, headers=headers)

    logger.info(f"Serving test page {page}", extra={"page": page, "file_path": str(file_path)})
    return HTMLResponse(content, headers=headers)


def handle_get_blocked_page() -> Response:
    """Serve the inline page that refuses to be framed at all."""
    return HTMLResponse(BLOCKED_PAGE_HTML, headers={X_FRAME_OPTIONS: "DENY"})


def _parse_body(body: bytes, content_type: str) -> Any:
    media_type = content_type.split(";")[0].strip().lower()

    if media_type == "application/json" or media_type.endswith("+json"):
        if not body.strip():
            return {}
        try:
            return json.loads(body)
        except ValueError as e:
            raise ValueError(f"Malformed JSON body: {e}") from e

    if media_type == "application/x-www-form-urlencoded":
        return dict(parse_qsl(body.decode("utf-8"), keep_blank_values=True))

    return {}


def _iso_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def handle_form_submission(body: bytes, headers: Mapping[str, str]) -> Dict[str, Any]:
    """
    Echo a posted form back as JSON.

    Raises:
        ValueError: If a JSON body cannot be parsed
    """
    data = _parse_body(body, headers.get("content-type", ""))
    echoed = {name: headers[name] for name in ECHOED_HEADERS if name in headers}

    logger.info(f"Form submission received with {len(echoed)} echoed headers")

    return FormHandlerResponse(
        success=True,
        message="Form data received successfully",
        data=data,
        timestamp=_iso_timestamp(),
        headers=echoed,
    ).model_dump()


def handle_iframe_info(origin: Optional[str]) -> Dict[str, Any]:
    """Describe frame security headers and general cross-origin restrictions."""
    return IframeInfoResponse(
        server_origin=origin or "unknown",
        security_headers=SECURITY_HEADERS_INFO,
        common_restrictions=COMMON_RESTRICTIONS,
    ).model_dump(by_alias=True)
