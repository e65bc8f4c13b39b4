"""Test pages router - Endpoints serving framing demo pages."""
import logging
from typing import Dict, Any, Optional

from fastapi import APIRouter, Header, HTTPException, Request
from fastapi.responses import Response

from ..controllers.pages_controller import (
    handle_get_test_page,
    handle_get_blocked_page,
    handle_form_submission,
    handle_iframe_info,
)
from ..dtos.errors import create_invalid_request_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/test-pages", tags=["Test Pages"])
info_router = APIRouter(prefix="/api", tags=["Frame Info"])


def _serve_test_page(page: str) -> Response:
    try:
        return handle_get_test_page(page)
    except Exception as e:
        logger.error(f"Error serving test page {page}: {e}")
        raise HTTPException(status_code=500, detail="Internal error")


@router.get("/same-origin")
async def same_origin_page() -> Response:
    """Page that may only be framed by its own origin."""
    return _serve_test_page("same-origin")


@router.get("/form-test")
async def form_test_page() -> Response:
    """Same-origin page carrying a form for the interaction probe."""
    return _serve_test_page("form-test")


@router.get("/secure-test")
async def secure_test_page() -> Response:
    """Page protected by both X-Frame-Options and CSP frame-ancestors."""
    return _serve_test_page("secure-test")


@router.get("/blocked")
async def blocked_page() -> Response:
    """Page that refuses to be framed anywhere."""
    return handle_get_blocked_page()


@router.post("/form-handler", status_code=200, response_model=None)
async def form_handler(request: Request):
    """
    Echo posted form data.

    Accepts JSON or urlencoded bodies; anything else is echoed as an empty object.
    """
    body = await request.body()
    try:
        return handle_form_submission(body, request.headers)
    except ValueError as e:
        logger.warning(f"Validation error in form_handler: {e}")
        return create_invalid_request_response([{"field": "body", "error": str(e)}])
    except Exception as e:
        logger.error(f"Error in form_handler: {e}")
        raise HTTPException(status_code=500, detail="Internal error")


@info_router.get("/iframe-info", status_code=200)
async def iframe_info(origin: Optional[str] = Header(None)) -> Dict[str, Any]:
    """Describe frame security headers and cross-origin restrictions."""
    return handle_iframe_info(origin)
