"""FastAPI application entrypoint for frame-inspector."""
import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from pydantic import ValidationError

# Load environment variables from .env file
load_dotenv()

from . import __version__
from .config.config import get_log_level, get_server_host, get_server_port
from .presentation.dtos.errors import create_validation_error_response, create_internal_error_response
from .presentation.routers.pages_router import router as pages_router, info_router

# Configure logging
logging.basicConfig(
    level=get_log_level(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
# Reduce urllib3 logging to WARNING to reduce noise from frame fetches
logging.getLogger('urllib3').setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

app = FastAPI(title="frame-inspector", version=__version__)

# Include routers
app.include_router(pages_router)
app.include_router(info_router)


@app.exception_handler(ValidationError)
async def validation_exception_handler(request, exc: ValidationError):
    """Handle Pydantic validation errors."""
    logger.error(f"Pydantic validation error on {request.url.path}: {exc.errors()}")
    return create_validation_error_response(exc)


@app.exception_handler(Exception)
async def general_exception_handler(request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.error(f"Unexpected error: {exc}")
    return create_internal_error_response()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=get_server_host(), port=get_server_port())
