"""
Scan API endpoint.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from app.config import settings
from app.logger import logger
from app.schemas.scan_request import ScanRequest
from app.schemas.scan_result import ScanErrorResponse, ScanResult
from app.services.exceptions import ScanError, ValidationError
from app.services.scan_runner import ScanRunner

router = APIRouter(tags=["Scan"])

NO_CACHE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate, max-age=0",
    "Pragma": "no-cache",
    "Expires": "0",
}

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred while scanning the website. Please try again."


def get_scan_runner() -> ScanRunner:
    """Production wiring: a runner configured from the environment."""
    return ScanRunner(settings)


def error_response(status_code: int, message: str, code: Optional[str] = None) -> JSONResponse:
    body = ScanErrorResponse(error=message, code=code)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@router.post(
    "/scan",
    response_model=ScanResult,
    responses={400: {"model": ScanErrorResponse}, 500: {"model": ScanErrorResponse}},
)
async def scan(request: ScanRequest, response: Response, runner: ScanRunner = Depends(get_scan_runner)):
    """Scan a URL and return its SEO data with AI suggestions."""
    try:
        result = await runner.scan(request.url)
    except ValidationError as e:
        return error_response(400, e.message, e.code)
    except ScanError as e:
        logger.error(f"Scan failed for {request.url}: {e.code}: {e.message}")
        return error_response(500, e.message, e.code)
    except Exception as e:
        logger.exception(f"Unexpected scan failure for {request.url}: {e}")
        return error_response(500, UNEXPECTED_ERROR_MESSAGE)
    
    response.headers.update(NO_CACHE_HEADERS)
    return result
