from datetime import datetime, timezone
from fastapi import APIRouter, Request
from content_review.config import settings
from content_review.errors import (
    ConfigurationError,
    InvalidInput,
    MethodNotAllowed,
    PayloadTooLarge,
    RateLimited,
)
from content_review.schemas import ErrorResponse, ReviewResponse, ReviewSections, ReviewUsage
from content_review.services.llm_service import llm_service
from content_review.services.report_parser import parse_sections
from content_review.utils.logger import logger
from content_review.utils.rate_limit import rate_limiter
from content_review.utils.security import clean_filename, get_client_ip, safe_log

router = APIRouter()

REVIEW_PATH = "/api/review-document"

# Every method is routed here so a wrong one gets the structured 405 instead of FastAPI's default
ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


async def _read_payload(request: Request) -> dict:
    try:
        body = await request.json()
    except ValueError:
        raise InvalidInput("Request body must be a JSON object with a 'content' field")
    if not isinstance(body, dict):
        raise InvalidInput("Request body must be a JSON object with a 'content' field")
    return body


def validate_content(content) -> str:
    """Rejects missing, blank and oversized content. Returns it untouched otherwise."""
    if not isinstance(content, str) or not content.strip():
        raise InvalidInput()
    if len(content) > settings.MAX_CONTENT_LENGTH:
        raise PayloadTooLarge()
    return content


@router.api_route(
    REVIEW_PATH,
    methods=ALL_METHODS,
    response_model=ReviewResponse,
    responses={code: {"model": ErrorResponse} for code in (400, 401, 405, 408, 429, 500)},
)
async def review_document(request: Request):
    """Checks method, rate limit, credentials and input, then runs the compliance review."""
    if request.method != "POST":
        raise MethodNotAllowed()

    client_ip = get_client_ip(request)
    if not rate_limiter.is_allowed(client_ip):
        safe_log("Rate limit exceeded", client_ip)
        raise RateLimited()

    if not llm_service.is_configured():
        logger.error(f"No API key configured for provider '{llm_service.provider}'")
        raise ConfigurationError()

    body = await _read_payload(request)
    content = validate_content(body.get("content"))
    filename = clean_filename(body.get("filename"))

    safe_log(f"Processing document: {filename} Length: {len(content)}", client_ip)
    analysis = await llm_service.review_document(content, filename)
    sections = parse_sections(analysis)
    logger.info(f"Analysis completed: {filename} risk={sections['riskLevel']}")

    return ReviewResponse(
        success=True,
        filename=filename,
        analysis=analysis,
        sections=ReviewSections(**sections),
        timestamp=_utc_timestamp(),
        usage=ReviewUsage(
            characters_processed=len(content),
            requests_remaining=rate_limiter.remaining(client_ip),
        ),
    )
