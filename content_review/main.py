from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from content_review.routes import review
from content_review.config import settings
from content_review.errors import MethodNotAllowed, ProcessingFailure, ReviewError
from content_review.services.llm_service import llm_service
from content_review.utils.logger import logger

app = FastAPI(
    title="Content Review API",
    description="Compliance and quality review of marketing copy, powered by a generative-language model",
    version="1.0.0"
)

# Allow CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(exc: ReviewError) -> JSONResponse:
    headers = {}
    if exc.retry_after is not None:
        headers["Retry-After"] = str(exc.retry_after)
    if isinstance(exc, MethodNotAllowed):
        headers["Allow"] = "POST"
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(include_details=settings.ENVIRONMENT == "development"),
        headers=headers,
    )


@app.exception_handler(ReviewError)
async def review_error_handler(request: Request, exc: ReviewError):
    if exc.status_code >= 500:
        logger.error(f"{exc.error}: {exc.details or exc.message}")
    return _error_response(exc)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {str(exc)}")
    return _error_response(ProcessingFailure(details=str(exc)))


app.include_router(review.router)

@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "running", "environment": settings.ENVIRONMENT, "provider": llm_service.provider}
