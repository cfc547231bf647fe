"""
Client side of the review service: loads text, calls the endpoint, renders and exports the report.
"""
import os
from pathlib import Path
from typing import Any, Dict, Optional
import httpx
from content_review.config import settings
from content_review.utils.logger import logger

MIN_CONTENT_CHARS = 10
ALLOWED_EXTENSIONS = {".txt"}
MANUAL_INPUT_FILENAME = "manual-input.txt"

RISK_BADGES = {
    "HIGH": ("🚨", "Immediate attention required for compliance"),
    "MEDIUM": ("⚠️", "Some issues found, review recommended"),
    "LOW": ("✅", "Minor or no issues found"),
}


class ClientInputError(ValueError):
    """Raised before any request is sent when local input is unusable."""


class ReviewRequestError(Exception):
    """The service answered with an error envelope."""
    def __init__(self, status_code: int, error: str, message: str, retry_after: Optional[int] = None):
        super().__init__(f"{error}: {message}")
        self.status_code = status_code
        self.error = error
        self.message = message
        self.retry_after = retry_after


# ==================== INPUT ====================

def load_text_file(path) -> str:
    """Reads a .txt file and returns its trimmed content."""
    path = Path(path)
    if path.suffix.lower() not in ALLOWED_EXTENSIONS:
        raise ClientInputError(
            "Please upload only .txt files, or copy-paste your content directly into the text box."
        )
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ClientInputError(f"Error reading file: {str(e)}") from e

    text = text.strip()
    if len(text) < MIN_CONTENT_CHARS:
        raise ClientInputError("File appears to be empty or too short. Please check the content.")
    return text


def validate_pasted_text(text: Optional[str]) -> str:
    if not text or not text.strip():
        raise ClientInputError("Please upload a file or paste content to analyze.")
    return text


# ==================== REQUEST ====================

class ReviewClient:
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None,
                 transport: Optional[httpx.BaseTransport] = None):
        self.base_url = (base_url or settings.REVIEW_API_URL).rstrip("/")
        self.timeout = timeout or settings.CLIENT_TIMEOUT_SECONDS
        self._transport = transport

    def review(self, content: str, filename: Optional[str] = None) -> Dict[str, Any]:
        """Posts the document and returns the decoded review envelope."""
        payload = {"content": content, "filename": filename or MANUAL_INPUT_FILENAME}
        try:
            with httpx.Client(base_url=self.base_url, timeout=self.timeout, transport=self._transport) as client:
                response = client.post("/api/review-document", json=payload)
        except httpx.RequestError as e:
            logger.warning(f"Review request to {self.base_url} failed: {str(e)}")
            raise ReviewRequestError(0, "Network error", str(e) or type(e).__name__) from e

        try:
            data = response.json()
        except ValueError:
            data = {}
        # Proxies sometimes answer with a JSON list or string
        if not isinstance(data, dict):
            data = {}

        if response.is_error:
            logger.warning(f"Review request failed with HTTP {response.status_code}")
            raise ReviewRequestError(
                response.status_code,
                data.get("error", "Request failed"),
                data.get("message", f"Server error: {response.status_code}"),
                data.get("retryAfter"),
            )
        if not data:
            raise ReviewRequestError(response.status_code, "Invalid response", "The server returned an unreadable review.")
        return data


# ==================== RENDERING ====================

def risk_badge(level: Optional[str]) -> str:
    level = (level or "MEDIUM").upper()
    icon, description = RISK_BADGES.get(level, RISK_BADGES["MEDIUM"])
    if level not in RISK_BADGES:
        level = "MEDIUM"
    return f"{icon} Risk Level: {level} - {description}"


def render_report(result: Dict[str, Any]) -> str:
    sections = result.get("sections") or {}
    usage = result.get("usage") or {}
    lines = [
        f"Review of {result.get('filename', 'document')}",
        risk_badge(sections.get("riskLevel")),
        "",
        "Packaging check:",
        sections.get("packaging", ""),
        "",
        result.get("analysis", ""),
        "",
        f"Characters processed: {usage.get('charactersProcessed', 0)} | "
        f"Requests remaining this minute: {usage.get('requestsRemaining', 0)}",
    ]
    return "\n".join(lines)


def export_markdown(result: Dict[str, Any], directory=".") -> Path:
    """Writes corrected_<filename>.md with the review report.

    The service never returns a corrected draft, so the export carries the analysis.
    """
    filename = os.path.basename(result.get("filename") or "document")
    target = Path(directory) / f"corrected_{filename}.md"
    sections = result.get("sections") or {}

    body = "\n".join([
        f"# Content review: {filename}",
        "",
        f"**Risk Level:** {sections.get('riskLevel', 'MEDIUM')}",
        f"**Reviewed at:** {result.get('timestamp', '')}",
        "",
        result.get("analysis", ""),
        "",
    ])
    target.write_text(body, encoding="utf-8")
    logger.info(f"Exported review to {target}")
    return target
