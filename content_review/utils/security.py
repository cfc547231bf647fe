"""
Request helpers for the review endpoint.
Handles: caller identification, address masking for logs, and filename cleanup.
"""
import os
from typing import Optional
from fastapi import Request
from content_review.config import settings
from content_review.utils.logger import logger


def get_client_ip(request: Request) -> str:
    """Identifies the caller for rate limiting.

    Proxies append to X-Forwarded-For, so the first entry is the original client.
    Those headers are caller-controlled, so they are only read when TRUST_PROXY_HEADERS is on.
    """
    if settings.TRUST_PROXY_HEADERS:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            first = forwarded.split(",")[0].strip()
            if first:
                return first

        real_ip = request.headers.get("x-real-ip")
        if real_ip and real_ip.strip():
            return real_ip.strip()

    if request.client and request.client.host:
        return request.client.host

    return "localhost"


def mask_ip(address: str) -> str:
    """Masks a client address for safe logging.
    Example: 203.0.113.42 → 203.0.***.42
    """
    if "." in address and address.count(".") == 3:
        parts = address.split(".")
        return f"{parts[0]}.{parts[1]}.***.{parts[3]}"
    if ":" in address:
        return address.split(":")[0] + ":****"
    if len(address) <= 4:
        return "****"
    return address[:2] + "****" + address[-2:]


def clean_filename(filename: Optional[str]) -> str:
    """Normalizes the caller-supplied filename.
    - Falls back to the default name when missing or blank
    - Drops any directory components
    - Removes null bytes
    """
    if not isinstance(filename, str):
        return settings.DEFAULT_FILENAME

    name = filename.replace("\x00", "").strip()
    name = os.path.basename(name.replace("\\", "/"))
    return name or settings.DEFAULT_FILENAME


def safe_log(message: str, address: Optional[str] = None) -> None:
    """Logs a message with the client address masked."""
    if address:
        logger.info(f"[{mask_ip(address)}] {message}")
    else:
        logger.info(message)
