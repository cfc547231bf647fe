"""
Best-effort extraction of summary fields from the model's free-text report.
The model may ignore the requested format, so every extractor falls back to a default.
"""
import re
from typing import Dict
from content_review.prompts.templates import PACKAGING_HEADING

RISK_LEVELS = ("HIGH", "MEDIUM", "LOW")
DEFAULT_RISK_LEVEL = "MEDIUM"
DEFAULT_PACKAGING = "No packaging issues found"

_RE_RISK_LEVEL = re.compile(r'Risk Level:\s*(HIGH|MEDIUM|LOW)', re.IGNORECASE)
_RE_PACKAGING = re.compile(re.escape(PACKAGING_HEADING) + r'\s*(.*?)(?=###|$)', re.DOTALL)


def extract_risk_level(analysis: str) -> str:
    match = _RE_RISK_LEVEL.search(analysis or "")
    if match:
        return match.group(1).upper()
    return DEFAULT_RISK_LEVEL


def extract_packaging(analysis: str) -> str:
    """Text between the packaging heading and the next ### heading (or the end)."""
    match = _RE_PACKAGING.search(analysis or "")
    if match:
        return match.group(1).strip()
    return DEFAULT_PACKAGING


def parse_sections(analysis: str) -> Dict[str, str]:
    return {
        "riskLevel": extract_risk_level(analysis),
        "packaging": extract_packaging(analysis),
    }
