from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

RiskLevel = Literal["HIGH", "MEDIUM", "LOW"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ReviewSections(_CamelModel):
    risk_level: RiskLevel = Field("MEDIUM", alias="riskLevel")
    packaging: str


class ReviewUsage(_CamelModel):
    characters_processed: int = Field(alias="charactersProcessed")
    requests_remaining: int = Field(alias="requestsRemaining")


class ReviewResponse(_CamelModel):
    success: bool = True
    filename: str
    analysis: str
    sections: ReviewSections
    timestamp: str
    usage: ReviewUsage


class ErrorResponse(_CamelModel):
    error: str
    message: str
    retry_after: Optional[int] = Field(None, alias="retryAfter")
    details: Optional[str] = None
