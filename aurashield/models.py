"""Pydantic request/response models for the AuraShield API."""

import logging
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from aurashield.lexicons import VALID_SOURCES

logger = logging.getLogger(__name__)


def normalize_source(value: Any) -> str:
    """Lower-case and trim the channel; anything unrecognised becomes 'unknown'."""
    if not isinstance(value, str) or not value.strip():
        return "unknown"
    source = value.lower().strip()
    if source not in VALID_SOURCES:
        logger.warning(f'[/analyze] Invalid source "{source}", defaulting to "unknown"')
        return "unknown"
    return source


def _require_text(value: str, name: str) -> str:
    if not value.strip():
        raise ValueError(f"{name} must be a non-empty string")
    return value


class Message(BaseModel):
    """The message under analysis and who sent it."""

    model_config = ConfigDict(extra="ignore")

    sender: str = Field(...)
    text: str = Field(...)

    @field_validator("sender")
    @classmethod
    def _sender_not_blank(cls, value: str) -> str:
        return _require_text(value, "message.sender")

    @field_validator("text")
    @classmethod
    def _text_not_blank(cls, value: str) -> str:
        return _require_text(value, "message.text")


class AnalyzeRequest(BaseModel):
    """Incoming payload on POST /analyze."""

    model_config = ConfigDict(extra="ignore")

    sessionId: str = Field(...)
    message: Message = Field(...)
    source: str = Field(default="unknown")

    @field_validator("sessionId")
    @classmethod
    def _session_not_blank(cls, value: str) -> str:
        return _require_text(value, "sessionId")

    @field_validator("source", mode="before")
    @classmethod
    def _coerce_source(cls, value):
        """Clients send odd casing, unknown channels or nothing at all."""
        return normalize_source(value)


# Analysis result (also the core's return type)

class CognitiveExploitation(BaseModel):
    model_config = ConfigDict(frozen=True)

    urgency: float = 0.0
    fear: float = 0.0
    reward_bait: float = 0.0
    authority_bias: float = 0.0


class ExtractedEntities(BaseModel):
    model_config = ConfigDict(frozen=True)

    organization: Optional[str] = None
    intent: str = "general"
    channel: str = "unknown"


class AnalysisResult(BaseModel):
    """Complete risk assessment for one message. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    is_scam: bool = False
    confidence_score: float = Field(default=0.0, ge=0.0, le=1.0)
    scam_type: str = "non_scam"
    risk_level: str = "low"
    cognitive_exploitation: CognitiveExploitation = Field(default_factory=CognitiveExploitation)
    reasoning: List[str] = Field(default_factory=list)
    extracted_entities: ExtractedEntities = Field(default_factory=ExtractedEntities)
    recommendation: str = ""


# Response envelopes

class AnalyzeData(BaseModel):
    sessionId: str
    sender: str
    source: str
    timestamp: str
    analysis: AnalysisResult


class AnalyzeResponse(BaseModel):
    status: str = "success"
    message: str = "Request processed successfully"
    data: AnalyzeData


class HealthResponse(BaseModel):
    status: str = "ok"
    service: str
    version: str
    timestamp: str


class ErrorResponse(BaseModel):
    """Uniform error body for every non-2xx response."""

    error: str
    message: str
