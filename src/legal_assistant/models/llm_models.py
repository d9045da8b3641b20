"""
LLM-specific data models for request/response cycle.

These models are internal to the LLM layer and handle the raw communication
with the inference provider. They are separate from the business models
(FilteredQuestion) so the provider can change without touching callers.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, ConfigDict


class LLMGenerationRequest(BaseModel):
    """
    Internal request model for LLM generation.

    Standardized format sent to any LLM client implementation.
    """
    model_config = ConfigDict(frozen=True)

    prompt: str = Field(..., min_length=1, description="Complete prompt (system + user combined)")
    model: str = Field(..., description="Model name/identifier (e.g., 'gemini-2.5-flash-lite')")
    temperature: float = Field(default=0.3, ge=0.0, le=2.0, description="Sampling temperature")
    max_tokens: int = Field(default=500, ge=1, le=8192, description="Maximum tokens to generate")
    response_mime_type: Optional[str] = Field(
        default=None,
        description="Requested output MIME type (e.g., 'application/json')"
    )
    stop_sequences: Optional[list[str]] = Field(default=None, description="Stop sequences for generation")
    top_p: Optional[float] = Field(default=None, ge=0.0, le=1.0, description="Nucleus sampling parameter")


class LLMGenerationResponse(BaseModel):
    """
    Internal response model from LLM generation.

    Contains the raw generated text plus metadata for logging.
    Parsing of the content happens in the filtering layer.
    """
    model_config = ConfigDict(frozen=True)

    content: str = Field(..., description="Generated text")
    model_version: str = Field(..., description="Actual model version used")
    finish_reason: str = Field(
        ...,
        description="Why generation stopped: 'STOP', 'MAX_TOKENS', 'SAFETY', etc."
    )
    usage_tokens: Optional[int] = Field(
        default=None,
        description="Total tokens used (prompt + completion)"
    )
    prompt_tokens: Optional[int] = Field(default=None, description="Tokens in prompt")
    completion_tokens: Optional[int] = Field(default=None, description="Tokens in completion")
    latency_ms: int = Field(..., ge=0, description="Generation latency in milliseconds")
    raw_metadata: Dict[str, Any] = Field(
        default_factory=dict,
        description="Provider-specific metadata (for debugging)"
    )
