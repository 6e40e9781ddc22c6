# perplexity_mcp/models/requests.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

DEFAULT_MODEL = "sonar"
DEFAULT_TEMPERATURE = 0.7

class SearchRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    query: str = Field(
        ...,
        min_length=1,
        description="The search query to send upstream"
    )
    # Any model string is forwarded; the advertised enum is only a hint
    model: str = Field(
        default=DEFAULT_MODEL,
        description="Perplexity model identifier"
    )
    temperature: float = Field(
        default=DEFAULT_TEMPERATURE,
        ge=0.0,
        le=1.0,
        description="Sampling temperature (0.0-1.0)"
    )
    max_tokens: Optional[int] = Field(
        default=None,
        description="Upper bound on generated tokens"
    )
