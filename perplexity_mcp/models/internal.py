# perplexity_mcp/models/internal.py
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from enum import Enum

class MessageRole(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"

class UpstreamMessage(BaseModel):
    role: MessageRole = MessageRole.ASSISTANT
    content: str

class Choice(BaseModel):
    index: int = 0
    finish_reason: Optional[str] = None
    message: UpstreamMessage

class UpstreamResponse(BaseModel):
    id: Optional[str] = None
    model: Optional[str] = None
    object: Optional[str] = None
    created: Optional[int] = None
    citations: List[str] = Field(default_factory=list)
    choices: List[Choice] = Field(..., min_length=1)

    @field_validator("citations", mode="before")
    @classmethod
    def parse_citations(cls, v):
        return [] if v is None else v

    @property
    def answer(self) -> str:
        return self.choices[0].message.content
