# perplexity_mcp/models/responses.py
from pydantic import BaseModel, Field
from typing import Any, Dict, Literal

class TextBlock(BaseModel):
    type: Literal["text"] = "text"
    text: str = Field(..., description="Display-ready text")

class ToolDescriptor(BaseModel):
    name: str = Field(..., description="Tool name advertised to the host")
    description: str = Field(..., description="Human-readable summary")
    input_schema: Dict[str, Any] = Field(
        ...,
        serialization_alias="inputSchema",
        description="JSON schema of the tool arguments"
    )

class ErrorResponse(BaseModel):
    error: str = Field(..., description="Error message")
    error_code: str = Field(..., description="Error kind")
