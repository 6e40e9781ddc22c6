# perplexity_mcp/models/__init__.py
"""Data models"""

from .requests import SearchRequest, DEFAULT_MODEL, DEFAULT_TEMPERATURE
from .responses import TextBlock, ToolDescriptor, ErrorResponse
from .internal import (
    MessageRole,
    UpstreamMessage,
    Choice,
    UpstreamResponse
)

__all__ = [
    "SearchRequest",
    "DEFAULT_MODEL",
    "DEFAULT_TEMPERATURE",
    "TextBlock",
    "ToolDescriptor",
    "ErrorResponse",
    "MessageRole",
    "UpstreamMessage",
    "Choice",
    "UpstreamResponse"
]
