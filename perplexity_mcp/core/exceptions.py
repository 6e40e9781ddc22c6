# perplexity_mcp/core/exceptions.py
from typing import List, Optional

from perplexity_mcp.models.responses import ErrorResponse

class BridgeException(Exception):
    """Base for every failure surfaced at the tool boundary"""
    error_code = "INTERNAL_ERROR"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(error=self.detail, error_code=self.error_code)

class UnknownCapabilityException(BridgeException):
    error_code = "UNKNOWN_CAPABILITY"

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name

class InvalidInputException(BridgeException):
    error_code = "INVALID_INPUT"

    def __init__(self, detail: str, fields: Optional[List[str]] = None):
        super().__init__(f"Invalid input: {detail}")
        self.fields = fields or []

class UpstreamException(BridgeException):
    """Raised when the Perplexity API answers with a non-success status"""
    error_code = "UPSTREAM_ERROR"

    def __init__(self, status: int, body: str):
        super().__init__(f"Perplexity API error: {body}")
        self.status = status
        self.body = body

class InternalException(BridgeException):
    error_code = "INTERNAL_ERROR"

    def __init__(self, detail: str):
        super().__init__(f"Unexpected error: {detail}")

class StartupConfigException(Exception):
    """Exception raised when required configuration is missing at startup"""
    pass
