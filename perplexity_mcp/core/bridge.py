# perplexity_mcp/core/bridge.py
import logging
import time
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError

from perplexity_mcp.config.settings import Settings
from perplexity_mcp.models.requests import SearchRequest
from perplexity_mcp.models.internal import UpstreamResponse
from perplexity_mcp.models.responses import TextBlock, ToolDescriptor
from perplexity_mcp.services.perplexity_client import PerplexityClient
from perplexity_mcp.core.exceptions import (
    BridgeException,
    InternalException,
    InvalidInputException,
    UnknownCapabilityException
)

logger = logging.getLogger(__name__)

WEB_SEARCH_TOOL = "web_search"
SUPPORTED_MODELS = ["sonar-reasoning-pro", "sonar", "sonar-pro"]

WEB_SEARCH_DESCRIPTOR = ToolDescriptor(
    name=WEB_SEARCH_TOOL,
    description="Performs web searches using Perplexity AI. Returns AI-generated answers with citations.",
    input_schema={
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": "Search query"
            },
            "model": {
                "type": "string",
                "description": 'Model to use for the response. Defaults to "sonar".',
                "enum": SUPPORTED_MODELS
            }
        },
        "required": ["query"]
    }
)

def format_sources(citations: List[str]) -> str:
    lines = [f"{i}. {url}" for i, url in enumerate(citations, start=1)]
    return "\n\nSources:\n" + "\n".join(lines)

def format_response(response: UpstreamResponse) -> List[TextBlock]:
    blocks = [TextBlock(text=response.answer)]
    if response.citations:
        blocks.append(TextBlock(text=format_sources(response.citations)))
    return blocks

class SearchBridge:
    """
    Translates web_search tool invocations into Perplexity API calls.

    Every invocation is independent: validation, one outbound call, then
    formatting. Failures leave as a BridgeException subclass only.
    """

    def __init__(self, settings: Settings, client: Optional[PerplexityClient] = None):
        self.settings = settings
        self.client = client or PerplexityClient(
            api_key=settings.PERPLEXITY_API_KEY,
            api_url=settings.PERPLEXITY_API_URL
        )

    def list_capabilities(self) -> List[ToolDescriptor]:
        return [WEB_SEARCH_DESCRIPTOR]

    def parse_request(self, raw_arguments: Optional[Mapping[str, Any]]) -> SearchRequest:
        """Validate untrusted tool arguments into a SearchRequest"""
        try:
            request = SearchRequest.model_validate(dict(raw_arguments or {}))
        except ValidationError as e:
            errors = e.errors()
            fields = [".".join(str(part) for part in err["loc"]) for err in errors]
            detail = "; ".join(
                f"{field}: {err['msg']}" for field, err in zip(fields, errors)
            )
            raise InvalidInputException(detail, fields=fields) from e
        except (TypeError, ValueError) as e:
            # arguments that are not a mapping at all
            raise InvalidInputException(str(e)) from e

        if request.model not in SUPPORTED_MODELS:
            logger.warning(f"Forwarding unadvertised model '{request.model}' to Perplexity")
        return request

    async def invoke(self, tool_name: str, raw_arguments: Optional[Dict[str, Any]]) -> List[TextBlock]:
        if tool_name != WEB_SEARCH_TOOL:
            logger.warning(f"Rejected call to unknown tool: {tool_name}")
            raise UnknownCapabilityException(tool_name)

        request = self.parse_request(raw_arguments)
        start_time = time.time()
        logger.info(f"web_search query: {request.query[:50]}... (model={request.model})")

        try:
            response = await self.client.create_completion(request)
            blocks = format_response(response)
        except BridgeException:
            raise
        except Exception as e:
            logger.error(f"web_search failed for query '{request.query[:50]}': {e}", exc_info=True)
            raise InternalException(str(e) or type(e).__name__) from e

        logger.info(f"web_search completed in {time.time() - start_time:.2f}s, {len(blocks)} blocks")
        return blocks

    async def close(self):
        await self.client.close()

    async def __aenter__(self) -> "SearchBridge":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()
