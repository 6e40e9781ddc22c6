# perplexity_mcp/services/perplexity_client.py
import aiohttp
import logging
import time
from typing import Any, Dict, List, Optional

from perplexity_mcp.config.settings import DEFAULT_API_URL
from perplexity_mcp.models.requests import SearchRequest
from perplexity_mcp.models.internal import MessageRole, UpstreamMessage, UpstreamResponse
from perplexity_mcp.core.exceptions import UpstreamException

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "Be precise and concise. Provide a clear, factual answer with relevant details. "
    "Return only the final answer."
)

class PerplexityClient:
    def __init__(self, api_key: str, api_url: str = DEFAULT_API_URL):
        self.api_key = api_key
        self.api_url = api_url
        self.session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Lazy initialization of HTTP session"""
        # No timeout override: aiohttp's default client timeout applies
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession()
        return self.session

    def build_messages(self, request: SearchRequest) -> List[UpstreamMessage]:
        return [
            UpstreamMessage(role=MessageRole.SYSTEM, content=SYSTEM_PROMPT),
            UpstreamMessage(role=MessageRole.USER, content=request.query),
        ]

    def build_headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}"
        }

    def build_payload(self, request: SearchRequest) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "model": request.model,
            "messages": [m.model_dump(mode="json") for m in self.build_messages(request)],
            "temperature": request.temperature,
        }
        if request.max_tokens is not None:
            payload["max_tokens"] = request.max_tokens
        return payload

    async def create_completion(self, request: SearchRequest) -> UpstreamResponse:
        """
        Send one chat completion request to Perplexity.

        Raises UpstreamException with the body verbatim on any non-2xx status.
        Transport and decoding errors propagate to the caller unchanged.
        """
        session = await self._get_session()
        start_time = time.time()

        async with session.post(
            self.api_url,
            json=self.build_payload(request),
            headers=self.build_headers()
        ) as response:
            if not 200 <= response.status < 300:
                error_text = await response.text()
                logger.warning(f"Perplexity API returned status {response.status}: {error_text[:200]}")
                raise UpstreamException(response.status, error_text)

            data = await response.json(content_type=None)

        result = UpstreamResponse.model_validate(data)
        logger.info(
            f"Perplexity answered in {time.time() - start_time:.2f}s "
            f"with {len(result.citations)} citations"
        )
        return result

    async def close(self):
        """Close the HTTP session"""
        if self.session and not self.session.closed:
            await self.session.close()
        self.session = None
