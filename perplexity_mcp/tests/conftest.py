# tests/conftest.py
import pytest
from typing import Any, Dict, List, Optional
from aiohttp import web
from aiohttp.test_utils import TestServer

from perplexity_mcp.config.settings import Settings
from perplexity_mcp.core.bridge import SearchBridge
from perplexity_mcp.services.perplexity_client import PerplexityClient

TEST_API_KEY = "pplx-test-key"

class StubUpstream:
    """Local stand-in for the Perplexity chat completions endpoint"""

    def __init__(self):
        self.requests: List[Dict[str, Any]] = []
        self.status = 200
        self.payload: Dict[str, Any] = {
            "id": "resp-1",
            "model": "sonar",
            "object": "chat.completion",
            "created": 1700000000,
            "citations": ["https://example.com/a"],
            "choices": [{
                "index": 0,
                "finish_reason": "stop",
                "message": {"role": "assistant", "content": "Paris."}
            }]
        }
        self.raw_body: Optional[str] = None
        self.server: Optional[TestServer] = None

    async def handle(self, request: web.Request) -> web.Response:
        self.requests.append({
            "path": request.path,
            "headers": dict(request.headers),
            "json": await request.json()
        })
        if self.raw_body is not None:
            return web.Response(status=self.status, text=self.raw_body)
        return web.json_response(self.payload, status=self.status)

    @property
    def url(self) -> str:
        return str(self.server.make_url("/chat/completions"))

@pytest.fixture
async def upstream():
    """Serve a StubUpstream on a local port for the duration of a test"""
    stub = StubUpstream()
    app = web.Application()
    app.router.add_post("/chat/completions", stub.handle)

    stub.server = TestServer(app)
    await stub.server.start_server()
    yield stub
    await stub.server.close()

@pytest.fixture
def settings(upstream):
    return Settings(
        PERPLEXITY_API_KEY=TEST_API_KEY,
        PERPLEXITY_API_URL=upstream.url,
        _env_file=None
    )

@pytest.fixture
async def client(settings):
    client = PerplexityClient(
        api_key=settings.PERPLEXITY_API_KEY,
        api_url=settings.PERPLEXITY_API_URL
    )
    yield client
    await client.close()

@pytest.fixture
async def bridge(settings):
    async with SearchBridge(settings) as bridge:
        yield bridge
