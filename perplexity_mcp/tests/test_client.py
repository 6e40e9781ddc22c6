# tests/test_client.py
import pytest

from perplexity_mcp.models.requests import SearchRequest
from perplexity_mcp.services.perplexity_client import SYSTEM_PROMPT
from perplexity_mcp.core.exceptions import UpstreamException

class TestPerplexityClient:
    """Test the outbound Perplexity call"""

    async def test_payload_without_max_tokens(self, client):
        payload = client.build_payload(SearchRequest(query="hello"))

        assert payload == {
            "model": "sonar",
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": "hello"}
            ],
            "temperature": 0.7
        }

    async def test_payload_with_max_tokens(self, client):
        payload = client.build_payload(
            SearchRequest(query="hello", model="sonar-pro", temperature=0.2, max_tokens=256)
        )

        assert payload["model"] == "sonar-pro"
        assert payload["temperature"] == 0.2
        assert payload["max_tokens"] == 256

    async def test_request_shape(self, client, upstream, settings):
        await client.create_completion(SearchRequest(query="What is the capital of France?"))

        assert len(upstream.requests) == 1
        sent = upstream.requests[0]
        assert sent["headers"]["Authorization"] == f"Bearer {settings.PERPLEXITY_API_KEY}"
        assert sent["headers"]["Content-Type"].startswith("application/json")
        assert [m["role"] for m in sent["json"]["messages"]] == ["system", "user"]
        assert sent["json"]["messages"][1]["content"] == "What is the capital of France?"

    async def test_parses_response(self, client, upstream):
        response = await client.create_completion(SearchRequest(query="q"))

        assert response.answer == "Paris."
        assert response.citations == ["https://example.com/a"]
        assert response.model == "sonar"

    async def test_error_status_raises_with_body(self, client, upstream):
        upstream.status = 401
        upstream.raw_body = '{"error": "invalid api key"}'

        with pytest.raises(UpstreamException) as exc_info:
            await client.create_completion(SearchRequest(query="q"))

        assert exc_info.value.status == 401
        assert exc_info.value.body == '{"error": "invalid api key"}'

    async def test_session_reused(self, client, upstream):
        await client.create_completion(SearchRequest(query="one"))
        session = client.session
        await client.create_completion(SearchRequest(query="two"))

        assert client.session is session
        assert len(upstream.requests) == 2

    async def test_close(self, client, upstream):
        await client.create_completion(SearchRequest(query="q"))
        await client.close()

        assert client.session is None
