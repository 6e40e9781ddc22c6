"""Service layer modules"""

from .perplexity_client import PerplexityClient, SYSTEM_PROMPT

__all__ = ["PerplexityClient", "SYSTEM_PROMPT"]
