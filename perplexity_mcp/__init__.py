"""Perplexity AI web search exposed as an MCP tool"""

__version__ = "0.1.0"
