# perplexity_mcp/core/__init__.py

# Only exceptions here; import SearchBridge from .bridge directly
# since it pulls in config and services.
from .exceptions import (
    BridgeException,
    UnknownCapabilityException,
    InvalidInputException,
    UpstreamException,
    InternalException,
    StartupConfigException
)

__all__ = [
    "BridgeException",
    "UnknownCapabilityException",
    "InvalidInputException",
    "UpstreamException",
    "InternalException",
    "StartupConfigException"
]
