"""
v0-mcp - expose the v0 UI generation API to agent hosts as MCP tools.
"""

import logging

from .errors import (
    ClassifiedError,
    ConfigError,
    ErrorKind,
    V0Error,
    classify_error,
    retry_delay,
    should_retry,
    user_message,
)
from .schemas import ChatMessage, V0Model
from .config import V0Config, load_config
from .types import ServiceResult, ToolCallResult, ToolDescriptor, Usage
from .service import V0Service
from .tools import V0Tools

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    "ClassifiedError",
    "ConfigError",
    "ErrorKind",
    "V0Error",
    "classify_error",
    "retry_delay",
    "should_retry",
    "user_message",
    "ChatMessage",
    "V0Model",
    "V0Config",
    "load_config",
    "ServiceResult",
    "ToolCallResult",
    "ToolDescriptor",
    "Usage",
    "V0Service",
    "V0Tools",
]
