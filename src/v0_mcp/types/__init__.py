from .chat import ServiceResult, Usage
from .tool import ToolCallResult, ToolDescriptor

__all__ = [
    "ServiceResult",
    "Usage",
    "ToolCallResult",
    "ToolDescriptor",
]
