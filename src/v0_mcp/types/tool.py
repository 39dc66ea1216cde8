"""
Host-facing tool types: the descriptor advertised to the host and the
envelope returned from every tool call.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

__all__ = ["ToolDescriptor", "ToolCallResult"]


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


@dataclass(frozen=True, slots=True)
class ToolDescriptor:
    """
    A named, schema-described operation the host may invoke.

    ``input_schema`` is frozen all the way down: nested objects are read-only
    mappings and arrays are tuples. ``as_dict()`` returns a mutable copy.
    """
    name: str
    description: str
    input_schema: Mapping[str, Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "input_schema", _freeze(self.input_schema))

    def as_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": _thaw(self.input_schema),
        }


@dataclass(frozen=True, slots=True)
class ToolCallResult:
    """Envelope for one tool call; `is_error` selects how `text` is read."""
    text: str
    is_error: bool = False

    @classmethod
    def success(cls, text: str) -> "ToolCallResult":
        return cls(text=text)

    @classmethod
    def error(cls, message: str) -> "ToolCallResult":
        return cls(text=f"Error: {message}", is_error=True)

    @property
    def content(self) -> list[dict[str, str]]:
        return [{"type": "text", "text": self.text}]

    def as_dict(self) -> dict[str, Any]:
        return {"isError": self.is_error, "content": self.content}
