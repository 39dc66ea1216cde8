"""
Input models for each tool and the JSON schemas advertised to the host.

The pydantic models are what `V0Tools.call_tool` validates against; the
hand-written schema literals are what `list_tools` returns.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Final, Literal, Optional

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    TypeAdapter,
    ValidationError,
)

__all__ = [
    "V0Model",
    "DEFAULT_MODEL",
    "ChatMessage",
    "GenerateUIInput",
    "GenerateFromImageInput",
    "ChatCompleteInput",
    "SetupCheckInput",
    "GENERATE_UI_SCHEMA",
    "GENERATE_FROM_IMAGE_SCHEMA",
    "CHAT_COMPLETE_SCHEMA",
    "SETUP_CHECK_SCHEMA",
]


class V0Model(StrEnum):
    V0_1_5_MD = "v0-1.5-md"
    V0_1_5_LG = "v0-1.5-lg"
    V0_1_0_MD = "v0-1.0-md"


DEFAULT_MODEL: Final[V0Model] = V0Model.V0_1_5_MD

_MODEL_VALUES: Final[tuple[str, ...]] = tuple(m.value for m in V0Model)

_URL_ADAPTER: Final[TypeAdapter[AnyUrl]] = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    # Checked as a URL, forwarded as the caller wrote it.
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError as exc:
        reason = exc.errors()[0]["msg"] if exc.errors() else "invalid URL"
        raise ValueError(f"Invalid url: {reason}") from None
    return value


ImageUrl = Annotated[str, AfterValidator(_check_url)]


class ChatMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant", "system"]
    content: str = Field(min_length=1)


class GenerateUIInput(BaseModel):
    prompt: str = Field(min_length=1)
    model: V0Model = DEFAULT_MODEL
    stream: StrictBool = False
    context: Optional[str] = None


class GenerateFromImageInput(BaseModel):
    imageUrl: ImageUrl
    prompt: Optional[str] = None
    model: V0Model = DEFAULT_MODEL


class ChatCompleteInput(BaseModel):
    messages: list[ChatMessage] = Field(min_length=1)
    model: V0Model = DEFAULT_MODEL
    stream: StrictBool = False


class SetupCheckInput(BaseModel):
    pass


# Schemas shown to the host ------------------------------------------------


def _model_property() -> dict[str, Any]:
    return {
        "type": "string",
        "enum": list(_MODEL_VALUES),
        "default": DEFAULT_MODEL.value,
        "description": "v0 model to use for generation",
    }


GENERATE_UI_SCHEMA: Final[dict[str, Any]] = {
    "type": "object",
    "properties": {
        "prompt": {
            "type": "string",
            "description": (
                "Detailed description of the UI component to generate (e.g., "
                '"A modern login form with email, password fields and a blue submit button")'
            ),
        },
        "model": _model_property(),
        "stream": {
            "type": "boolean",
            "default": False,
            "description": "Whether to stream the response (shows generation progress)",
        },
        "context": {
            "type": "string",
            "description": "Optional context or existing code to build upon",
        },
    },
    "required": ["prompt"],
}

GENERATE_FROM_IMAGE_SCHEMA: Final[dict[str, Any]] = {
    "type": "object",
    "properties": {
        "imageUrl": {
            "type": "string",
            "format": "uri",
            "description": "URL of the image to analyze and convert to UI components",
        },
        "prompt": {
            "type": "string",
            "description": "Optional additional instructions for the generation",
        },
        "model": _model_property(),
    },
    "required": ["imageUrl"],
}

CHAT_COMPLETE_SCHEMA: Final[dict[str, Any]] = {
    "type": "object",
    "properties": {
        "messages": {
            "type": "array",
            "minItems": 1,
            "items": {
                "type": "object",
                "properties": {
                    "role": {"type": "string", "enum": ["user", "assistant", "system"]},
                    "content": {"type": "string", "minLength": 1},
                },
                "required": ["role", "content"],
            },
            "description": "Conversation history for context-aware generation",
        },
        "model": _model_property(),
        "stream": {
            "type": "boolean",
            "default": False,
            "description": "Whether to stream the response",
        },
    },
    "required": ["messages"],
}

SETUP_CHECK_SCHEMA: Final[dict[str, Any]] = {
    "type": "object",
    "properties": {},
    "required": [],
}
