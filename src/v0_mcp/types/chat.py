"""Executor-level result types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from v0_mcp.errors import ClassifiedError, V0Error, user_message


@dataclass(frozen=True, slots=True)
class Usage:
    """Token accounting reported by a non-streaming completion."""

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int

    def as_dict(self) -> dict[str, int]:
        return {
            "promptTokens": self.prompt_tokens,
            "completionTokens": self.completion_tokens,
            "totalTokens": self.total_tokens,
        }


@dataclass(frozen=True)
class ServiceResult:
    """Outcome of one backend operation.

    Build through `ok` or `failed`; exactly one of `content` or `error`
    is set, discriminated by `success`.
    """

    success: bool
    content: Optional[str] = None
    model: Optional[str] = None
    usage: Optional[Usage] = None
    error: Optional[str] = None
    failure: Optional[ClassifiedError] = None

    @classmethod
    def ok(
        cls, content: str, model: str, usage: Optional[Usage] = None
    ) -> "ServiceResult":
        return cls(success=True, content=content, model=model, usage=usage)

    @classmethod
    def failed(cls, failure: ClassifiedError) -> "ServiceResult":
        return cls(success=False, error=user_message(failure), failure=failure)

    @property
    def metadata(self) -> dict[str, Any]:
        if self.success:
            metadata: dict[str, Any] = {"model": self.model}
            if self.usage is not None:
                metadata["usage"] = self.usage.as_dict()
            return metadata
        return self.failure.as_metadata() if self.failure else {}

    def raise_for_error(self) -> None:
        if self.success:
            return
        if self.failure is None:
            raise RuntimeError(self.error or "Operation failed")
        raise V0Error(self.failure)
