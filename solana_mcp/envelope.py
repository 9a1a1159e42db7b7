"""Uniform result shape returned to the host for every tool invocation."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True, slots=True)
class ContentBlock:
    text: str
    type: str = "text"

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.type, "text": self.text}


@dataclass(frozen=True, slots=True)
class InvocationResult:
    content: List[ContentBlock] = field(default_factory=list)
    is_error: bool = False

    @property
    def text(self) -> str:
        return "\n".join(block.text for block in self.content)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": [block.to_dict() for block in self.content],
            "isError": self.is_error,
        }


@dataclass(frozen=True, slots=True)
class ToolFailure:
    """What went wrong, reduced to a message."""

    message: str


def failure_from_exception(exc: BaseException) -> ToolFailure:
    message = str(exc).strip()
    return ToolFailure(message or type(exc).__name__)


def text_result(payload: Any) -> InvocationResult:
    """Pretty-print a JSON-serializable payload into a single text block."""
    return InvocationResult(content=[ContentBlock(json.dumps(payload, indent=2))])


def error_result(message: str) -> InvocationResult:
    return InvocationResult(content=[ContentBlock(message)], is_error=True)


def operation_error(operation: str, exc: BaseException) -> InvocationResult:
    """``Error <operation>: <message>`` for an exception caught in a handler."""
    failure = failure_from_exception(exc)
    return error_result(f"Error {operation}: {failure.message}")
