"""
Tool contracts and the registry that validates arguments before dispatch.

A contract lists the fields a tool accepts. ``ToolRegistry.dispatch`` checks raw
host arguments against that list, fills in defaults and only then calls the
handler. Every failure on this path comes back as an error
``InvocationResult``; nothing raised here reaches the transport.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Tuple

from solana_mcp.envelope import InvocationResult, error_result, failure_from_exception

logger = logging.getLogger(__name__)

STRING = "string"
INTEGER = "integer"
BOOLEAN = "boolean"
FIELD_KINDS = (STRING, INTEGER, BOOLEAN)

ToolHandler = Callable[..., Awaitable[InvocationResult]]

_MISSING = object()


class RegistrationError(Exception):
    """Raised when a tool cannot be registered (fatal at startup)."""


class ToolInputError(Exception):
    """Raised when invocation arguments do not satisfy a tool contract."""


@dataclass(frozen=True, slots=True)
class FieldSpec:
    name: str
    kind: str
    description: str = ""
    required: bool = True
    default: Any = None
    bounds: Optional[Tuple[int, int]] = None

    def __post_init__(self) -> None:
        if self.kind not in FIELD_KINDS:
            raise ValueError(f"Unsupported field kind {self.kind!r} for {self.name}")
        if self.required and self.default is not None:
            raise ValueError(f"Required field {self.name} cannot declare a default")
        if self.bounds is not None and self.kind != INTEGER:
            raise ValueError(f"Bounds are only supported on integer fields ({self.name})")

    def json_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"type": self.kind}
        if self.description:
            schema["description"] = self.description
        if self.bounds is not None:
            schema["minimum"], schema["maximum"] = self.bounds
        if self.default is not None:
            schema["default"] = self.default
        return schema

    def coerce(self, value: Any) -> Any:
        """Return ``value`` as this field's kind, or raise ToolInputError."""
        if self.kind == STRING:
            if not isinstance(value, str):
                raise ToolInputError(f"Invalid argument '{self.name}': expected string")
            return value
        if self.kind == BOOLEAN:
            if not isinstance(value, bool):
                raise ToolInputError(f"Invalid argument '{self.name}': expected boolean")
            return value

        # bool is an int subclass; JSON true/false is never a number here.
        if isinstance(value, bool):
            raise ToolInputError(f"Invalid argument '{self.name}': expected integer")
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        if not isinstance(value, int):
            raise ToolInputError(f"Invalid argument '{self.name}': expected integer")
        if self.bounds is not None:
            low, high = self.bounds
            if not low <= value <= high:
                raise ToolInputError(
                    f"Invalid argument '{self.name}': must be between {low} and {high}"
                )
        return value


@dataclass(frozen=True, slots=True)
class ToolContract:
    name: str
    description: str
    fields: Tuple[FieldSpec, ...] = ()

    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {spec.name: spec.json_schema() for spec in self.fields},
            "required": [spec.name for spec in self.fields if spec.required],
        }

    def validate(self, arguments: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """Check raw arguments; unknown keys are dropped."""
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            raise ToolInputError("Invalid arguments: expected an object")

        validated: Dict[str, Any] = {}
        for spec in self.fields:
            raw = arguments.get(spec.name, _MISSING)
            if raw is _MISSING or raw is None:
                if spec.required:
                    raise ToolInputError(f"Missing required argument: {spec.name}")
                validated[spec.name] = spec.default
                continue
            validated[spec.name] = spec.coerce(raw)
        return validated


@dataclass(slots=True)
class RegisteredTool:
    contract: ToolContract
    handler: ToolHandler


@dataclass(slots=True)
class ToolRegistry:
    _tools: Dict[str, RegisteredTool] = field(default_factory=dict)

    def register(self, contract: ToolContract, handler: ToolHandler) -> None:
        if contract.name in self._tools:
            raise RegistrationError(f"Tool already registered: {contract.name}")
        self._tools[contract.name] = RegisteredTool(contract=contract, handler=handler)

    def get(self, name: str) -> Optional[RegisteredTool]:
        return self._tools.get(name)

    def contracts(self) -> List[ToolContract]:
        return [tool.contract for tool in self._tools.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    async def dispatch(
        self, tool_name: str, raw_arguments: Optional[Mapping[str, Any]] = None
    ) -> InvocationResult:
        tool = self._tools.get(tool_name)
        if tool is None:
            return error_result(f"Unknown tool: {tool_name}")

        try:
            arguments = tool.contract.validate(raw_arguments)
        except ToolInputError as exc:
            return error_result(str(exc))

        try:
            return await tool.handler(**arguments)
        except Exception as exc:
            # Handlers shape their own errors; this only catches handler bugs.
            logger.exception("Unhandled error in tool %s", tool_name)
            return error_result(f"Error calling {tool_name}: {failure_from_exception(exc).message}")
