from __future__ import annotations
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from urllib.parse import urlencode

OPERATIONS = ("list", "get", "create", "update", "delete")
ID_OPERATIONS = ("get", "update", "delete")


@dataclass(frozen=True)
class ParamSpec:
    type: str  # "string" | "number"
    description: str
    required: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "description": self.description}


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    parameters: Dict[str, ParamSpec]
    resource: str
    operation: str  # one of OPERATIONS

    @property
    def requires_id(self) -> bool:
        return self.operation in ID_OPERATIONS

    @property
    def required(self) -> list[str]:
        return [k for k, p in self.parameters.items() if p.required]

    def to_spec(self) -> Dict[str, Any]:
        """MCP-style tool descriptor, as served to the host on list-tools."""
        schema: Dict[str, Any] = {
            "type": "object",
            "properties": {k: p.to_dict() for k, p in self.parameters.items()},
        }
        if self.required:
            schema["required"] = self.required
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": schema,
        }


@dataclass(frozen=True)
class ToolCall:
    definition: ToolDefinition
    arguments: Dict[str, Any]
    id: Optional[str] = None


@dataclass(frozen=True)
class RequestSpec:
    method: str
    path: str
    query: Dict[str, str] = field(default_factory=dict)
    body: Optional[Any] = None

    def url(self, base_url: str) -> str:
        url = f"{base_url}{self.path}"
        if self.query:
            url += f"?{urlencode(self.query)}"
        return url

    def json_body(self) -> Optional[str]:
        if self.body is None:
            return None
        return json.dumps(self.body, ensure_ascii=False)


@dataclass(frozen=True)
class Outcome:
    text: str = ""
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @staticmethod
    def success(text: str) -> "Outcome":
        return Outcome(text=text)

    @staticmethod
    def failure(error: Exception) -> "Outcome":
        return Outcome(error=error)

    def to_envelope(self) -> Dict[str, Any]:
        if self.ok:
            text = self.text
        else:
            message = str(self.error) or "Unknown error"
            text = f"Error: {message}"
        return {"content": [{"type": "text", "text": text}]}


__all__ = [
    "OPERATIONS",
    "ID_OPERATIONS",
    "ParamSpec",
    "ToolDefinition",
    "ToolCall",
    "RequestSpec",
    "Outcome",
]
