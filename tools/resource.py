from __future__ import annotations
import json
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Callable, Dict, Optional, Tuple
from urllib.parse import quote

from core.models import OPERATIONS, ParamSpec, RequestSpec, ToolCall, ToolDefinition
from core.rogerroger_api import RogerRogerAPI

Handler = Callable[[RogerRogerAPI, ToolCall], str]

PAGINATION_PARAMS: Dict[str, ParamSpec] = {
    "page": ParamSpec("number", "Page number to retrieve (optional)"),
    "itemsPerPage": ParamSpec("number", "Number of records per page (optional)"),
}


@dataclass(frozen=True)
class Resource:
    """One CRM entity category and the CRUD tools generated for it.

    singular/plural are the tool-name stems (get_person / get_people),
    display is the word used in success messages.
    """

    singular: str
    plural: str
    display: str
    path: str
    fields: Dict[str, ParamSpec]
    descriptions: Dict[str, str]
    update_method: Optional[str] = None
    query_params: Dict[str, ParamSpec] = field(default_factory=lambda: dict(PAGINATION_PARAMS))

    @property
    def operations(self) -> Tuple[str, ...]:
        return tuple(op for op in OPERATIONS if op in self.descriptions)

    def tool_name(self, operation: str) -> str:
        if operation == "list":
            return f"get_{self.plural}"
        return f"{operation}_{self.singular}"


def _id_param(resource: Resource, verb: str) -> ParamSpec:
    return ParamSpec("string", f"The ID of the {resource.singular} to {verb}", required=True)


def build_definitions(resource: Resource) -> list[ToolDefinition]:
    defs = []
    for op in resource.operations:
        if op == "list":
            params = dict(resource.query_params)
        elif op == "get":
            params = {"id": _id_param(resource, "retrieve")}
        elif op == "create":
            params = dict(resource.fields)
        elif op == "update":
            params = {"id": _id_param(resource, "update")}
            # Required-on-create fields are optional on update.
            for k, p in resource.fields.items():
                params[k] = ParamSpec(p.type, p.description)
        else:
            params = {"id": _id_param(resource, "delete")}

        defs.append(
            ToolDefinition(
                name=resource.tool_name(op),
                description=resource.descriptions[op],
                parameters=params,
                resource=resource.plural,
                operation=op,
            )
        )
    return defs


def query_value(v: Any) -> str:
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    return str(v)


def build_request(resource: Resource, call: ToolCall) -> RequestSpec:
    op = call.definition.operation
    # One path segment: "/" and spaces in an id are percent-encoded, never interpolated raw.
    item_path = f"{resource.path}/{quote(call.id or '', safe='')}"

    if op == "list":
        query = {
            k: query_value(call.arguments[k])
            for k in resource.query_params
            if call.arguments.get(k)
        }
        return RequestSpec("GET", resource.path, query=query)
    if op == "get":
        return RequestSpec("GET", item_path)
    if op == "create":
        return RequestSpec("POST", resource.path, body=dict(call.arguments))
    if op == "update":
        body = {k: v for k, v in call.arguments.items() if k != "id"}
        return RequestSpec(resource.update_method or "PUT", item_path, body=body)
    if op == "delete":
        return RequestSpec("DELETE", item_path)
    raise ValueError(f"Unsupported operation: {op}")


def pretty(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


def format_result(resource: Resource, call: ToolCall, payload: Any) -> str:
    op = call.definition.operation
    if op == "create":
        return f"{resource.display} created successfully: {pretty(payload)}"
    if op == "update":
        return f"{resource.display} updated successfully: {pretty(payload)}"
    if op == "delete":
        return f"{resource.display} with ID {call.id} deleted successfully"
    return pretty(payload)


def handle(api: RogerRogerAPI, call: ToolCall, *, resource: Resource) -> str:
    spec = build_request(resource, call)
    # Delete responses are not read for content.
    payload = api.execute(spec, parse=call.definition.operation != "delete")
    return format_result(resource, call, payload)


def build_handlers(resource: Resource) -> Dict[str, Handler]:
    return {resource.tool_name(op): partial(handle, resource=resource) for op in resource.operations}
