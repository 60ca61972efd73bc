from __future__ import annotations
from typing import Any, Mapping

from core.errors import InvocationError
from core.models import ToolCall, ToolDefinition


def _assert(cond: bool, msg: str) -> None:
    if not cond:
        raise InvocationError(msg)


def parse_call(definition: ToolDefinition, arguments: Any) -> ToolCall:
    """Check raw host arguments against a catalog entry and type them.

    Only the presence of the identifier is enforced; everything else is
    forwarded as given.
    """
    if definition.requires_id:
        _assert(
            isinstance(arguments, Mapping) and "id" in arguments,
            "Missing required parameter: id",
        )

    if arguments is None:
        arguments = {}
    _assert(isinstance(arguments, Mapping), "Arguments must be an object")

    args = dict(arguments)
    tool_id = None
    if definition.requires_id:
        # A null id is forwarded, not rejected; render it the way JSON spells it.
        tool_id = "null" if args["id"] is None else str(args["id"])
    return ToolCall(definition=definition, arguments=args, id=tool_id)
