from .loader import load_tools

TOOL_DEFINITIONS, TOOL_HANDLERS = load_tools()
TOOL_SPECS = {name: d.to_spec() for name, d in TOOL_DEFINITIONS.items()}

from .dispatcher import Dispatcher  # noqa: E402

__all__ = ["TOOL_DEFINITIONS", "TOOL_HANDLERS", "TOOL_SPECS", "Dispatcher", "load_tools"]
