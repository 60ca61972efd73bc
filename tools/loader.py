import importlib
import logging
import pkgutil

from core.errors import CatalogError

logger = logging.getLogger(__name__)

_NOT_RESOURCES = ("loader", "resource", "schema", "dispatcher", "__init__")


def load_tools():
    """
    Auto-discover resource modules inside the tools/ package.
    Each resource module must expose:
      - TOOL_DEFINITIONS (list[ToolDefinition])
      - HANDLERS (dict: tool name -> handler(api, call) -> str)

    Returns (definitions, handlers), both keyed by tool name, in discovery order.
    Raises CatalogError if a name is declared twice or a definition and its
    handler do not pair up one-to-one.
    """
    definitions = {}
    handlers = {}

    package_name = __name__.split(".")[0]  # "tools"
    package = importlib.import_module(package_name)

    for mod in sorted(pkgutil.iter_modules(package.__path__), key=lambda m: m.name):
        name = mod.name
        if name in _NOT_RESOURCES:
            continue

        m = importlib.import_module(f"{package_name}.{name}")

        mod_defs = getattr(m, "TOOL_DEFINITIONS", None)
        mod_handlers = getattr(m, "HANDLERS", None)
        if mod_defs is None or mod_handlers is None:
            continue

        for d in mod_defs:
            if d.name in definitions:
                raise CatalogError(f"Duplicate tool name: {d.name}", [d.name])
            definitions[d.name] = d
        for tool_name, runner in mod_handlers.items():
            if tool_name in handlers or not callable(runner):
                raise CatalogError(f"Bad handler for tool: {tool_name}", [tool_name])
            handlers[tool_name] = runner

    unpaired = sorted(set(definitions) ^ set(handlers))
    if unpaired:
        raise CatalogError(f"Catalog and handlers out of sync: {', '.join(unpaired)}", unpaired)

    logger.debug("Loaded %d tools", len(definitions))
    return definitions, handlers
