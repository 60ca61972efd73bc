from __future__ import annotations
import asyncio
import logging
from typing import Any, Dict, Optional

from core.config import Settings
from core.errors import InvocationError, RogerRogerError
from core.models import Outcome, ToolDefinition
from core.rogerroger_api import RogerRogerAPI
from tools.loader import load_tools
from tools.schema import parse_call

logger = logging.getLogger(__name__)


class Dispatcher:
    """Routes a tool invocation to its handler and folds the result into an envelope.

    invoke() never raises: unknown tools, bad arguments, config, transport,
    HTTP and decode failures all come back as a single "Error: ..." text item.
    """

    def __init__(
        self,
        settings: Settings,
        definitions: Optional[Dict[str, ToolDefinition]] = None,
        handlers: Optional[Dict[str, Any]] = None,
    ) -> None:
        if definitions is None or handlers is None:
            definitions, handlers = load_tools()
        self.settings = settings
        self.definitions = definitions
        self.handlers = handlers
        self.api = RogerRogerAPI(settings)

    async def run(self, tool_name: str, arguments: Any = None) -> Outcome:
        try:
            definition = self.definitions.get(tool_name)
            if definition is None:
                raise InvocationError(f"Unknown tool: {tool_name}")
            call = parse_call(definition, arguments)
            handler = self.handlers[tool_name]
            # requests blocks; keep it off the event loop.
            text = await asyncio.to_thread(handler, self.api, call)
            return Outcome.success(text)
        except RogerRogerError as e:
            logger.warning("tool=%s failed: %s", tool_name, e)
            return Outcome.failure(e)
        except Exception as e:
            logger.exception("tool=%s crashed", tool_name)
            return Outcome.failure(e)

    async def invoke(self, tool_name: str, arguments: Any = None) -> Dict[str, Any]:
        logger.info("tool=%s called", tool_name)
        outcome = await self.run(tool_name, arguments)
        return outcome.to_envelope()
