import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastmcp import FastMCP
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent
from pydantic import Field

from core.config import LOG_LEVEL, Settings
from tools import Dispatcher

logger = logging.getLogger("rogerroger_mcp")


def utc_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


def setup_logging(level: str = LOG_LEVEL) -> None:
    # stdout is the MCP stream; logs go to stderr.
    logging.basicConfig(
        level=getattr(logging, (level or "INFO").upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )


# -----------------------------
# MCP
# -----------------------------
class CatalogTool(Tool):
    """A catalog entry served as-is; its input schema is the catalog's, not derived from a signature."""

    dispatcher: Any = Field(exclude=True)

    async def run(self, arguments: Dict[str, Any]) -> ToolResult:
        envelope = await self.dispatcher.invoke(self.name, arguments)
        return ToolResult(
            content=[TextContent(type="text", text=item["text"]) for item in envelope["content"]]
        )


def build_server(settings: Settings, dispatcher: Dispatcher | None = None) -> FastMCP:
    dispatcher = dispatcher or Dispatcher(settings)
    mcp = FastMCP(name=settings.service_name)
    for d in dispatcher.definitions.values():
        spec = d.to_spec()
        mcp.add_tool(
            CatalogTool(
                name=spec["name"],
                description=spec["description"],
                parameters=spec["inputSchema"],
                dispatcher=dispatcher,
            )
        )
    return mcp


# -----------------------------
# FastAPI (health + CORS + MCP over HTTP)
# -----------------------------
def build_http_app(mcp: FastMCP, settings: Settings) -> FastAPI:
    mcp_app = mcp.http_app(path="/mcp")
    app = FastAPI(title=settings.service_name, version=settings.version, lifespan=mcp_app.lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    def root():
        return {
            "ok": True,
            "service": settings.service_name,
            "version": settings.version,
            "ts": utc_iso(),
            "base_url": settings.base_url,
            "api_key_set": bool(settings.api_key),
            "mcp": "/mcp",
        }

    @app.get("/health")
    def health():
        return {"ok": True, "ts": utc_iso(), "service": settings.service_name, "version": settings.version}

    app.mount("/", mcp_app)
    return app


SETTINGS = Settings.from_env()
mcp = build_server(SETTINGS)
app = build_http_app(mcp, SETTINGS)


def main() -> None:
    setup_logging()
    logger.info("%s %s starting on stdio (base_url=%s)", SETTINGS.service_name, SETTINGS.version, SETTINGS.base_url)
    if not SETTINGS.api_key:
        logger.warning("ROGERROGER_API_KEY is not set; every tool call will fail until it is")
    try:
        mcp.run()
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    sys.exit(0)


if __name__ == "__main__":
    main()
