import logging
import sys
from typing import Any, Dict, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastmcp import FastMCP
from fastmcp.tools import Tool, ToolResult
from mcp.types import TextContent, ToolAnnotations
from pydantic import Field

from core.config import MCP_TRANSPORT, SERVICE_NAME, VERSION
from core.errors import ConfigError
from core.io_utils import utc_now_iso
from core.logging_utils import setup_logging
from core.prolific_api import ProlificAPI
from tools import dispatch, list_tools

logger = logging.getLogger("app")


# -----------------------------
# MCP tools
# -----------------------------
class ProlificTool(Tool):
    """One registry entry exposed over MCP; every call goes through dispatch()."""

    api: Any = Field(default=None, exclude=True)

    @classmethod
    def from_spec(cls, spec: Dict[str, Any], api: ProlificAPI) -> "ProlificTool":
        title = (spec.get("annotations") or {}).get("title")
        return cls(
            name=spec["name"],
            description=spec["description"],
            parameters=spec["inputSchema"],
            annotations=ToolAnnotations(title=title) if title else None,
            api=api,
        )

    async def run(self, arguments: Dict[str, Any]) -> ToolResult:
        response = dispatch(self.name, arguments, self.api)
        return ToolResult(content=[TextContent(**block) for block in response["content"]])


def build_mcp(api: ProlificAPI) -> FastMCP:
    mcp = FastMCP(name=SERVICE_NAME)
    for spec in list_tools():
        mcp.add_tool(ProlificTool.from_spec(spec, api))
    return mcp


# -----------------------------
# FastAPI (health + CORS + MCP over SSE)
# -----------------------------
def create_app(api: Optional[ProlificAPI] = None) -> FastAPI:
    api = api or ProlificAPI()
    mcp_app = build_mcp(api).http_app(path="/sse", transport="sse")

    app = FastAPI(title=SERVICE_NAME, version=VERSION, lifespan=mcp_app.lifespan)
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
            "message": "Prolific MCP Gateway alive",
            "service": SERVICE_NAME,
            "version": VERSION,
            "ts": utc_now_iso(),
            "base_url": api.base,
            "tools": [spec["name"] for spec in list_tools()],
            "mcp_sse": "/sse/",
        }

    @app.get("/health")
    def health():
        return {"ok": True, "ts": utc_now_iso(), "service": SERVICE_NAME, "version": VERSION}

    # Mount SSE endpoints (gives /sse/)
    app.mount("/", mcp_app)
    return app


def main() -> int:
    setup_logging()
    logger.info(f"Starting {SERVICE_NAME} {VERSION}")
    try:
        api = ProlificAPI()
    except ConfigError as e:
        logger.error(f"Fatal error initializing ProlificAPI: {e}")
        return 1

    mcp = build_mcp(api)
    logger.info(f"Serving {len(list_tools())} tools over {MCP_TRANSPORT}")
    mcp.run(transport=MCP_TRANSPORT)
    return 0


if __name__ == "__main__":
    sys.exit(main())
