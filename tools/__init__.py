"""
Tool registry and dispatcher.

`list_tools()` answers "list tools" queries; `dispatch()` answers tool calls.
Per-call failures never escape `dispatch()`: they come back as an
`{"error": ...}` payload inside a normal response envelope.
"""
import json
import logging
from typing import Any, Dict, List, Optional

from .loader import load_tools

logger = logging.getLogger("tools")

TOOL_RUNNERS, TOOL_SPECS = load_tools()


def list_tools() -> List[Dict[str, Any]]:
    return list(TOOL_SPECS.values())


def get_tool_spec(tool_name: str) -> Optional[Dict[str, Any]]:
    return TOOL_SPECS.get(tool_name)


def run_tool(tool_name: str, args: Optional[dict], api) -> dict:
    if args is None:
        return {"ok": False, "error": "No arguments provided"}

    if tool_name not in TOOL_RUNNERS:
        return {"ok": False, "error": f"Unknown tool: {tool_name}"}

    try:
        return {"ok": True, "result": TOOL_RUNNERS[tool_name](api, args)}
    except Exception as e:
        logger.error(f"Error executing tool {tool_name}: {e}")
        return {"ok": False, "error": str(e)}


def to_text_content(payload: Any) -> dict:
    return {"content": [{"type": "text", "text": json.dumps(payload)}]}


def dispatch(tool_name: str, args: Optional[dict], api) -> dict:
    logger.info(f"Received tool call: {tool_name}")
    outcome = run_tool(tool_name, args, api)
    if outcome["ok"]:
        return to_text_content(outcome["result"])
    return to_text_content({"error": outcome["error"]})
