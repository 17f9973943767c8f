from core.tool_args import PageArgs
from tools._schema import object_schema, page_props

TOOL_NAME = "prolific_list_workspaces"

TOOL_SPEC = {
    "name": TOOL_NAME,
    "description": "List all workspaces your token has access to, with optional pagination.",
    "inputSchema": object_schema(page_props("workspaces")),
    "annotations": {"title": "List all Workspaces"},
}


def run(api, args: dict):
    return api.list_workspaces(PageArgs.from_args(args))
