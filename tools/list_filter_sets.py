from core.tool_args import WorkspaceListArgs
from tools._schema import object_schema, page_props

TOOL_NAME = "prolific_list_filter_sets"

TOOL_SPEC = {
    "name": TOOL_NAME,
    "description": "List all filter sets in a workspace, with optional pagination.",
    "inputSchema": object_schema(
        {
            "workspace_id": {
                "type": "string",
                "description": "The ID of the workspace to list filter sets for",
            },
            **page_props("filter sets"),
        },
        required=["workspace_id"],
    ),
    "annotations": {"title": "List all Filter Sets"},
}


def run(api, args: dict):
    return api.list_filter_sets(WorkspaceListArgs.from_args(args))
