from core.tool_args import WorkspaceListArgs
from tools._schema import object_schema, page_props

TOOL_NAME = "prolific_list_campaigns"

TOOL_SPEC = {
    "name": TOOL_NAME,
    "description": "List all campaigns in a workspace, with optional pagination.",
    "inputSchema": object_schema(
        {
            "workspace_id": {
                "type": "string",
                "description": "The ID of the workspace to list campaigns for",
            },
            **page_props("campaigns"),
        },
        required=["workspace_id"],
    ),
    "annotations": {"title": "List all Campaigns"},
}


def run(api, args: dict):
    return api.list_campaigns(WorkspaceListArgs.from_args(args))
