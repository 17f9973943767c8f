from core.tool_args import ListStudiesArgs
from tools._schema import object_schema

TOOL_NAME = "prolific_list_studies"

TOOL_SPEC = {
    "name": TOOL_NAME,
    "description": "List all studies, optionally filtered by status or project.",
    "inputSchema": object_schema(
        {
            "status": {
                "type": "string",
                "description": "Filter studies by status (active, unpublished, completed, all)",
            },
            "project_id": {"type": "string", "description": "Filter studies by project ID"},
        }
    ),
    "annotations": {"title": "List Studies"},
}


def run(api, args: dict):
    return api.list_studies(ListStudiesArgs.from_args(args))
