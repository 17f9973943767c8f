from core.tool_args import ViewStudyArgs
from tools._schema import object_schema

TOOL_NAME = "prolific_view_study"

TOOL_SPEC = {
    "name": TOOL_NAME,
    "description": "View details for a specific study by ID.",
    "inputSchema": object_schema(
        {
            "study_id": {"type": "string", "description": "The ID of the study to view"},
            "web": {"type": "boolean", "description": "Open the study in the web application"},
        },
        required=["study_id"],
    ),
    "annotations": {"title": "View a Study"},
}


def run(api, args: dict):
    return api.view_study(ViewStudyArgs.from_args(args))
