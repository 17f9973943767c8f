from core.tool_args import ListSubmissionsArgs
from tools._schema import object_schema, page_props

TOOL_NAME = "prolific_list_submissions"

TOOL_SPEC = {
    "name": TOOL_NAME,
    "description": "List submissions for a given study, with optional pagination and field selection.",
    "inputSchema": object_schema(
        {
            "study_id": {
                "type": "string",
                "description": "The ID of the study to fetch submissions for",
            },
            **page_props("submissions"),
            "csv": {"type": "boolean", "description": "Return results in CSV format"},
            "fields": {
                "type": "string",
                "description": "Comma-separated list of fields to include",
            },
        },
        required=["study_id"],
    ),
    "annotations": {"title": "List Submissions for a Study"},
}


def run(api, args: dict):
    return api.list_submissions(ListSubmissionsArgs.from_args(args))
