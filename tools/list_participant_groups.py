from core.tool_args import ListParticipantGroupsArgs
from tools._schema import object_schema, page_props

TOOL_NAME = "prolific_list_participant_groups"

TOOL_SPEC = {
    "name": TOOL_NAME,
    "description": "List all participant groups in a project, with optional pagination.",
    "inputSchema": object_schema(
        {
            "project_id": {
                "type": "string",
                "description": "The ID of the project to list participant groups for",
            },
            **page_props("participant groups"),
        },
        required=["project_id"],
    ),
    "annotations": {"title": "List all Participant Groups"},
}


def run(api, args: dict):
    return api.list_participant_groups(ListParticipantGroupsArgs.from_args(args))
