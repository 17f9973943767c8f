from core.tool_args import DuplicateStudyArgs
from tools._schema import object_schema

TOOL_NAME = "prolific_duplicate_study"

TOOL_SPEC = {
    "name": TOOL_NAME,
    "description": "Duplicate an existing study by ID.",
    "inputSchema": object_schema(
        {"study_id": {"type": "string", "description": "The ID of the study to duplicate"}},
        required=["study_id"],
    ),
    "annotations": {"title": "Duplicate a Study"},
}


def run(api, args: dict):
    return api.duplicate_study(DuplicateStudyArgs.from_args(args))
