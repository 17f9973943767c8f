from core.tool_args import STUDY_ACTIONS, TransitionStudyArgs
from tools._schema import object_schema

TOOL_NAME = "prolific_transition_study"

TOOL_SPEC = {
    "name": TOOL_NAME,
    "description": "Transition a study to a new status (publish, pause, start, stop).",
    "inputSchema": object_schema(
        {
            "study_id": {"type": "string", "description": "The ID of the study to transition"},
            "action": {
                "type": "string",
                "enum": list(STUDY_ACTIONS),
                "description": "The action to perform on the study",
            },
            "silent": {"type": "boolean", "description": "Suppress output after transition"},
        },
        required=["study_id", "action"],
    ),
    "annotations": {"title": "Transition a Study"},
}


def run(api, args: dict):
    return api.transition_study(TransitionStudyArgs.from_args(args))
