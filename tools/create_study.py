from core.tool_args import CreateStudyArgs
from tools._schema import object_schema

TOOL_NAME = "prolific_create_study"

TOOL_SPEC = {
    "name": TOOL_NAME,
    "description": (
        "Create a new study from a YAML/JSON template file or a JSON object. "
        "Optionally publish and/or suppress output."
    ),
    "inputSchema": object_schema(
        {
            "template_path": {
                "type": "string",
                "description": "Path to a YAML or JSON file describing the study (optional)",
            },
            "study_body": {
                "type": "object",
                "description": "JSON object describing the study (optional)",
            },
            "publish": {
                "type": "boolean",
                "description": "Publish the study immediately after creation",
            },
            "silent": {"type": "boolean", "description": "Suppress output after creation"},
        },
        anyOf=[{"required": ["template_path"]}, {"required": ["study_body"]}],
    ),
    "annotations": {"title": "Create new Study"},
}


def run(api, args: dict):
    return api.create_study(CreateStudyArgs.from_args(args))
