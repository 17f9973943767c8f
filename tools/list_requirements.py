from tools._schema import object_schema

TOOL_NAME = "prolific_list_requirements"

TOOL_SPEC = {
    "name": TOOL_NAME,
    "description": "List all eligibility requirements available for your study.",
    "inputSchema": object_schema(),
    "annotations": {"title": "List all Requirements"},
}


def run(api, args: dict):
    return api.list_requirements()
