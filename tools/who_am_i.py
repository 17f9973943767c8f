from tools._schema import object_schema

TOOL_NAME = "prolific_who_am_i"

TOOL_SPEC = {
    "name": TOOL_NAME,
    "description": "Get information about the current user.",
    "inputSchema": object_schema(),
    "annotations": {"title": "Who am I?"},
}


def run(api, args: dict):
    return api.who_am_i()
