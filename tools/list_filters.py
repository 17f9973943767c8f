from tools._schema import object_schema

TOOL_NAME = "prolific_list_filters"

TOOL_SPEC = {
    "name": TOOL_NAME,
    "description": "List all filters available for your study.",
    "inputSchema": object_schema(),
    "annotations": {"title": "List all Filters"},
}


def run(api, args: dict):
    return api.list_filters()
